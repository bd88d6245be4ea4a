"""
Boards services - Business logic layer.

This package contains all business operations for the boards app:
- Board CRUD, region search and paging
- Comment create/read/delete
"""

from .board_management import (
    BoardPage,
    get_board_detail,
    search_boards,
    list_boards_page,
    create_board,
    update_board,
    delete_board,
)
from .comment_management import (
    create_comment,
    get_comment,
    delete_comment,
)
from .pagination import (
    PageWindow,
    compute_page_window,
)
from .exceptions import (
    BoardsServiceError,
    IncompleteBoardError,
    InvalidBoardFieldError,
    BoardNotFoundError,
    UnauthorizedBoardActionError,
    IncompleteCommentError,
    CommentNotFoundError,
    UnauthorizedCommentActionError,
)

__all__ = [
    # Board Management
    'BoardPage',
    'get_board_detail',
    'search_boards',
    'list_boards_page',
    'create_board',
    'update_board',
    'delete_board',
    # Comment Management
    'create_comment',
    'get_comment',
    'delete_comment',
    # Pagination
    'PageWindow',
    'compute_page_window',
    # Exceptions
    'BoardsServiceError',
    'IncompleteBoardError',
    'InvalidBoardFieldError',
    'BoardNotFoundError',
    'UnauthorizedBoardActionError',
    'IncompleteCommentError',
    'CommentNotFoundError',
    'UnauthorizedCommentActionError',
]
