"""Board management service - CRUD, search and paging for board posts."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import QuerySet
from django.utils.dateparse import parse_date

from apps.accounts.models import User
from apps.boards.models import Board, Comment
from apps.stores.models import Store
from .exceptions import (
    IncompleteBoardError,
    InvalidBoardFieldError,
    BoardNotFoundError,
    UnauthorizedBoardActionError,
)
from .pagination import compute_page_window

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'content', 'meet_date', 'region')


@dataclass
class BoardPage:
    boards: list
    current_page: int
    total_pages: int
    total_count: int


def _parse_meet_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    try:
        parsed = parse_date(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidBoardFieldError("meet_date must be a valid YYYY-MM-DD date")
    return parsed


def _get_store(store_id: Any) -> Store:
    try:
        return Store.objects.get(id=store_id)
    except (Store.DoesNotExist, ValueError, DjangoValidationError):
        raise InvalidBoardFieldError("Store not found")


def get_board_detail(*, board_id: UUID) -> tuple[Board, QuerySet[Comment]]:
    """
    Retrieve a board and its comments, owners populated.

    Args:
        board_id: UUID of board

    Returns:
        Tuple of (board, comments) with comments oldest first

    Raises:
        BoardNotFoundError: If board doesn't exist
    """
    try:
        board = Board.objects.select_related('user', 'store').get(id=board_id)
    except Board.DoesNotExist:
        raise BoardNotFoundError("Board not found")

    comments = (
        Comment.objects
        .filter(board_id=board.id)
        .select_related('user')
        .order_by('created_at')
    )
    return board, comments


def search_boards(*, region: Optional[str]) -> QuerySet[Board]:
    """Boards whose region equals ``region`` exactly, newest first."""
    if not region:
        return Board.objects.none()
    return Board.objects.filter(region=region).order_by('-created_at')


def list_boards_page(*, page: int, per_page: int) -> BoardPage:
    """
    Get one page of boards, newest first, owners populated.

    Args:
        page: 1-based page number
        per_page: Boards per page

    Returns:
        BoardPage with the page's boards and paging totals
    """
    total_count = Board.objects.count()
    window = compute_page_window(total_count=total_count, per_page=per_page, page=page)

    boards = list(
        Board.objects
        .select_related('user')
        .order_by('-created_at')[window.start:window.start + per_page]
    )

    return BoardPage(
        boards=boards,
        current_page=page,
        total_pages=window.total_pages,
        total_count=total_count,
    )


def create_board(
    *,
    user: Optional[User],
    region: Optional[str],
    title: Optional[str],
    content: Optional[str],
    meet_date: Any,
    image: Any,
    store_id: Optional[UUID] = None,
) -> Board:
    """
    Create a new board post.

    Args:
        user: Authenticated author (None when anonymous)
        region: Region the meetup takes place in
        title: Board title
        content: Board body
        meet_date: Meetup date (date or YYYY-MM-DD string)
        image: Uploaded image file
        store_id: Optional store the meetup is at

    Returns:
        Created Board instance

    Raises:
        IncompleteBoardError: If any required field, the image or the user is missing
        InvalidBoardFieldError: If meet_date is malformed or the store is unknown
    """
    if not user or not region or not title or not content or not meet_date or not image:
        raise IncompleteBoardError("region, title, content, meet_date and image are required")

    store = _get_store(store_id) if store_id else None

    board = Board.objects.create(
        user=user,
        store=store,
        region=region,
        title=title,
        content=content,
        meet_date=_parse_meet_date(meet_date),
        image=image,
    )
    logger.info("Board %s created by user %s", board.id, user.id)
    return board


def update_board(*, board_id: UUID, user: Optional[User], fields: Mapping[str, Any]) -> Board:
    """
    Partially update a board.

    Only fields present in ``fields`` are applied, so a supplied empty
    string clears a text field while an omitted field is left untouched.

    Args:
        board_id: UUID of board to update
        user: User making the update (must be owner)
        fields: Submitted values; keys outside title/content/meet_date/region are ignored

    Returns:
        Updated Board instance

    Raises:
        BoardNotFoundError: If board doesn't exist
        UnauthorizedBoardActionError: If user is not the owner
        InvalidBoardFieldError: If meet_date is malformed
    """
    try:
        board = Board.objects.get(id=board_id)
    except Board.DoesNotExist:
        raise BoardNotFoundError("Board not found")

    if user is None or board.user_id != user.id:
        logger.warning("User %s tried to edit board %s", getattr(user, 'id', None), board_id)
        raise UnauthorizedBoardActionError("You can't edit this board")

    updated = []
    for name in EDITABLE_FIELDS:
        if name not in fields:
            continue
        value = fields[name]
        if name == 'meet_date':
            value = _parse_meet_date(value)
        setattr(board, name, value)
        updated.append(name)

    if updated:
        board.save(update_fields=updated + ['updated_at'])

    return board


def delete_board(*, board_id: UUID, user: Optional[User]) -> None:
    """
    Delete a board and, through cascade, its comments.

    Raises:
        UnauthorizedBoardActionError: If board doesn't exist or user is not the owner
    """
    board = Board.objects.filter(id=board_id).first()

    if board is None or user is None or board.user_id != user.id:
        logger.warning("User %s tried to delete board %s", getattr(user, 'id', None), board_id)
        raise UnauthorizedBoardActionError("You can't delete this board")

    board.delete()
    logger.info("Board %s deleted by user %s", board_id, user.id)
