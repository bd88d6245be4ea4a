"""Comment management service - create, read and delete board comments."""

import logging
from typing import Optional
from uuid import UUID

from apps.accounts.models import User
from apps.boards.models import Board, Comment
from .exceptions import (
    IncompleteCommentError,
    BoardNotFoundError,
    CommentNotFoundError,
    UnauthorizedCommentActionError,
)

logger = logging.getLogger(__name__)


def create_comment(*, board_id: Optional[UUID], user: Optional[User], content: Optional[str]) -> Comment:
    """
    Create a comment on a board.

    Args:
        board_id: UUID of board being commented on
        user: Authenticated author (None when anonymous)
        content: Comment text

    Returns:
        The saved comment, re-fetched with its author populated

    Raises:
        IncompleteCommentError: If user, content or board id is missing
        BoardNotFoundError: If the board doesn't exist
    """
    if not user or not content or not board_id:
        raise IncompleteCommentError("user, content and board are required")

    if not Board.objects.filter(id=board_id).exists():
        raise BoardNotFoundError("Board not found")

    comment = Comment.objects.create(user=user, board_id=board_id, content=content)
    logger.info("Comment %s added to board %s by user %s", comment.id, board_id, user.id)

    return Comment.objects.select_related('user').get(id=comment.id)


def get_comment(*, comment_id: UUID) -> Comment:
    """
    Retrieve a comment with its author populated.

    Raises:
        CommentNotFoundError: If comment doesn't exist
    """
    try:
        return Comment.objects.select_related('user').get(id=comment_id)
    except Comment.DoesNotExist:
        raise CommentNotFoundError("Comment not found")


def delete_comment(*, comment_id: UUID, user: Optional[User]) -> None:
    """
    Delete a comment. Only its author may do so.

    Raises:
        UnauthorizedCommentActionError: If comment doesn't exist or user is not the author
    """
    comment = Comment.objects.filter(id=comment_id).first()

    if comment is None or user is None or comment.user_id != user.id:
        logger.warning("User %s tried to delete comment %s", getattr(user, 'id', None), comment_id)
        raise UnauthorizedCommentActionError("You can't delete this comment")

    comment.delete()
    logger.info("Comment %s deleted by user %s", comment_id, user.id)
