"""Domain exceptions for boards app."""


class BoardsServiceError(Exception):
    """Base exception for all boards service errors."""
    pass


class IncompleteBoardError(BoardsServiceError):
    """A required board field or the uploaded image is missing."""
    pass


class InvalidBoardFieldError(BoardsServiceError):
    """A board field is present but malformed."""
    pass


class BoardNotFoundError(BoardsServiceError):
    """Board does not exist."""
    pass


class UnauthorizedBoardActionError(BoardsServiceError):
    """Board does not exist or belongs to another user."""
    pass


class IncompleteCommentError(BoardsServiceError):
    """Comment author, content or board is missing."""
    pass


class CommentNotFoundError(BoardsServiceError):
    """Comment does not exist."""
    pass


class UnauthorizedCommentActionError(BoardsServiceError):
    """Comment does not exist or belongs to another user."""
    pass
