"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations
- Incremental store star-rating maintenance
"""

from .review_management import (
    get_review,
    create_review,
    update_review,
    delete_review,
)
from .rating_aggregation import (
    average_after_add,
    average_after_edit,
    average_after_remove,
)
from .exceptions import (
    ReviewsServiceError,
    IncompleteReviewError,
    InvalidGradeError,
    StoreNotFoundError,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
)

__all__ = [
    # Review Management Services
    'get_review',
    'create_review',
    'update_review',
    'delete_review',
    # Rating Aggregation
    'average_after_add',
    'average_after_edit',
    'average_after_remove',
    # Exceptions
    'ReviewsServiceError',
    'IncompleteReviewError',
    'InvalidGradeError',
    'StoreNotFoundError',
    'ReviewNotFoundError',
    'UnauthorizedReviewActionError',
]
