"""
Domain exceptions for reviews app.

Each exception carries the HTTP status it maps to, so views can let them
propagate to the shared API exception handler.
"""
from rest_framework.exceptions import APIException


class ReviewsServiceError(APIException):
    """Base exception for all reviews service errors."""
    default_detail = 'Review operation failed.'
    default_code = 'review_error'


class IncompleteReviewError(ReviewsServiceError):
    """Grade or content was not supplied."""
    status_code = 400
    default_detail = 'Grade and content are required.'
    default_code = 'incomplete_review'


class InvalidGradeError(ReviewsServiceError):
    """Grade must be a whole number between 1 and 5."""
    status_code = 400
    default_detail = 'Grade must be a whole number between 1 and 5.'
    default_code = 'invalid_grade'


class StoreNotFoundError(ReviewsServiceError):
    """Store being reviewed does not exist."""
    status_code = 404
    default_detail = 'Store not found.'
    default_code = 'store_not_found'


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist."""
    status_code = 404
    default_detail = 'Review not found.'
    default_code = 'review_not_found'


class UnauthorizedReviewActionError(ReviewsServiceError):
    """User cannot modify this review."""
    status_code = 403
    default_detail = 'You can only change your own reviews.'
    default_code = 'unauthorized_review_action'
