"""Review management service - CRUD operations that keep store ratings current."""

import logging
from typing import Any, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.reviews.models import Review
from apps.stores.models import Store
from .exceptions import (
    IncompleteReviewError,
    InvalidGradeError,
    StoreNotFoundError,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
)
from .rating_aggregation import (
    average_after_add,
    average_after_edit,
    average_after_remove,
)

logger = logging.getLogger(__name__)


def _clean_input(grade: Any, content: Any) -> tuple[int, str]:
    if not grade or not content:
        raise IncompleteReviewError()

    if isinstance(grade, bool) or (isinstance(grade, float) and not grade.is_integer()):
        raise InvalidGradeError()
    try:
        grade = int(grade)
    except (TypeError, ValueError):
        raise InvalidGradeError()
    if not (1 <= grade <= 5):
        raise InvalidGradeError()

    return grade, str(content)


def _lock_store(store_id: UUID) -> Store:
    try:
        return Store.objects.select_for_update().get(id=store_id)
    except Store.DoesNotExist:
        raise StoreNotFoundError()


def _lock_own_review(review_id: UUID, user: Optional[User]) -> Review:
    try:
        review = Review.objects.select_for_update().get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError()

    if user is None or review.author_id != user.id:
        logger.warning("User %s tried to change review %s", getattr(user, 'id', None), review_id)
        raise UnauthorizedReviewActionError()

    return review


def get_review(*, review_id: UUID) -> Optional[Review]:
    """Return the review, or None if it doesn't exist."""
    return Review.objects.filter(id=review_id).first()


@transaction.atomic
def create_review(*, store_id: UUID, author: User, grade: Any, content: Any) -> Review:
    """
    Create a review and fold its grade into the store rating.

    The store row is locked for the whole operation, so concurrent reviews
    of the same store are applied one after another.

    Args:
        store_id: UUID of store being reviewed
        author: User writing the review
        grade: Grade 1-5
        content: Review text

    Returns:
        Created Review instance

    Raises:
        IncompleteReviewError: If grade or content is missing
        InvalidGradeError: If grade is not a whole number in 1-5
        StoreNotFoundError: If store doesn't exist
    """
    grade, content = _clean_input(grade, content)
    store = _lock_store(store_id)
    count = store.reviews.count()

    review = Review.objects.create(
        store=store,
        author=author,
        grade=grade,
        content=content,
        author_nickname=author.nickname,
        author_name=author.name,
    )

    store.star_rating = average_after_add(average=store.star_rating, count=count, grade=grade)
    store.save(update_fields=['star_rating', 'updated_at'])

    logger.info(
        "Review %s added to store %s, rating now %.3f over %d reviews",
        review.id, store.id, store.star_rating, count + 1,
    )
    return review


@transaction.atomic
def update_review(*, review_id: UUID, user: Optional[User], grade: Any, content: Any) -> Store:
    """
    Change a review's grade and content and adjust the store rating.

    Args:
        review_id: UUID of review to update
        user: User making the update (must be author)
        grade: New grade 1-5
        content: New review text

    Returns:
        The store as it is after the rating update

    Raises:
        IncompleteReviewError: If grade or content is missing
        InvalidGradeError: If grade is not a whole number in 1-5
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    grade, content = _clean_input(grade, content)
    review = _lock_own_review(review_id, user)
    store = _lock_store(review.store_id)

    previous_grade = review.grade
    review.grade = grade
    review.content = content
    review.save(update_fields=['grade', 'content', 'updated_at'])

    store.star_rating = average_after_edit(
        average=store.star_rating,
        count=store.reviews.count(),
        previous_grade=previous_grade,
        grade=grade,
    )
    store.save(update_fields=['star_rating', 'updated_at'])

    logger.info(
        "Review %s regraded %d -> %d, store %s rating now %.3f",
        review.id, previous_grade, grade, store.id, store.star_rating,
    )
    return store


@transaction.atomic
def delete_review(*, review_id: UUID, user: Optional[User]) -> None:
    """
    Delete a review and take its grade out of the store rating.

    Args:
        review_id: UUID of review to delete
        user: User making the deletion (must be author)

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    review = _lock_own_review(review_id, user)
    store = _lock_store(review.store_id)

    count = store.reviews.count()
    store.star_rating = average_after_remove(average=store.star_rating, count=count, grade=review.grade)
    store.save(update_fields=['star_rating', 'updated_at'])

    review.delete()

    logger.info(
        "Review %s removed from store %s, rating now %.3f over %d reviews",
        review_id, store.id, store.star_rating, count - 1,
    )
