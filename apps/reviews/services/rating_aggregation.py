"""
Incremental star-rating arithmetic.

A store's ``star_rating`` is the mean grade of its reviews. Instead of
rescanning every review, each change folds one grade into (or out of) the
current mean using the review count before the change.
"""

MIN_RATING = 0.0
MAX_RATING = 5.0


def _clamp(value: float) -> float:
    # Keeps float drift from pushing the mean outside the grade range
    return min(MAX_RATING, max(MIN_RATING, value))


def average_after_add(*, average: float, count: int, grade: int) -> float:
    """
    Mean after one more review.

    Args:
        average: Current mean
        count: Number of reviews before the new one
        grade: Grade of the new review

    Returns:
        New mean over count + 1 reviews
    """
    return _clamp((average * count + grade) / (count + 1))


def average_after_edit(*, average: float, count: int, previous_grade: int, grade: int) -> float:
    """
    Mean after one review changes its grade.

    The review count does not change; count includes the edited review.
    """
    return _clamp((average * count - previous_grade + grade) / count)


def average_after_remove(*, average: float, count: int, grade: int) -> float:
    """
    Mean after one review is removed.

    Removing the last review resets the rating to 0 rather than dividing by zero.

    Args:
        average: Current mean
        count: Number of reviews before the removal
        grade: Grade of the removed review

    Returns:
        New mean over count - 1 reviews
    """
    if count <= 1:
        return MIN_RATING
    return _clamp((average * count - grade) / (count - 1))
