"""Offset/limit arithmetic for the paged board list."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    start: int
    total_pages: int


def compute_page_window(*, total_count: int, per_page: int, page: int) -> PageWindow:
    """
    Work out where a page starts and how many pages there are.

    A page whose offset lies at or beyond ``total_count`` falls back to the
    last full page instead of coming back empty.

    Args:
        total_count: Number of items in the collection
        per_page: Items per page (>= 1)
        page: 1-based page number (>= 1)

    Returns:
        PageWindow with the slice start and total page count
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    if page < 1:
        raise ValueError("page must be at least 1")

    total_pages = math.ceil(total_count / per_page)

    start = (page - 1) * per_page
    if start >= total_count:
        start = max(0, total_count - per_page)

    return PageWindow(start=start, total_pages=total_pages)
