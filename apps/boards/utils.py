"""Date helpers for board and comment payloads."""

from datetime import date, datetime
from typing import Optional, Union

from django.utils import timezone
from django.utils.dateparse import parse_datetime, parse_date


def format_date(value: Union[datetime, date, str, None]) -> Optional[str]:
    """
    Format a timestamp as ``YYYY-MM-DD``.

    Aware datetimes are converted to the project time zone first, so
    ``2024-03-05T10:00:00Z`` becomes ``"2024-03-05"`` under UTC.
    Returns None for empty values.
    """
    if value in (None, ''):
        return None

    if isinstance(value, str):
        parsed = parse_datetime(value) or parse_date(value)
        if parsed is None:
            raise ValueError(f"Not a date: {value!r}")
        value = parsed

    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        value = value.date()

    return value.strftime('%Y-%m-%d')
