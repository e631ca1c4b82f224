"""Local day window used to bound a single day's event query."""

from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union


def local_day(value: Optional[Union[date, datetime]] = None) -> date:
    """Calendar date of value in local time (today when None)."""
    if value is None:
        return datetime.now().astimezone().date()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def day_window(value: Optional[Union[date, datetime]] = None) -> Tuple[datetime, datetime]:
    """
    Half-open interval [local midnight, next local midnight).

    Both bounds are timezone-aware in the local zone, so a DST transition
    day spans 23 or 25 hours.
    """
    day = local_day(value)
    start = datetime.combine(day, time.min).astimezone()
    end = datetime.combine(day + timedelta(days=1), time.min).astimezone()
    return start, end
