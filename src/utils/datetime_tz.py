from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

ONE_DAY = timedelta(days=1)
ONE_HOUR = timedelta(hours=1)


def to_utc(value: date | datetime) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    Naive datetimes are assumed to already be in UTC. Plain dates become
    midnight UTC of that day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time(0, 0), tzinfo=timezone.utc)


def utc_day(value: date | datetime) -> date:
    """Calendar day of the value, as seen in UTC."""
    return to_utc(value).date()


def whole_days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole days from `start` to `end`, truncated toward zero."""
    return int((to_utc(end) - to_utc(start)) / ONE_DAY)


def hours_between(start: date | datetime, end: date | datetime) -> float:
    return (to_utc(end) - to_utc(start)) / ONE_HOUR


def whole_months_between(start: date | datetime, end: date | datetime) -> int:
    """Complete calendar months from `start` to `end` (0 if `end` precedes `start`)."""
    start_day = utc_day(start)
    end_day = utc_day(end)
    months = (end_day.year - start_day.year) * 12 + (end_day.month - start_day.month)
    if end_day.day < start_day.day:
        months -= 1
    return max(months, 0)
