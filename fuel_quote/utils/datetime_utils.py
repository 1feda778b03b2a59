"""
Centralized DateTime Utilities
==============================

Consistent datetime handling across the application. All persisted
timestamps are timezone-aware UTC.

Functions:
- utc_now(): current UTC time, timezone-aware
- ensure_utc(): normalize any datetime to aware UTC
- parse_date(): ISO date string -> date
"""
from datetime import date, datetime, timezone as dt_timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted (created_at).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse a delivery date.

    Accepts a date, a datetime (its date part is used) or an ISO string
    ("2024-04-10" or a full timestamp). Returns None if parsing fails.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value[:10])
    except (TypeError, ValueError):
        return None
