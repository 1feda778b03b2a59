"""Utility modules for the fuel quote backend."""

from .datetime_utils import utc_now, ensure_utc, parse_date

__all__ = [
    "utc_now",
    "ensure_utc",
    "parse_date",
]
