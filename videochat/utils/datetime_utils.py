"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling for chat messages, analysis results
and API timestamps. All timestamps are UTC.

Functions:
- utc_now(): Returns timezone-aware UTC datetime
- ensure_utc(): Normalize any datetime to UTC
- to_iso(): Convert datetime object to ISO 8601 string (JavaScript Date style)
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string with millisecond precision
    and a 'Z' suffix (same shape as JavaScript's Date.toISOString()).
    
    Args:
        dt: datetime object (timezone-aware or naive UTC)
    
    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    
    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
