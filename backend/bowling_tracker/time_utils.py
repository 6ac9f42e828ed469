"""Helpers for working with session dates."""

from __future__ import annotations

from datetime import date, datetime, timezone


def require_utc(value: datetime | None, *, field_name: str = "timestamp") -> datetime | None:
    """Ensure ``value`` includes timezone info and return a UTC-normalized copy.

    Args:
        value: The datetime to validate.
        field_name: Human-readable name used in validation errors.

    Returns:
        A timezone-aware datetime normalized to UTC, or ``None`` if ``value`` is
        ``None``.

    Raises:
        ValueError: If ``value`` is timezone-naive.
    """

    if value is None:
        return None

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{field_name} must include a timezone offset")

    return value.astimezone(timezone.utc)


def session_date(value: date | datetime, *, field_name: str = "date") -> date:
    """Return the calendar date a session is filed under.

    Plain dates pass through. Datetimes must be timezone-aware and are
    filed under their UTC date.
    """

    if isinstance(value, datetime):
        return require_utc(value, field_name=field_name).date()
    if isinstance(value, date):
        return value
    raise TypeError(f"{field_name} must be a date or datetime")
