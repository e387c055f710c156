"""Conversion between catalog timestamps and calendar dates."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from pva.core.constants import DATE_FORMAT_FULL, REFERENCE_EPOCH
from pva.core.exceptions import InvalidDateError


def to_calendar(raw_offset: float | None) -> datetime | None:
    """Convert seconds since 2001-01-01 UTC to an aware UTC datetime.

    Returns None for a missing timestamp; raises InvalidDateError when the
    offset is not a finite number or lands outside the datetime range.
    """
    if raw_offset is None:
        return None
    try:
        return REFERENCE_EPOCH + timedelta(seconds=float(raw_offset))
    except (OverflowError, ValueError, TypeError) as e:
        raise InvalidDateError(f"Invalid timestamp {raw_offset!r}: {e}", raw_offset) from e


def to_raw_offset(value: date | datetime) -> int:
    """Convert a calendar date (or datetime) to whole seconds since the epoch.

    Plain dates mean midnight UTC; naive datetimes are taken as UTC.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return int((moment - REFERENCE_EPOCH).total_seconds())


def format_date(raw_offset: float | None, fmt: str = DATE_FORMAT_FULL) -> str:
    """Render a raw timestamp for display: "N/A" if missing, "Invalid date" if bad."""
    try:
        moment = to_calendar(raw_offset)
    except InvalidDateError:
        return "Invalid date"
    if moment is None:
        return "N/A"
    return moment.strftime(fmt)
