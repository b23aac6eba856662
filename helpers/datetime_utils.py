"""Shared utilities for parsing and normalizing date/time input."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Union


def _parse_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_date_input(value: str | None) -> Optional[date]:
    """Parse ISO ``YYYY-MM-DD`` (or ``DD.MM.YYYY``) into a ``date`` object."""

    if not value:
        return None
    text = value.strip()
    if not text:
        return None

    for fmt in ("%Y-%m-%d", "%d.%m.%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_time_input(value: str | None) -> Optional[time]:
    """Parse 24-hour ``HH:MM`` strings (``930`` is read as ``09:30``)."""

    if not value:
        return None
    text = value.strip().lower()
    if not text:
        return None

    for fmt in ("%H:%M", "%H.%M"):
        try:
            dt = datetime.strptime(text, fmt)
            return time(dt.hour, dt.minute)
        except ValueError:
            continue

    if len(text) in {3, 4} and text.isdigit():
        hours = _parse_int(text[:-2])
        minutes = _parse_int(text[-2:])
        if hours is not None and minutes is not None and 0 <= hours <= 23 and 0 <= minutes <= 59:
            return time(hours, minutes)

    return None


def at_time(base: datetime, hour: int, minute: int = 0) -> datetime:
    return base.replace(hour=hour, minute=minute, second=0, microsecond=0)


def add_days(base: datetime, days: int) -> datetime:
    return base + timedelta(days=days)


def same_day(a: Union[date, datetime, None], b: Union[date, datetime, None]) -> bool:
    """Calendar-date equality, ignoring the time of day."""

    if a is None or b is None:
        return False
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def js_weekday(d: Union[date, datetime]) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""

    return d.isoweekday() % 7


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into a naive local ``datetime``."""

    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.replace(microsecond=0).isoformat()


__all__ = [
    "add_days",
    "at_time",
    "js_weekday",
    "parse_date_input",
    "parse_iso",
    "parse_time_input",
    "same_day",
    "to_iso",
]
