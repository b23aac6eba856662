"""Reminder presets and their display text."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from core.errors import ParseError
from core.settings import REMINDERS
from helpers.datetime_utils import (
    add_days,
    at_time,
    js_weekday,
    parse_date_input,
    parse_time_input,
    same_day,
)


class ReminderOption(str, Enum):
    LATER_TODAY = "later_today"
    TOMORROW = "tomorrow"
    NEXT_WEEK = "next_week"
    WEEKEND = "weekend"
    CUSTOM = "custom"
    NONE = "none"


REMINDER_LABELS = {
    ReminderOption.LATER_TODAY: "Later today",
    ReminderOption.TOMORROW: "Tomorrow",
    ReminderOption.NEXT_WEEK: "Next week",
    ReminderOption.WEEKEND: "This weekend",
    ReminderOption.CUSTOM: "Pick date & time",
    ReminderOption.NONE: "No reminder",
}


def days_until_weekend(now: Union[date, datetime]) -> int:
    # Saturday rolls over to the following one
    return (6 - js_weekday(now) + 7) % 7 or 7


def parse_custom(raw_date: str | None, raw_time: str | None) -> datetime:
    parsed_date = parse_date_input(raw_date)
    parsed_time = parse_time_input(raw_time)
    if parsed_date is None or parsed_time is None:
        raise ParseError(f"Invalid reminder date/time: {raw_date!r} {raw_time!r}")
    return datetime.combine(parsed_date, parsed_time)


def resolve_reminder(
    option: Union[ReminderOption, str],
    now: Optional[datetime] = None,
    *,
    custom_date: str | None = None,
    custom_time: str | None = None,
) -> Optional[datetime]:
    """Turn a reminder preset into a concrete timestamp.

    ``None`` means "no reminder". ``custom`` raises :class:`ParseError` when the
    supplied date/time pair does not form a valid instant. Unknown options fall
    back to one hour from ``now``.
    """

    now = now or datetime.now()
    value = option.value if isinstance(option, ReminderOption) else str(option)
    cfg = REMINDERS

    if value == ReminderOption.LATER_TODAY.value:
        return at_time(now, cfg.later_today_hour)
    if value == ReminderOption.TOMORROW.value:
        return at_time(add_days(now, 1), cfg.tomorrow_hour)
    if value == ReminderOption.NEXT_WEEK.value:
        return at_time(add_days(now, cfg.next_week_days), cfg.next_week_hour)
    if value == ReminderOption.WEEKEND.value:
        return at_time(add_days(now, days_until_weekend(now)), cfg.weekend_hour)
    if value == ReminderOption.CUSTOM.value:
        return parse_custom(custom_date, custom_time)
    if value == ReminderOption.NONE.value:
        return None
    return now + timedelta(minutes=cfg.default_offset_minutes)


def default_custom_inputs(now: Optional[datetime] = None) -> tuple[str, str]:
    """Prefill for the custom picker: today's date and the next whole hour."""

    now = now or datetime.now()
    next_hour = at_time(now, now.hour) + timedelta(hours=1)
    return now.date().isoformat(), next_hour.strftime("%H:%M")


def format_reminder_text(when: datetime, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    clock = when.strftime("%H:%M")
    if same_day(when, now):
        return f"Today at {clock}"
    if same_day(when, now.date() + timedelta(days=1)):
        return f"Tomorrow at {clock}"
    return f"{when:%a}, {when:%b} {when.day} at {clock}"


__all__ = [
    "REMINDER_LABELS",
    "ReminderOption",
    "days_until_weekend",
    "default_custom_inputs",
    "format_reminder_text",
    "parse_custom",
    "resolve_reminder",
]
