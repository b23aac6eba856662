from datetime import datetime, timedelta

import pytest

from core.errors import ParseError
from helpers.reminders import (
    ReminderOption,
    days_until_weekend,
    default_custom_inputs,
    format_reminder_text,
    parse_custom,
    resolve_reminder,
)

WEDNESDAY = datetime(2024, 3, 13, 14, 25, 7)
SATURDAY = datetime(2024, 3, 16, 8, 0)
SUNDAY = datetime(2024, 3, 17, 20, 0)


def test_later_today_is_six_pm():
    assert resolve_reminder(ReminderOption.LATER_TODAY, WEDNESDAY) == datetime(2024, 3, 13, 18, 0)


def test_tomorrow_crosses_month_end():
    now = datetime(2024, 1, 31, 22, 10)
    assert resolve_reminder("tomorrow", now) == datetime(2024, 2, 1, 9, 0)


def test_next_week_is_seven_days_at_nine():
    assert resolve_reminder(ReminderOption.NEXT_WEEK, WEDNESDAY) == datetime(2024, 3, 20, 9, 0)


def test_weekend_from_wednesday():
    assert resolve_reminder(ReminderOption.WEEKEND, WEDNESDAY) == datetime(2024, 3, 16, 10, 0)


def test_weekend_on_saturday_goes_to_next_saturday():
    assert resolve_reminder(ReminderOption.WEEKEND, SATURDAY) == datetime(2024, 3, 23, 10, 0)


def test_weekend_on_sunday():
    assert days_until_weekend(SUNDAY) == 6
    assert resolve_reminder("weekend", SUNDAY) == datetime(2024, 3, 23, 10, 0)


def test_none_clears():
    assert resolve_reminder(ReminderOption.NONE, WEDNESDAY) is None


def test_unknown_option_is_one_hour_ahead():
    assert resolve_reminder("someday", WEDNESDAY) == WEDNESDAY + timedelta(hours=1)


def test_custom_parses_date_and_time():
    when = resolve_reminder(
        ReminderOption.CUSTOM, WEDNESDAY, custom_date="2024-04-02", custom_time="07:45"
    )
    assert when == datetime(2024, 4, 2, 7, 45)


@pytest.mark.parametrize(
    "raw_date, raw_time",
    [("2024-02-30", "10:00"), ("2024-04-02", "25:00"), ("", "10:00"), (None, None)],
)
def test_custom_rejects_invalid_instant(raw_date, raw_time):
    with pytest.raises(ParseError):
        parse_custom(raw_date, raw_time)


def test_default_custom_inputs_next_whole_hour():
    assert default_custom_inputs(WEDNESDAY) == ("2024-03-13", "15:00")


def test_format_reminder_text():
    now = datetime(2024, 3, 13, 9, 0)
    assert format_reminder_text(datetime(2024, 3, 13, 18, 0), now) == "Today at 18:00"
    assert format_reminder_text(datetime(2024, 3, 14, 9, 0), now) == "Tomorrow at 09:00"
    assert format_reminder_text(datetime(2024, 3, 16, 10, 0), now) == "Sat, Mar 16 at 10:00"
