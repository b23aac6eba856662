from datetime import date, datetime, time

from helpers.datetime_utils import (
    add_days,
    at_time,
    js_weekday,
    parse_date_input,
    parse_iso,
    parse_time_input,
    same_day,
    to_iso,
)


def test_parse_date_input_iso_and_dotted():
    assert parse_date_input("2023-12-01").isoformat() == "2023-12-01"
    assert parse_date_input("01.12.2023").isoformat() == "2023-12-01"
    assert parse_date_input(" 2024-02-29 ") == date(2024, 2, 29)


def test_parse_date_input_rejects_invalid():
    assert parse_date_input("") is None
    assert parse_date_input(None) is None
    assert parse_date_input("2023-02-30") is None
    assert parse_date_input("tomorrow") is None


def test_parse_time_input_formats():
    assert parse_time_input("09:30") == time(9, 30)
    assert parse_time_input("9.05") == time(9, 5)
    assert parse_time_input("930") == time(9, 30)
    assert parse_time_input("2359") == time(23, 59)


def test_parse_time_input_rejects_out_of_range():
    assert parse_time_input("24:00") is None
    assert parse_time_input("1260") is None
    assert parse_time_input("noon") is None
    assert parse_time_input(None) is None


def test_at_time_and_add_days():
    base = datetime(2024, 1, 31, 14, 27, 12, 500)
    assert at_time(base, 9) == datetime(2024, 1, 31, 9, 0)
    assert add_days(base, 1).date() == date(2024, 2, 1)


def test_same_day_ignores_time():
    assert same_day(datetime(2024, 3, 15, 23, 59), date(2024, 3, 15))
    assert not same_day(datetime(2024, 3, 15, 0, 0), datetime(2024, 3, 16, 0, 0))
    assert not same_day(None, date(2024, 3, 15))


def test_js_weekday_sunday_is_zero():
    assert js_weekday(date(2024, 3, 17)) == 0
    assert js_weekday(date(2024, 3, 16)) == 6
    assert js_weekday(datetime(2024, 3, 13, 12)) == 3


def test_parse_iso_round_trip():
    dt = datetime(2024, 3, 15, 10, 30)
    assert parse_iso(to_iso(dt)) == dt
    assert parse_iso("2024-03-15") == datetime(2024, 3, 15)
    assert parse_iso("not a date") is None
    assert parse_iso(None) is None


def test_parse_iso_utc_suffix_becomes_naive():
    parsed = parse_iso("2024-03-15T10:30:00Z")
    assert parsed is not None
    assert parsed.tzinfo is None


def test_to_iso_drops_microseconds():
    assert to_iso(datetime(2024, 3, 15, 10, 30, 5, 123456)) == "2024-03-15T10:30:05"
    assert to_iso(None) is None
