"""
Test date and id helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from neudebri.utils import (
    generate_id,
    in_window,
    parse_iso,
    parse_iso_or_none,
    start_of_day,
    start_of_week,
    to_iso,
)


def test_generate_id_is_unique():
    assert len({generate_id() for _ in range(100)}) == 100


def test_to_iso_uses_z_and_milliseconds():
    value = datetime(2026, 10, 19, 8, 30, 5, 123456, tzinfo=timezone.utc)
    assert to_iso(value) == "2026-10-19T08:30:05.123Z"


def test_to_iso_converts_offsets_to_utc():
    value = datetime(2026, 10, 19, 11, 0, tzinfo=timezone(timedelta(hours=3)))
    assert to_iso(value) == "2026-10-19T08:00:00.000Z"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2026-10-19T08:30:00.000Z", datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)),
        ("2026-10-19T08:30:00", datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)),
        ("2024-10-15", datetime(2024, 10, 15, tzinfo=timezone.utc)),
    ],
)
def test_parse_iso(text, expected):
    assert parse_iso(text) == expected


def test_parse_iso_or_none():
    assert parse_iso_or_none(None) is None
    assert parse_iso_or_none("") is None
    assert parse_iso_or_none("next tuesday") is None


def test_start_of_week_is_sunday():
    monday = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)
    sunday = datetime(2026, 10, 18, 22, 0, tzinfo=timezone.utc)
    saturday = datetime(2026, 10, 24, 23, 0, tzinfo=timezone.utc)
    expected = datetime(2026, 10, 18, tzinfo=timezone.utc)
    assert start_of_week(monday) == expected
    assert start_of_week(sunday) == expected
    assert start_of_week(saturday) == expected


def test_in_window_is_half_open():
    start = start_of_day(datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc))
    day = timedelta(days=1)
    assert in_window(start, start, day)
    assert not in_window(start + day, start, day)
    assert not in_window(start - timedelta(microseconds=1), start, day)
