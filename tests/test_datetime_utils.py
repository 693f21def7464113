"""Tests for clock time parsing and quiet-hours windows."""

from __future__ import annotations

from datetime import time

import pytest

from app.utils import is_time_in_window, parse_clock_time


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("22:00", time(22, 0)),
        ("7:05", time(7, 5)),
        (" 08:30:15 ", time(8, 30, 15)),
        (time(9, 15), time(9, 15)),
    ],
)
def test_parse_clock_time_accepts_valid_values(value, expected) -> None:
    assert parse_clock_time(value) == expected


@pytest.mark.parametrize("value", [None, "", "25:00", "10:60", "noon", "1030"])
def test_parse_clock_time_rejects_invalid_values(value) -> None:
    assert parse_clock_time(value) is None


def test_window_within_a_day_is_inclusive() -> None:
    start, end = time(9, 0), time(17, 0)

    assert is_time_in_window(time(9, 0), start, end)
    assert is_time_in_window(time(17, 0), start, end)
    assert not is_time_in_window(time(17, 1), start, end)
    assert not is_time_in_window(time(8, 59), start, end)


def test_window_wrapping_midnight() -> None:
    start, end = time(22, 0), time(7, 0)

    assert is_time_in_window(time(23, 30), start, end)
    assert is_time_in_window(time(0, 0), start, end)
    assert is_time_in_window(time(7, 0), start, end)
    assert not is_time_in_window(time(12, 0), start, end)
    assert not is_time_in_window(time(21, 59), start, end)


def test_window_ignores_seconds_of_current_time() -> None:
    assert is_time_in_window(time(17, 0, 45), time(9, 0), time(17, 0))
