"""Tests for the formatting / parsing helpers."""

from datetime import datetime, timedelta

import pytest

from process_booster.utils import clamp, dt_str, fmt_duration, fmt_mb, parse_int, truncate


@pytest.mark.parametrize("raw,expected", [
    ("42", 42),
    (" 7 ", 7),
    ("-3", -3),
    ("+5", 5),
    ("abc", None),
    ("1.5", None),
    ("1_000", None),
    ("2147483647", 2147483647),
    ("-2147483648", -2147483648),
    ("2147483648", None),
    ("-2147483649", None),
    ("99999999999999999999999", None),
    ("", None),
    (None, None),
])
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_clamp():
    assert clamp(999, 1, 20) == 20
    assert clamp(0, 1, 20) == 1
    assert clamp(-4, 1, 20) == 1
    assert clamp(7, 1, 20) == 7


def test_clamp_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        clamp(5, 10, 1)


def test_fmt_duration():
    assert fmt_duration(timedelta(hours=1, minutes=2, seconds=3, milliseconds=45)) == "01:02:03.045"
    assert fmt_duration(timedelta(0)) == "00:00:00.000"


def test_fmt_mb_and_dt_str():
    assert fmt_mb(1234.5) == "1,234.50"
    assert dt_str(datetime(2024, 3, 4, 5, 6, 7)) == "2024-03-04 05:06:07"


def test_truncate():
    assert truncate("a" * 30) == "a" * 30
    assert truncate("b" * 31) == "b" * 27 + "..."
