import math

import pytest

from masonry_core.units import format_float, parse_float, parse_span


def test_parse_float_accepts_comma():
    assert parse_float("12,5") == 12.5


def test_parse_float_strips_whitespace():
    assert parse_float("  10.0 ") == 10.0


def test_parse_float_rejects_empty():
    with pytest.raises(ValueError):
        parse_float("")


def test_parse_float_accepts_numbers_and_infinity():
    assert parse_float(3) == 3.0
    assert math.isinf(parse_float("Infinity"))


def test_parse_float_rejects_booleans():
    with pytest.raises(ValueError):
        parse_float(True)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2, 2),
        ("3", 3),
        (" 2px", 2),
        ("0", 0),
        ("-1", -1),
        ("abc", 1),
        ("", 1),
        (None, 1),
        (2.7, 2),
    ],
)
def test_parse_span(value, expected):
    assert parse_span(value) == expected


def test_format_float():
    assert format_float(12.346) == "12.35"
    assert format_float(12.5, 0) == "12"
