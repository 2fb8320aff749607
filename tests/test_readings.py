import math

import pytest

from sensorlog.readings import (
    Reading,
    ValueType,
    detect_type,
    parse_line,
    parse_value,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("true", ValueType.BOOLEAN),
        ("false", ValueType.BOOLEAN),
        ("True", ValueType.TEXT),
        ("42", ValueType.INTEGER),
        ("-7", ValueType.INTEGER),
        ("3.14", ValueType.DECIMAL),
        ("1e5", ValueType.DECIMAL),
        ("0x1A", ValueType.DECIMAL),
        ("inf", ValueType.DECIMAL),
        ("1e", ValueType.TEXT),
        ("abc", ValueType.TEXT),
        ("12abc", ValueType.TEXT),
    ],
)
def test_detect_type(text, expected):
    assert detect_type(text) is expected


def test_parse_integer_and_prefix():
    assert parse_value("42", ValueType.INTEGER) == 42
    assert parse_value("12abc", ValueType.INTEGER) == 12
    assert parse_value("abc", ValueType.INTEGER) == 0


def test_parse_boolean():
    assert parse_value("true", ValueType.BOOLEAN) is True
    assert parse_value("false", ValueType.BOOLEAN) is False
    assert parse_value("1", ValueType.BOOLEAN) is True


def test_parse_text_is_unchanged():
    assert parse_value("hello", ValueType.TEXT) == "hello"


def test_parse_decimal_is_single_precision():
    value = parse_value("0.1", ValueType.DECIMAL)
    assert abs(value - 0.1) < 1e-6
    assert value != 0.1


def test_parse_decimal_hex_and_infinity():
    assert parse_value("0x10", ValueType.DECIMAL) == 16.0
    assert parse_value("-inf", ValueType.DECIMAL) == -math.inf


def test_format_decimal_two_places():
    reading = Reading(1, "s", parse_value("2.5", ValueType.DECIMAL), ValueType.DECIMAL)
    assert reading.format() == "1 s 2.50"


def test_format_boolean():
    assert Reading(3, "door", True, ValueType.BOOLEAN).format() == "3 door true"
    assert Reading(3, "door", False, ValueType.BOOLEAN).format() == "3 door false"


def test_parse_line_builds_reading():
    assert parse_line("100 temp 23\n") == Reading(100, "temp", 23, ValueType.INTEGER)


def test_parse_line_truncates_long_identifier():
    reading = parse_line("1 " + "a" * 60 + " x")
    assert reading.sensor_id == "a" * 49
    assert reading.value == "a" * 11
    assert reading.value_type is ValueType.TEXT


@pytest.mark.parametrize("line", ["garbage\n", "100 temp\n", "\n", "x 1 2"])
def test_parse_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_line(line)


@pytest.mark.parametrize(
    "reading",
    [
        Reading(5, "temp", 3, ValueType.INTEGER),
        Reading(6, "door", True, ValueType.BOOLEAN),
        Reading(7, "name", "hello", ValueType.TEXT),
    ],
)
def test_format_parse_round_trip(reading):
    assert parse_line(reading.format()) == reading