"""Sensor readings: value typing, parsing and formatting."""

from __future__ import annotations

import enum
import math
import re
import struct
from dataclasses import dataclass
from typing import Union

Value = Union[int, bool, float, str]

_ID_WIDTH = 49
_VALUE_WIDTH = 99

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"""\s*[+-]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )""",
    re.VERBOSE | re.IGNORECASE,
)
_WORD = re.compile(r"\S+")


class ValueType(enum.Enum):
    """Kind of value a reading carries; the values are the names used on command lines."""

    INTEGER = "int"
    BOOLEAN = "bool"
    DECIMAL = "float"
    TEXT = "string"


def detect_type(text: str) -> ValueType:
    """Classify a raw value token."""
    if text in ("true", "false"):
        return ValueType.BOOLEAN
    if text == "" or _INT_PREFIX.fullmatch(text):
        return ValueType.INTEGER
    if _FLOAT_PREFIX.fullmatch(text):
        return ValueType.DECIMAL
    return ValueType.TEXT


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    word = match.group().strip()
    negative = word.startswith("-")
    body = word.lstrip("+-")
    lowered = body.lower()
    if lowered.startswith("0x"):
        try:
            value = float.fromhex(body)
        except OverflowError:
            value = math.inf
    elif lowered.startswith("nan"):
        value = math.nan
    elif lowered.startswith("inf"):
        value = math.inf
    else:
        value = float(body)
    return -value if negative else value


def _to_single(value: float) -> float:
    """Round a double to single precision, as a stored reading does."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_value(text: str, value_type: ValueType) -> Value:
    """Convert a raw token into a Python value of the given type."""
    if value_type is ValueType.INTEGER:
        return _leading_int(text)
    if value_type is ValueType.BOOLEAN:
        return text in ("true", "1")
    if value_type is ValueType.DECIMAL:
        return _to_single(_leading_float(text))
    return text


@dataclass(frozen=True)
class Reading:
    """One timestamped value from a sensor."""

    time: int
    sensor_id: str
    value: Value
    value_type: ValueType

    def format(self) -> str:
        """Render the reading as a line of the log format, without newline."""
        if self.value_type is ValueType.BOOLEAN:
            rendered = "true" if self.value else "false"
        elif self.value_type is ValueType.DECIMAL:
            rendered = f"{self.value:.2f}"
        elif self.value_type is ValueType.INTEGER:
            rendered = str(int(self.value))
        else:
            rendered = str(self.value)
        return f"{self.time} {self.sensor_id} {rendered}"


def _take_word(line: str, pos: int, width: int) -> tuple[str, int]:
    match = _WORD.search(line, pos)
    if match is None or line[pos:match.start()].strip():
        raise ValueError(f"invalid line: {line!r}")
    word = match.group()[:width]
    return word, match.start() + len(word)


def parse_line(line: str) -> Reading:
    """Parse a '<time> <sensor> <value>' line; raise ValueError if it is malformed."""
    match = _INT_PREFIX.match(line)
    if match is None:
        raise ValueError(f"invalid line: {line!r}")
    time = int(match.group())
    sensor_id, pos = _take_word(line, match.end(), _ID_WIDTH)
    raw, _ = _take_word(line, pos, _VALUE_WIDTH)
    value_type = detect_type(raw)
    return Reading(time, sensor_id, parse_value(raw, value_type), value_type)