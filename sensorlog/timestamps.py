"""Conversion of local date and time strings to epoch seconds."""

from __future__ import annotations

import re
from time import mktime

_DATE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")
_TIME = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+):\s*([+-]?\d+)")


def parse_timestamp(date: str, time: str) -> int:
    """Turn 'YYYY-MM-DD' and 'HH:MM:SS' (local time) into epoch seconds.

    Out-of-range fields are normalised the way the C library does.
    Raises ValueError when either string is malformed.
    """
    date_match = _DATE.match(date)
    time_match = _TIME.match(time)
    if date_match is None or time_match is None:
        raise ValueError(f"invalid date or time: {date!r} {time!r}")
    year, month, day = (int(part) for part in date_match.groups())
    hour, minute, second = (int(part) for part in time_match.groups())
    try:
        stamp = int(mktime((year, month, day, hour, minute, second, 0, 0, 0)))
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"invalid date or time: {date!r} {time!r}") from exc
    if stamp == -1:
        raise ValueError(f"invalid date or time: {date!r} {time!r}")
    return stamp