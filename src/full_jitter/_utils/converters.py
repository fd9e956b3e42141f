# _utils/converters.py

import re
from datetime import timedelta

from ..duration import HOUR, MICROSECOND, MILLISECOND, MINUTE, NANOSECOND, SECOND

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "μs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# one "<number><unit>" component, e.g. "1.5s" or "250ms"
_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: str) -> int | None:
    """
    Parse a duration string such as "300ms", "1.5s" or "1h2m3s".

    An optional leading sign is accepted, and "0" on its own means zero.
    Fractional components are truncated to whole nanoseconds.

    Returns:
        int | None: Duration in nanoseconds, or None if the string is not a
            valid duration.
    """
    text = value.strip()
    sign = -1 if text.startswith("-") else 1
    if text[:1] in ("+", "-"):
        text = text[1:]

    if text == "0":
        return 0

    total = 0
    position = 0
    while position < len(text):
        match = _COMPONENT.match(text, position)
        if match is None:
            return None
        number, unit = match.groups()
        total += _scale(number, _UNITS[unit])
        position = match.end()

    if position == 0:
        return None

    return sign * total


def to_nanoseconds(value: object) -> int | None:
    """
    Convert an int, timedelta or duration string into integer nanoseconds.

    Booleans and every other type are rejected.

    Returns:
        int | None: Duration in nanoseconds, or None if the value is
            unconvertible.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, timedelta):
        seconds = value.days * 86_400 + value.seconds
        return seconds * SECOND + value.microseconds * MICROSECOND

    if isinstance(value, str):
        return parse_duration(value)

    return None


def _scale(number: str, unit: int) -> int:
    """
    Multiply a decimal string by a unit without float rounding.

    Returns:
        int: The scaled value, truncated towards zero.
    """
    whole, _, fraction = number.partition(".")
    scaled = int(whole or "0") * unit
    if fraction:
        scaled += int(fraction) * unit // 10 ** len(fraction)
    return scaled
