# _utils/__init__.py

from .converters import parse_duration, to_nanoseconds
from .timer import ResettableTimer

__all__ = [
    "parse_duration",
    "to_nanoseconds",
    "ResettableTimer",
]
