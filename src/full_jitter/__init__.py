# full_jitter/__init__.py

from ._utils import parse_duration
from .attempts import backoff_attempts, backoff_attempts_blocking
from .duration import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    backoff_duration,
    to_seconds,
    to_timeout,
)
from .schemas import BackoffPolicy, default_policy
from .wait import backoff_after, backoff_sleep

__all__ = [
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "NANOSECOND",
    "SECOND",
    "backoff_duration",
    "to_seconds",
    "to_timeout",
    "backoff_sleep",
    "backoff_after",
    "backoff_attempts",
    "backoff_attempts_blocking",
    "parse_duration",
    "BackoffPolicy",
    "default_policy",
]
