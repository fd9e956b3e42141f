# full_jitter/duration.py

import random
import threading

# Durations are integer nanosecond counts, matching time.monotonic_ns.
NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Bit width of the signed duration domain, excluding the sign bit.
_MAX_SHIFT = 63

_rng = random.Random()


def backoff_duration(base: int, cap: int, attempt: int) -> int:
    """
    Return a full-jitter exponential backoff delay for the given attempt.

    The delay is drawn uniformly from [0, min(cap, base * 2**attempt)). The
    exponential limit saturates at cap instead of overflowing, so very large
    attempt numbers are safe.

    Non-positive base or cap, or a negative attempt, produce a delay of zero
    rather than an error.

    Args:
        base (int): Delay ceiling of the first attempt, in nanoseconds.
        cap (int): Upper bound on any delay ceiling, in nanoseconds.
        attempt (int): Zero-based attempt number.

    Returns:
        int: Delay in nanoseconds, always in [0, cap).
    """
    if base <= 0 or cap <= 0 or attempt < 0:
        return 0

    if attempt >= _MAX_SHIFT or base > cap >> attempt:
        limit = cap
    else:
        limit = base << attempt

    # [0, 1) holds a single value, no draw needed
    if limit <= 1:
        return 0

    return _rng.randrange(limit)


def to_seconds(duration: int) -> float:
    """
    Convert a nanosecond duration into float seconds.

    Returns:
        float: Seconds suitable for time.sleep or asyncio scheduling.
    """
    return duration / SECOND


def to_timeout(duration: int) -> float:
    """
    Convert a nanosecond duration into seconds accepted by blocking waits.

    The result is clamped to threading.TIMEOUT_MAX, beyond which time.sleep
    and threading.Event.wait raise OverflowError.

    Returns:
        float: Seconds, never above threading.TIMEOUT_MAX.
    """
    return min(to_seconds(duration), threading.TIMEOUT_MAX)
