# unit/test_duration.py

import threading

import pytest

from full_jitter.duration import (
    MILLISECOND,
    NANOSECOND,
    SECOND,
    backoff_duration,
    to_seconds,
    to_timeout,
)

pytestmark = pytest.mark.unit


def _draw(base: int, cap: int, attempt: int, times: int = 100) -> list[int]:
    """
    Draw several delays for the same backoff parameters.

    Returns:
        list[int]: The drawn delays, in nanoseconds.
    """
    return [backoff_duration(base, cap, attempt) for _ in range(times)]


def test_zero_base_returns_zero() -> None:
    """
    ARRANGE: zero base with a positive cap
    ACT:     draw delays for several attempts
    ASSERT:  every delay is zero
    """
    actual = [backoff_duration(0, SECOND, attempt) for attempt in range(70)]

    assert set(actual) == {0}


def test_zero_cap_returns_zero() -> None:
    """
    ARRANGE: positive base with zero cap
    ACT:     draw delays for several attempts
    ASSERT:  every delay is zero
    """
    actual = [backoff_duration(MILLISECOND, 0, attempt) for attempt in range(70)]

    assert set(actual) == {0}


def test_negative_base_returns_zero() -> None:
    """
    ARRANGE: negative base
    ACT:     draw a delay
    ASSERT:  delay is zero
    """
    actual = backoff_duration(-MILLISECOND, SECOND, 2)

    assert actual == 0


def test_negative_attempt_returns_zero() -> None:
    """
    ARRANGE: negative attempt number
    ACT:     draw delays
    ASSERT:  every delay is zero
    """
    actual = _draw(MILLISECOND, SECOND, -1)

    assert set(actual) == {0}


def test_limit_of_one_returns_zero() -> None:
    """
    ARRANGE: one nanosecond base and cap on the first attempt
    ACT:     draw delays
    ASSERT:  every delay is zero
    """
    actual = _draw(NANOSECOND, NANOSECOND, 0)

    assert set(actual) == {0}


def test_first_attempt_stays_below_base() -> None:
    """
    ARRANGE: 100ms base, 10s cap, first attempt
    ACT:     draw 100 delays
    ASSERT:  every delay is in [0, 100ms)
    """
    actual = _draw(100 * MILLISECOND, 10 * SECOND, 0)

    assert all(0 <= delay < 100 * MILLISECOND for delay in actual)


def test_second_attempt_stays_below_double_base() -> None:
    """
    ARRANGE: 100ms base, 10s cap, second attempt
    ACT:     draw 100 delays
    ASSERT:  every delay is in [0, 200ms)
    """
    actual = _draw(100 * MILLISECOND, 10 * SECOND, 1)

    assert all(0 <= delay < 200 * MILLISECOND for delay in actual)


def test_capped_attempt_stays_below_cap() -> None:
    """
    ARRANGE: 100ms base, 300ms cap, attempt 3 (800ms uncapped)
    ACT:     draw 100 delays
    ASSERT:  every delay is in [0, 300ms)
    """
    actual = _draw(100 * MILLISECOND, 300 * MILLISECOND, 3)

    assert all(0 <= delay < 300 * MILLISECOND for delay in actual)


def test_large_attempt_saturates_at_cap() -> None:
    """
    ARRANGE: attempt number far beyond the integer bit width
    ACT:     draw 100 delays
    ASSERT:  every delay is in [0, cap)
    """
    actual = _draw(MILLISECOND, SECOND, 100)

    assert all(0 <= delay < SECOND for delay in actual)


def test_attempt_at_shift_width_saturates_at_cap() -> None:
    """
    ARRANGE: attempt 63 with the largest signed 64-bit base and cap
    ACT:     draw 100 delays
    ASSERT:  every delay is in [0, cap)
    """
    cap = 2**63 - 1

    actual = _draw(cap, cap, 63)

    assert all(0 <= delay < cap for delay in actual)


def test_capped_attempt_uses_full_range() -> None:
    """
    ARRANGE: base larger than cap on the first attempt
    ACT:     draw many delays
    ASSERT:  some delay exceeds the half of the cap
    """
    actual = _draw(SECOND, 10 * NANOSECOND, 0, times=1_000)

    assert max(actual) > 5 * NANOSECOND


def test_delays_cover_every_bucket_of_the_range() -> None:
    """
    ARRANGE: 1000ns limit split into ten 100ns buckets
    ACT:     draw 10,000 delays and bucket them
    ASSERT:  every bucket is hit
    """
    buckets = {delay // 100 for delay in _draw(1_000, 1_000, 0, times=10_000)}

    assert buckets == set(range(10))


def test_delays_are_roughly_uniform_across_buckets() -> None:
    """
    ARRANGE: 1000ns limit split into ten 100ns buckets
    ACT:     draw 10,000 delays and count per bucket
    ASSERT:  every bucket holds between half and double its fair share
    """
    counts = [0] * 10
    for delay in _draw(1_000, 1_000, 0, times=10_000):
        counts[delay // 100] += 1

    assert all(500 <= count <= 2_000 for count in counts)


def test_delays_are_integers() -> None:
    """
    ARRANGE: ordinary backoff parameters
    ACT:     draw a delay
    ASSERT:  the delay is an int
    """
    actual = backoff_duration(100 * MILLISECOND, SECOND, 2)

    assert isinstance(actual, int)


def test_to_seconds_converts_nanoseconds() -> None:
    """
    ARRANGE: 1500 milliseconds
    ACT:     convert to seconds
    ASSERT:  result is 1.5
    """
    actual = to_seconds(1_500 * MILLISECOND)

    assert actual == 1.5


def test_to_timeout_converts_nanoseconds() -> None:
    """
    ARRANGE: 250 milliseconds
    ACT:     convert to a blocking timeout
    ASSERT:  result is 0.25 seconds
    """
    actual = to_timeout(250 * MILLISECOND)

    assert actual == 0.25


def test_to_timeout_clamps_largest_duration() -> None:
    """
    ARRANGE: the largest signed 64-bit nanosecond count
    ACT:     convert to a blocking timeout
    ASSERT:  result does not exceed threading.TIMEOUT_MAX
    """
    actual = to_timeout(2**63 - 1)

    assert actual <= threading.TIMEOUT_MAX
