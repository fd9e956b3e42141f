# full_jitter/attempts.py

import asyncio
import logging
import threading
from collections.abc import AsyncIterator, Iterator

from ._utils import ResettableTimer
from .duration import backoff_duration, to_seconds, to_timeout

logger = logging.getLogger(__name__)


async def backoff_attempts(
    cancel: asyncio.Event,
    max_attempts: int,
    base: int,
    cap: int,
) -> AsyncIterator[int]:
    """
    Yield zero-based attempt numbers, pausing with full-jitter backoff between
    successive attempts.

    The sequence ends after ``max_attempts`` attempts, as soon as ``cancel``
    is set, or when the consumer stops iterating. Cancellation is checked
    before every attempt and interrupts a pending pause immediately. No pause
    follows the final attempt.

    The timer and the cancellation waiter are shared by every pause and are
    released however the sequence ends.

    Args:
        cancel (asyncio.Event): Caller-owned cancellation signal.
        max_attempts (int): Number of attempts to yield at most.
        base (int): Backoff base delay, in nanoseconds.
        cap (int): Backoff maximum delay, in nanoseconds.

    Returns:
        AsyncIterator[int]: Attempt numbers in increasing order.
    """
    if max_attempts <= 0:
        return

    cancelled: asyncio.Future[object] | None = None

    with ResettableTimer() as timer:
        try:
            for attempt in range(max_attempts):
                if cancel.is_set():
                    logger.debug("Backoff cancelled before attempt %d", attempt)
                    return

                yield attempt

                if attempt + 1 == max_attempts:
                    return

                delay = backoff_duration(base, cap, attempt)
                if delay <= 0:
                    continue

                if cancelled is None:
                    cancelled = asyncio.ensure_future(cancel.wait())

                logger.debug(
                    "Backoff pausing %.3fs before attempt %d/%d",
                    to_seconds(delay),
                    attempt + 1,
                    max_attempts,
                )
                fired = timer.reset(delay)
                await asyncio.wait(
                    {fired, cancelled},
                    return_when=asyncio.FIRST_COMPLETED,
                )

                if cancelled.done():
                    logger.debug("Backoff cancelled during pause")
                    return
        finally:
            if cancelled is not None:
                cancelled.cancel()


def backoff_attempts_blocking(
    cancel: threading.Event,
    max_attempts: int,
    base: int,
    cap: int,
) -> Iterator[int]:
    """
    Thread-based counterpart of ``backoff_attempts``.

    Pauses block the consuming thread and end early once ``cancel`` is set.

    Returns:
        Iterator[int]: Attempt numbers in increasing order.
    """
    for attempt in range(max_attempts):
        if cancel.is_set():
            logger.debug("Backoff cancelled before attempt %d", attempt)
            return

        yield attempt

        if attempt + 1 == max_attempts:
            return

        delay = backoff_duration(base, cap, attempt)
        if delay > 0 and cancel.wait(to_timeout(delay)):
            logger.debug("Backoff cancelled during pause")
            return
