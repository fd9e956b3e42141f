# full_jitter/wait.py

import asyncio
import time
from datetime import datetime

from ._utils import ResettableTimer
from .duration import backoff_duration, to_timeout


def backoff_sleep(base: int, cap: int, attempt: int) -> None:
    """
    Block the calling thread for a full-jitter backoff delay.

    Shorthand for sleeping ``backoff_duration(base, cap, attempt)``.
    """
    time.sleep(to_timeout(backoff_duration(base, cap, attempt)))


def backoff_after(base: int, cap: int, attempt: int) -> asyncio.Future[datetime]:
    """
    Return a future that resolves once a full-jitter backoff delay elapses.

    Must be called from a running event loop. The future resolves with the
    UTC delivery time, and is never already resolved when returned, even for
    a zero delay. Cancelling the future releases the underlying timer.

    Returns:
        asyncio.Future[datetime]: One-shot delivery of the current time.
    """
    timer = ResettableTimer()
    fired = timer.reset(backoff_duration(base, cap, attempt))
    fired.add_done_callback(lambda _: timer.stop())
    return fired
