# _utils/timer.py

import asyncio
from datetime import UTC, datetime

from ..duration import to_seconds


class ResettableTimer:
    """
    One-shot timer on the running event loop that can be re-armed.

    Each call to ``reset`` cancels any pending delivery and returns a fresh
    future that resolves once, with the UTC delivery time, after the delay.
    A zero delay is still delivered by the loop rather than inline, so the
    returned future is always pending.

    Use as a context manager to guarantee the pending delivery is released.
    """

    def __init__(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._handle: asyncio.TimerHandle | None = None
        self._fired: asyncio.Future[datetime] | None = None

    def __enter__(self) -> "ResettableTimer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def reset(self, delay: int) -> asyncio.Future[datetime]:
        """
        Arm the timer to fire after ``delay`` nanoseconds.

        Returns:
            asyncio.Future[datetime]: Resolves with the delivery time.
        """
        self.stop()

        fired: asyncio.Future[datetime] = self._loop.create_future()
        self._handle = self._loop.call_later(
            to_seconds(max(delay, 0)),
            _deliver,
            fired,
        )
        self._fired = fired
        return fired

    def stop(self) -> None:
        """
        Cancel any pending delivery. Safe to call repeatedly.
        """
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

        if self._fired is not None and not self._fired.done():
            self._fired.cancel()
        self._fired = None


def _deliver(fired: asyncio.Future[datetime]) -> None:
    # the consumer may have cancelled the future already
    if not fired.done():
        fired.set_result(datetime.now(UTC))
