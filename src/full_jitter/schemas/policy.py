# schemas/policy.py

import asyncio
import threading
from collections.abc import AsyncIterator, Iterator
from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from .._utils import to_nanoseconds
from ..attempts import backoff_attempts, backoff_attempts_blocking
from ..duration import SECOND, backoff_duration
from ..wait import backoff_after, backoff_sleep


class BackoffPolicy(BaseModel):
    """
    Immutable bundle of full-jitter backoff parameters.

    Durations may be given as integer nanoseconds, ``datetime.timedelta`` or
    duration strings such as "250ms". Values that cannot be converted are
    normalised to zero, which the backoff operations treat as "no delay"
    rather than as an error.

    Returns:
        BackoffPolicy: Policy with durations held as integer nanoseconds.
    """

    model_config = ConfigDict(frozen=True)

    # delay ceiling of the first attempt
    base: int = SECOND
    # upper bound on every delay ceiling
    cap: int = 64 * SECOND
    # attempts yielded by the attempt sequences
    max_attempts: int = 5

    @model_validator(mode="before")
    def _normalise_fields(self: object) -> object:
        """
        Convert duration fields to nanoseconds and coerce attempt counts.

        Args:
            self (object): Raw payload passed to the model.

        Returns:
            object: Payload with ``base`` and ``cap`` as integer nanoseconds.
        """
        if not isinstance(self, dict):
            return self

        fields = dict(self)
        for name in ("base", "cap"):
            if name in fields:
                fields[name] = to_nanoseconds(fields[name]) or 0

        if "max_attempts" in fields:
            fields["max_attempts"] = _to_count(fields["max_attempts"])

        return fields

    def duration(self, attempt: int) -> int:
        """
        Return the jittered delay for ``attempt``.

        Returns:
            int: Delay in nanoseconds, always below this policy's cap.
        """
        return backoff_duration(self.base, self.cap, attempt)

    def sleep(self, attempt: int) -> None:
        """
        Block the calling thread for the jittered delay of ``attempt``.

        Returns:
            None: Returns once the delay has elapsed.
        """
        backoff_sleep(self.base, self.cap, attempt)

    def after(self, attempt: int) -> asyncio.Future[datetime]:
        """
        Schedule delivery of the current time after the delay of ``attempt``.

        Returns:
            asyncio.Future[datetime]: Resolves once with the UTC delivery time.
        """
        return backoff_after(self.base, self.cap, attempt)

    def attempts(self, cancel: asyncio.Event) -> AsyncIterator[int]:
        """
        Return the cancellable async attempt sequence for this policy.

        Returns:
            AsyncIterator[int]: Attempt numbers up to ``max_attempts``.
        """
        return backoff_attempts(cancel, self.max_attempts, self.base, self.cap)

    def attempts_blocking(self, cancel: threading.Event) -> Iterator[int]:
        """
        Return the thread-based attempt sequence for this policy.

        Returns:
            Iterator[int]: Attempt numbers up to ``max_attempts``.
        """
        return backoff_attempts_blocking(
            cancel,
            self.max_attempts,
            self.base,
            self.cap,
        )


def default_policy() -> BackoffPolicy:
    """
    Return the default backoff policy.

    Returns:
        BackoffPolicy: One second base, 64 second cap, five attempts.
    """
    return BackoffPolicy()


def _to_count(value: object) -> int:
    """
    Coerce an attempt count to int, falling back to zero.

    Returns:
        int: The count, or 0 if the value is not integral.
    """
    if isinstance(value, bool):
        return 0

    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
