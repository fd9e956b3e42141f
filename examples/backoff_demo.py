#!/usr/bin/env python3
"""
Backoff Demo for full-jitter package.

This script demonstrates the delay calculator on its own and the cancellable
attempt sequence driving a flaky operation until it succeeds.
"""

import asyncio
import random

from full_jitter import MILLISECOND, BackoffPolicy, backoff_duration, to_seconds


def print_separator(title: str) -> None:
    """Print a formatted section separator."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def demo_delays() -> None:
    """Show the jittered delay ceiling growing until it reaches the cap."""
    print_separator("DELAYS FOR 100ms BASE, 1s CAP")

    for attempt in range(6):
        delay = backoff_duration(100 * MILLISECOND, 1_000 * MILLISECOND, attempt)
        print(f"attempt {attempt}: {to_seconds(delay):.3f}s")


async def demo_attempts() -> None:
    """Retry a flaky operation with the attempt sequence."""
    print_separator("RETRYING A FLAKY OPERATION")

    policy = BackoffPolicy(base="50ms", cap="400ms", max_attempts=6)
    cancel = asyncio.Event()

    async for attempt in policy.attempts(cancel):
        if random.random() < 0.3:
            print(f"attempt {attempt}: succeeded")
            break
        print(f"attempt {attempt}: failed")
    else:
        print("gave up")


def main() -> None:
    demo_delays()
    asyncio.run(demo_attempts())


if __name__ == "__main__":
    main()
