"""
Purpose: Time sources for Stopwatch and DeferredActionScheduler.
Dependencies: time module.
Ext Hooks: Drive from a fixed-tick simulation clock.
"""

import time


def monotonic_now() -> float:
    """Seconds from a clock that never runs backward."""
    return time.monotonic()


class ManualClock:
    """Monotonic clock stub that only advances when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def advance(self, seconds: float):
        if seconds < 0:
            raise ValueError("ManualClock cannot run backward")
        self.now += seconds

    def __call__(self) -> float:
        return self.now
