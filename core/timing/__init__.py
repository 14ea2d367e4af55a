"""
Timing helpers for the frame loop.

This package contains the monotonic clock sources, the Stopwatch used to
measure intervals and the DeferredActionScheduler that runs callbacks once
their delay has passed.
"""

from core.timing.clock import ManualClock, monotonic_now
from core.timing.deferred import (
    DeferredActionError,
    DeferredActionScheduler,
    ScheduledAction,
    ThreadSafeScheduler,
)
from core.timing.stopwatch import Stopwatch
