"""
Purpose: Run callbacks once after a delay, settled by the frame loop each frame.
Dependencies: core/timing/clock.py, core/config.py, heapq, threading.
Ext Hooks: Per-frame budget for long callback batches.
Game Loop: poll() is called from GameState.update() once per unpaused frame.

Example:
    # toggle the flashlight in 0.2s so it fits the switch sound
    scheduler.insert(0.2, state.toggle_flashlight)
"""

import heapq
import itertools
import math
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from core.config import RAISE_CALLBACK_ERRORS
from core.timing.clock import monotonic_now


@dataclass(order=True)
class ScheduledAction:
    """A callback waiting for its fire instant. Ordered by (fire_instant, sequence)."""
    fire_instant: float
    sequence: int
    callback: Callable = field(compare=False)
    args: Tuple[Any, ...] = field(default=(), compare=False)
    kwargs: Dict[str, Any] = field(default_factory=dict, compare=False)

    def run(self):
        self.callback(*self.args, **self.kwargs)

    @property
    def name(self) -> str:
        return getattr(self.callback, "__qualname__", None) or repr(self.callback)


class DeferredActionError(RuntimeError):
    """Raised by poll() after every due callback ran, when some of them failed."""

    def __init__(self, failures: List[Tuple[ScheduledAction, Exception]], attempted: int):
        names = ", ".join(f"{action.name}: {exc!r}" for action, exc in failures)
        super().__init__(f"{len(failures)} deferred action(s) failed: {names}")
        self.failures = failures
        self.attempted = attempted


class DeferredActionScheduler:
    """
    Holds callbacks keyed by the instant they become due.

    Each poll() reads the clock once and settles every action due at that
    instant. Actions sharing an instant run in insertion order. Actions
    inserted while a poll is running wait for the next poll.
    """

    def __init__(self, clock: Callable[[], float] = monotonic_now,
                 raise_errors: bool = RAISE_CALLBACK_ERRORS):
        self.clock = clock
        self.raise_errors = raise_errors
        self._actions: List[ScheduledAction] = []
        self._sequence = itertools.count()

    def insert(self, delay: float, callback: Callable, *args, **kwargs):
        """Schedule callback(*args, **kwargs) to run on the first poll at least delay seconds from now."""
        if not callable(callback):
            raise TypeError(f"deferred action is not callable: {callback!r}")
        if not math.isfinite(delay) or delay < 0:
            raise ValueError(f"delay must be a finite number >= 0, got {delay}")
        action = ScheduledAction(self.clock() + delay, next(self._sequence), callback, args, kwargs)
        heapq.heappush(self._actions, action)

    def poll(self) -> int:
        """Run every action due now. Returns how many were run."""
        due = self._take_due(self.clock())
        self._run(due)
        return len(due)

    def next_fire_instant(self) -> Optional[float]:
        """Fire instant of the earliest pending action, or None."""
        return self._actions[0].fire_instant if self._actions else None

    def __len__(self):
        return len(self._actions)

    def _take_due(self, now: float) -> List[ScheduledAction]:
        # Removed before any callback runs, so nothing inserted during the
        # run can join this batch and nothing can fire twice.
        due = []
        while self._actions and self._actions[0].fire_instant <= now:
            due.append(heapq.heappop(self._actions))
        return due

    def _run(self, due: List[ScheduledAction]):
        failures = []
        for i, action in enumerate(due):
            try:
                action.run()
            except Exception as e:
                failures.append((action, e))
                if not self.raise_errors:
                    print(f"Error in deferred action {action.name}: {e}")
            except BaseException:
                # Interrupted: the rest of the batch waits for a later poll
                self._requeue(due[i + 1:])
                raise
        if failures and self.raise_errors:
            raise DeferredActionError(failures, len(due)) from failures[0][1]

    def _requeue(self, actions: List[ScheduledAction]):
        for action in actions:
            heapq.heappush(self._actions, action)


class ThreadSafeScheduler(DeferredActionScheduler):
    """
    Scheduler that other threads may insert into while the frame loop polls.
    Callbacks still run on the polling thread, outside the lock.
    """

    def __init__(self, clock: Callable[[], float] = monotonic_now,
                 raise_errors: bool = RAISE_CALLBACK_ERRORS):
        super().__init__(clock, raise_errors)
        self._lock = threading.Lock()

    def insert(self, delay: float, callback: Callable, *args, **kwargs):
        with self._lock:
            super().insert(delay, callback, *args, **kwargs)

    def poll(self) -> int:
        with self._lock:
            due = self._take_due(self.clock())
        self._run(due)
        return len(due)

    def next_fire_instant(self) -> Optional[float]:
        with self._lock:
            return super().next_fire_instant()

    def __len__(self):
        with self._lock:
            return super().__len__()

    def _requeue(self, actions: List[ScheduledAction]):
        with self._lock:
            super()._requeue(actions)
