"""
Purpose: Measure time intervals and optionally print them when a block ends.
Dependencies: core/timing/clock.py, core/config.py.
Ext Hooks: Feed reports into a frame-time overlay.

Example:
    with Stopwatch("load level", auto_report=True):
        load_level()
    # prints something like "0.100132 <- load level" when the block exits
"""

import sys
from typing import Callable, Optional, TextIO

from core.config import REPORT_PRECISION
from core.timing.clock import monotonic_now


class Stopwatch:
    """
    Measures the time passed since it was started or last reset.

    Used as a context manager with auto_report=True it prints the elapsed
    time and label exactly once when the block is left, whether the block
    returns normally or raises.
    """

    def __init__(self, label: str = "", auto_report: bool = False,
                 clock: Callable[[], float] = monotonic_now, stream: Optional[TextIO] = None):
        self.label = label
        self.auto_report = auto_report
        self.clock = clock
        self.stream = stream
        self.start_instant = clock()
        self._reported = False

    @classmethod
    def start(cls, label: str = "", auto_report: bool = False, **kwargs) -> "Stopwatch":
        """Create a running stopwatch; same as calling the constructor."""
        return cls(label, auto_report, **kwargs)

    def reset(self):
        """Restart measuring from now."""
        # never move the start backward, even if the clock did
        self.start_instant = max(self.start_instant, self.clock())

    def elapsed(self) -> float:
        """Seconds since start, clamped to 0 if the clock regressed."""
        return max(0.0, self.clock() - self.start_instant)

    def report(self) -> float:
        """Print "<seconds> <- <label>" and return the elapsed seconds."""
        seconds = self.elapsed()
        print(f"{seconds:.{REPORT_PRECISION}f} <- {self.label}", file=self.stream or sys.stdout)
        return seconds

    def __float__(self):
        return self.elapsed()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.auto_report and not self._reported:
            self._reported = True
            self.report()
        return False

    def __repr__(self):
        return f"Stopwatch(label={self.label!r}, elapsed={self.elapsed():.{REPORT_PRECISION}f})"
