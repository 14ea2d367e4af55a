"""
Purpose: Centralize mutable game state - pause flag, flashlight and the deferred action scheduler.
Dependencies: core/timing/deferred.py, core/config.py.
Ext Hooks: Stack more states (menus) on top of the playing state.
Game Loop: update() is called once per frame from client/game.py; no rendering here.
"""

from dataclasses import dataclass, field
from typing import Optional
from core.config import FLASHLIGHT_TOGGLE_DELAY, FLASHLIGHT_ON_BRIGHTNESS, FLASHLIGHT_OFF_THRESHOLD
from core.timing.deferred import DeferredActionScheduler, DeferredActionError


@dataclass
class GameState:
    """
    Encapsulates the mutable state of the flashlight demo.

    The pause flag mirrors a pause screen stacked on top of the playing
    state: while it is set the scheduler is not polled, so pending actions
    wait and fire on the first frame after resuming.
    """

    scheduler: DeferredActionScheduler = field(default_factory=DeferredActionScheduler)
    paused: bool = False
    running: bool = True
    flashlight_brightness: float = FLASHLIGHT_ON_BRIGHTNESS
    frame_count: int = 0  # Unpaused frames only

    def update(self) -> int:
        """Settle deferred actions for this frame. Returns how many fired."""
        if self.paused:
            return 0
        self.frame_count += 1
        try:
            return self.scheduler.poll()
        except DeferredActionError as e:
            # Keep the frame loop alive; every due action has already been attempted
            print(f"Frame {self.frame_count}: {e}")
            return e.attempted

    def toggle_pause(self):
        self.paused = not self.paused
        print("Game paused" if self.paused else "Game resumed")

    def request_flashlight_toggle(self, delay: Optional[float] = None):
        """Toggle the flashlight after a delay so it fits the switch sound."""
        self.scheduler.insert(FLASHLIGHT_TOGGLE_DELAY if delay is None else delay, self.toggle_flashlight)

    def toggle_flashlight(self):
        if self.flashlight_brightness > FLASHLIGHT_OFF_THRESHOLD:
            self.flashlight_brightness = 0.0
        else:
            self.flashlight_brightness = FLASHLIGHT_ON_BRIGHTNESS

    @property
    def flashlight_on(self) -> bool:
        return self.flashlight_brightness > FLASHLIGHT_OFF_THRESHOLD

    def quit(self):
        self.running = False
