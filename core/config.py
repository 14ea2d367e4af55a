"""
Purpose: Configs for the frame loop, deferred actions and timing reports.
Dependencies: None.
Ext Hooks: Add key bindings.
"""

FPS = 60
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
WINDOW_TITLE = "Frame Scheduler - Flashlight Demo"

# Flashlight toggle is deferred so it lines up with the switch sound
FLASHLIGHT_TOGGLE_DELAY = 0.2  # seconds
FLASHLIGHT_ON_BRIGHTNESS = 1.5
FLASHLIGHT_OFF_THRESHOLD = 0.5

REPORT_PRECISION = 6  # digits after the decimal point in stopwatch reports
RAISE_CALLBACK_ERRORS = True
