"""
Purpose: Game loop that owns the deferred action scheduler and polls it every frame.
Dependencies: pygame, client/game_state.py, client/input_handler.py, core/timing, core/config.py, utils/draw_utils.py.
Ext Hooks: Stack more game states; play the switch sound alongside the deferred toggle.
Client Only: Input and visuals.

This file contains the main game loop and handles:
- Input handling (via InputHandler)
- Settling deferred actions once per frame (via GameState)
- Rendering
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame
from core.config import FPS, SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE
from core.timing.stopwatch import Stopwatch
from client.game_state import GameState
from client.input_handler import InputHandler
from utils.draw_utils import draw_flashlight, draw_pause_overlay, draw_hud


class GameEngine:
    """Main game engine class that manages the game loop and all game systems."""

    def __init__(self, state=None):
        """Initialize pygame, the window and the game state."""
        with Stopwatch("engine startup", auto_report=True):
            pygame.init()
            pygame.font.init()
            self.font = pygame.font.SysFont('Arial', 24)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)

            # Clock for maintaining FPS
            self.clock = pygame.time.Clock()

            self.state = state if state is not None else GameState()
            self.input_handler = InputHandler(self.state)

        print(f"Screen: {SCREEN_WIDTH}x{SCREEN_HEIGHT} @ {FPS} FPS")

    def draw(self):
        """Draw all game elements to the screen."""
        self.screen.fill((0, 0, 0))
        draw_flashlight(self.screen, SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2, self.state.flashlight_brightness)
        draw_hud(self.screen, self.font, len(self.state.scheduler), self.state.frame_count)
        if self.state.paused:
            draw_pause_overlay(self.screen, self.font)

    def run(self):
        """Main game loop."""
        session = Stopwatch("session", auto_report=True)
        try:
            with session:
                while self.state.running:
                    self.clock.tick(FPS)

                    # Handle input
                    self.input_handler.handle_events(pygame.event.get())

                    # Settle deferred actions due this frame
                    self.state.update()

                    # Draw everything
                    self.draw()

                    # Update display
                    pygame.display.flip()
        finally:
            # End of game loop
            pygame.quit()


def main():
    """Main entry point for the game."""
    game = GameEngine()
    game.run()


if __name__ == "__main__":
    main()
