"""
Purpose: Translate pygame events into game state changes.
Dependencies: pygame, client/game_state.py.
Ext Hooks: Future input mapping, keybinds.
Client Only: Input handling only; no game logic.
"""

import pygame


class InputHandler:
    """
    Handles user input events and translates them to game actions.

    While the game is paused only Escape (resume) and closing the window
    are handled, like a pause screen stacked on top of the game.
    """

    def __init__(self, state):
        """
        Args:
            state: GameState instance the input acts on
        """
        self.state = state

    def handle_events(self, events):
        for event in events:
            self.handle_event(event)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.state.quit()
        elif event.type == pygame.KEYDOWN:
            self.handle_keydown(event.key)

    def handle_keydown(self, key):
        if key == pygame.K_ESCAPE:
            self.state.toggle_pause()
        elif self.state.paused:
            return
        elif key == pygame.K_f:
            self.state.request_flashlight_toggle()
