import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock
from core.timing.clock import ManualClock
from core.timing.deferred import DeferredActionScheduler
from client.game_state import GameState
from client.game import GameEngine


class TestGameEngineRun(unittest.TestCase):
    def setUp(self):
        # Skip __init__ so no window is opened
        self.engine = GameEngine.__new__(GameEngine)
        self.engine.state = GameState(scheduler=DeferredActionScheduler(clock=ManualClock()))
        self.engine.clock = mock.Mock()
        self.engine.input_handler = mock.Mock()

    def test_pygame_quit_when_loop_raises(self):
        self.engine.draw = mock.Mock(side_effect=RuntimeError("draw failed"))
        out = io.StringIO()
        with mock.patch("client.game.pygame") as fake_pygame, redirect_stdout(out):
            with self.assertRaises(RuntimeError):
                self.engine.run()
        fake_pygame.quit.assert_called_once_with()
        # Session time is still reported
        self.assertIn("<- session", out.getvalue())

    def test_pygame_quit_on_normal_exit(self):
        self.engine.draw = mock.Mock(side_effect=self.engine.state.quit)
        with mock.patch("client.game.pygame") as fake_pygame, redirect_stdout(io.StringIO()):
            self.engine.run()
        self.assertEqual(self.engine.state.frame_count, 1)
        fake_pygame.quit.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
