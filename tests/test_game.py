# tests/test_game.py

import unittest

from sweeper.board import Board
from sweeper.config import load_config
from sweeper.errors import InvalidMineCount
from sweeper.game import GameSession


class TestGameSession(unittest.TestCase):

    def setUp(self):
        self.session = GameSession(width=4, height=3, num_mines=2)
        self.session.board = Board.from_mines(4, 3, [(0, 0), (3, 2)])

    def test_initial_state(self):
        state = GameSession(width=6, height=5, num_mines=4).get_state()
        self.assertFalse(state["game_over"])
        self.assertFalse(state["won"])
        self.assertEqual(state["moves_made"], 0)
        self.assertEqual(state["dimensions"], (5, 6))
        self.assertEqual(state["status"], "mines_pending")
        self.assertEqual(state["elapsed"], 0.0)
        self.assertIsNone(state["last_outcome"])
        self.assertTrue(all(cell is None for row in state["board"] for cell in row))

    def test_invalid_parameters_propagate(self):
        with self.assertRaises(InvalidMineCount):
            GameSession(width=3, height=3, num_mines=1)

    def test_unknown_action(self):
        with self.assertRaises(ValueError):
            self.session.step("dig", 0, 0)

    def test_winning_game(self):
        state = self.session.step("reveal", 3, 0)
        self.assertEqual(state["moves_made"], 1)
        self.assertEqual(state["last_outcome"], "continued")
        self.assertEqual(state["board"][0][1], 1)

        state = self.session.step("reveal", 0, 2)
        self.assertTrue(state["game_over"])
        self.assertTrue(state["won"])
        self.assertEqual(state["last_outcome"], "victory")
        self.assertEqual(state["flags"], 0)
        self.assertEqual(state["mines_left"], 2)
        self.assertEqual(self.session.get_score(), 1.0)
        self.assertTrue(self.session.is_win())

        # finished games ignore further actions
        state = self.session.step("flag", 1, 1)
        self.assertEqual(state["moves_made"], 2)
        self.assertEqual(self.session.elapsed_time(), self.session.elapsed_time())

    def test_losing_game(self):
        self.session.step("flag", 1, 1)
        state = self.session.step("reveal", 0, 0)
        self.assertTrue(state["game_over"])
        self.assertFalse(state["won"])
        self.assertEqual(state["status"], "defeated")
        self.assertEqual(state["board"][1][1], "X")
        self.assertTrue(self.session.is_game_over())

    def test_rejected_actions_do_not_count(self):
        self.session.step("reveal", 3, 0)
        state = self.session.step("flag", 3, 0)
        self.assertEqual(state["last_outcome"], "rejected")
        self.assertEqual(state["moves_made"], 1)
        state = self.session.step("reveal", 9, 9)
        self.assertEqual(state["moves_made"], 1)

    def test_flag_counter(self):
        state = self.session.step("flag", 2, 2)
        self.assertEqual(state["flags"], 1)
        self.assertEqual(state["mines_left"], 1)
        self.assertEqual(state["last_outcome"], "flagged")

    def test_reset(self):
        self.session.step("reveal", 0, 0)
        self.session.reset()
        self.assertFalse(self.session.is_game_over())
        self.assertEqual(self.session.moves_made, 0)
        self.assertFalse(self.session.board.mines_placed)

    def test_tick_moves_running_bomb(self):
        session = GameSession(width=5, height=5, num_mines=3, running_bomb=True)
        session.board = Board.from_mines(5, 5, [(0, 0), (4, 4), (2, 2)], running_bomb=(2, 2))
        session.tick()
        # the clock has not started, so the bomb waits for the first move
        self.assertEqual(session.board.running_bomb, (2, 2))

        session.step("reveal", 2, 0)
        session.tick()
        self.assertIn(session.board.running_bomb, {(1, 2), (1, 3), (2, 3)})

    def test_tick_on_standard_game(self):
        session = GameSession(width=5, height=5, num_mines=3, seed=4)
        session.step("reveal", 2, 2)
        before = session.get_state()["board"]
        self.assertEqual(session.tick()["board"], before)

    def test_from_difficulty(self):
        session = GameSession.from_difficulty(load_config(), "expert", seed=1)
        self.assertEqual((session.width, session.height, session.num_mines), (29, 16, 99))


if __name__ == "__main__":
    unittest.main()
