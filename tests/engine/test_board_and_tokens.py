import unittest

import numpy as np

from ludo_lite.board import Board
from ludo_lite.config import config
from ludo_lite.game import Game
from ludo_lite.token import Token
from ludo_lite.types import TokenState


class TestTokenState(unittest.TestCase):
    def test_new_token_is_in_base(self):
        token = Token(player_index=0, token_index=0)
        self.assertTrue(token.is_in_base())
        self.assertIsNone(token.position)

    def test_rejects_inconsistent_position(self):
        with self.assertRaises(ValueError):
            Token(0, 0, state=TokenState.ON_PATH, position=None)
        with self.assertRaises(ValueError):
            Token(0, 0, state=TokenState.ON_PATH, position=52)
        with self.assertRaises(ValueError):
            Token(0, 0, state=TokenState.IN_HOME_COLUMN, position=6)
        with self.assertRaises(ValueError):
            Token(0, 0, state=TokenState.BASE, position=3)
        with self.assertRaises(ValueError):
            Token(0, 0, state=TokenState.ON_PATH, position=7, lap_complete=True)

    def test_failed_place_keeps_previous_state(self):
        token = Token(0, 1, state=TokenState.ON_PATH, position=10)
        with self.assertRaises(ValueError):
            token.place(TokenState.IN_HOME_COLUMN, 9)
        self.assertTrue(token.is_on_path())
        self.assertEqual(token.position, 10)

    def test_finished_token_is_immutable(self):
        token = Token(0, 2, state=TokenState.FINISHED)
        with self.assertRaises(ValueError):
            token.send_to_base()
        self.assertTrue(token.is_finished())


class TestBoard(unittest.TestCase):
    def setUp(self):
        self.game = Game.new(player_count=4, target=4)
        self.board: Board = self.game.board

    def test_entry_cells_spaced_by_thirteen(self):
        self.assertEqual([Board.entry_cell(i) for i in range(4)], [0, 13, 26, 39])
        self.assertEqual(config.PLAYER_ENTRY_CELLS, [0, 13, 26, 39])

    def test_absolute_and_relative_conversion(self):
        self.assertEqual(Board.absolute_cell(0, 10), 10)
        self.assertEqual(Board.absolute_cell(1, 45), 6)
        self.assertEqual(Board.absolute_cell(3, 51), 38)
        for player in range(4):
            for offset in range(config.TRACK_LENGTH):
                cell = Board.absolute_cell(player, offset)
                self.assertEqual(Board.relative_offset(player, cell), offset)
        with self.assertRaises(ValueError):
            Board.absolute_cell(0, 52)

    def test_safe_cells(self):
        safe = [c for c in range(config.TRACK_LENGTH) if Board.is_safe(c)]
        self.assertEqual(safe, [0, 8, 13, 21, 26, 34, 39, 47])

    def test_tokens_at_cell_and_occupancy(self):
        red = self.game.players[0].tokens
        green = self.game.players[1].tokens
        red[0].place(TokenState.ON_PATH, 5)
        red[1].place(TokenState.ON_PATH, 5)
        green[0].place(TokenState.ON_PATH, 44)  # (13 + 44) % 52 == 5
        green[1].place(TokenState.IN_HOME_COLUMN, 2)

        self.assertEqual(len(self.board.tokens_at_cell(5)), 3)
        self.assertEqual(self.board.tokens_at_cell(5, exclude_player=0), [green[0]])
        self.assertIsNone(self.board.cell_of(green[1]))

        grid = self.board.occupancy()
        self.assertEqual(grid.shape, (4, config.TRACK_LENGTH))
        self.assertEqual(grid[0, 5], 2)
        self.assertEqual(grid[1, 5], 1)
        self.assertEqual(int(np.sum(grid)), 3)

        home = self.board.home_columns()
        self.assertEqual(home.shape, (4, config.HOME_COLUMN_SIZE))
        self.assertEqual(home[1, 2], 1)


if __name__ == "__main__":
    unittest.main()
