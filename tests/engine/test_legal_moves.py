import unittest

from ludo_lite.board import Board
from ludo_lite.dice import ScriptedDie
from ludo_lite.game import Game
from ludo_lite.token import Token
from ludo_lite.types import MoveKind, TokenState


class TestLegalMoves(unittest.TestCase):
    def setUp(self):
        self.die = ScriptedDie()
        self.game = Game.new(player_count=4, target=4, die=self.die)

    def roll(self, value):
        self.die.extend([value])
        return self.game.roll()

    def test_no_moves_without_pending_roll(self):
        self.assertEqual(self.game.legal_moves(0), [])

    def test_base_tokens_only_enter_on_six(self):
        for value in range(1, 6):
            self.game.pending_roll = None
            self.roll(value)
            self.assertEqual(self.game.legal_moves(0), [])
            self.assertTrue(self.game.must_pass())
        self.game.pending_roll = None
        self.roll(6)
        moves = self.game.legal_moves(0)
        self.assertEqual([m.token_index for m in moves], [0, 1, 2, 3])
        self.assertTrue(all(m.kind is MoveKind.ENTER for m in moves))
        self.assertTrue(all(m.new_position == 0 for m in moves))

    def test_only_active_player_has_moves(self):
        self.roll(6)
        self.assertEqual(self.game.legal_moves(1), [])

    def test_track_moves_for_every_offset_and_roll(self):
        for player in range(4):
            for pos in range(1, 52):
                for dice in range(1, 7):
                    token = Token(player, 0, state=TokenState.ON_PATH, position=pos)
                    mv = Game.move_for_roll(token, dice)
                    dist = (52 - pos) % 52
                    with self.subTest(player=player, pos=pos, dice=dice):
                        self.assertIsNotNone(mv)
                        if dice <= dist:
                            self.assertIs(mv.kind, MoveKind.ADVANCE)
                            self.assertIs(mv.new_state, TokenState.ON_PATH)
                            self.assertEqual(mv.new_position, (pos + dice) % 52)
                            self.assertEqual(mv.lap_complete, pos + dice == 52)
                        else:
                            step = dice - dist - 1
                            self.assertIs(mv.kind, MoveKind.ENTER_HOME)
                            if step == 5:
                                self.assertIs(mv.new_state, TokenState.FINISHED)
                                self.assertIsNone(mv.new_position)
                            else:
                                self.assertIs(mv.new_state, TokenState.IN_HOME_COLUMN)
                                self.assertEqual(mv.new_position, step)

    def test_fresh_token_on_entry_cell_starts_its_lap(self):
        token = Token(2, 0, state=TokenState.ON_PATH, position=0)
        for dice in range(1, 7):
            mv = Game.move_for_roll(token, dice)
            self.assertIs(mv.kind, MoveKind.ADVANCE)
            self.assertEqual(mv.new_position, dice)
            self.assertFalse(mv.lap_complete)

    def test_lapped_token_turns_into_home_column(self):
        token = Token(1, 0, state=TokenState.ON_PATH, position=0, lap_complete=True)
        for dice in range(1, 6):
            mv = Game.move_for_roll(token, dice)
            self.assertIs(mv.kind, MoveKind.ENTER_HOME)
            self.assertEqual(mv.new_position, dice - 1)
        mv = Game.move_for_roll(token, 6)
        self.assertTrue(mv.finishes)

    def test_last_track_cell_reaches_entry_then_home(self):
        token = Token(0, 0, state=TokenState.ON_PATH, position=51)
        mv = Game.move_for_roll(token, 1)
        self.assertIs(mv.kind, MoveKind.ADVANCE)
        self.assertEqual(mv.new_position, 0)
        self.assertTrue(mv.lap_complete)
        mv = Game.move_for_roll(token, 2)
        self.assertIs(mv.kind, MoveKind.ENTER_HOME)
        self.assertEqual(mv.new_position, 0)

    def test_home_column_requires_exact_count(self):
        for step in range(5):
            for dice in range(1, 7):
                token = Token(0, 0, state=TokenState.IN_HOME_COLUMN, position=step)
                mv = Game.move_for_roll(token, dice)
                with self.subTest(step=step, dice=dice):
                    if step + dice > 5:
                        self.assertIsNone(mv)
                    elif step + dice == 5:
                        self.assertIs(mv.kind, MoveKind.ADVANCE_HOME)
                        self.assertTrue(mv.finishes)
                    else:
                        self.assertIs(mv.kind, MoveKind.ADVANCE_HOME)
                        self.assertEqual(mv.new_position, step + dice)

    def test_finished_token_never_moves(self):
        token = Token(0, 0, state=TokenState.FINISHED)
        for dice in range(1, 7):
            self.assertIsNone(Game.move_for_roll(token, dice))

    def test_entering_lands_on_own_entry_cell(self):
        for player in range(4):
            game = Game.new(player_count=4, target=4, die=ScriptedDie([6]))
            game.turn = player
            game.roll(player)
            result = game.apply_move(player, 0)
            self.assertEqual(result.token.position, 0)
            self.assertEqual(result.token.cell, 13 * player)
            self.assertEqual(result.token.cell, Board.entry_cell(player))


if __name__ == "__main__":
    unittest.main()
