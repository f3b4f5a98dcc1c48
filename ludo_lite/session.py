from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .config import config
from .dice import Die
from .errors import LudoError
from .game import Game
from .types import Capture, GameSnapshot


@dataclass(slots=True)
class TurnUpdate:
    """Outcome of one UI action: the new snapshot plus what just happened."""

    snapshot: GameSnapshot
    dice: Optional[int] = None
    captured: List[Capture] = field(default_factory=list)
    finished: bool = False
    passed: bool = False
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


class GameSession:
    """Boundary between a pass-and-play front end and the rules engine.

    Front ends only call ``start_new_game``, ``roll`` and ``select_token`` and
    redraw from the returned snapshot. Rejected actions come back as a
    ``TurnUpdate`` with ``error`` set; the game state is left as it was.
    """

    def __init__(self, auto_pass: bool = config.AUTO_PASS, die: Optional[Die] = None):
        self.auto_pass = auto_pass
        self.die = die
        self.game: Optional[Game] = None

    def start_new_game(
        self,
        player_count: int = config.NUM_PLAYERS,
        target_tokens_to_win: int = config.TOKENS_TO_WIN,
        names: Optional[List[str]] = None,
    ) -> GameSnapshot:
        self.game = Game.new(
            player_count=player_count,
            target=target_tokens_to_win,
            names=names,
            die=self.die,
        )
        logger.info(
            f"New game: {player_count} players, {target_tokens_to_win} token(s) to win"
        )
        return self.game.snapshot()

    def _require_game(self) -> Game:
        if self.game is None:
            raise RuntimeError("start_new_game() must be called first")
        return self.game

    def _rejected(self, game: Game, err: LudoError) -> TurnUpdate:
        logger.warning(f"Rejected: {err}")
        return TurnUpdate(snapshot=game.snapshot(), error=str(err))

    def roll(self, player_id: int) -> TurnUpdate:
        game = self._require_game()
        try:
            dice = game.roll(player_id)
        except LudoError as err:
            return self._rejected(game, err)
        passed = False
        if self.auto_pass and game.must_pass():
            game.pass_turn(player_id)
            passed = True
        return TurnUpdate(snapshot=game.snapshot(), dice=dice, passed=passed)

    def pass_turn(self, player_id: int) -> TurnUpdate:
        game = self._require_game()
        dice = game.pending_roll
        try:
            game.pass_turn(player_id)
        except LudoError as err:
            return self._rejected(game, err)
        return TurnUpdate(snapshot=game.snapshot(), dice=dice, passed=True)

    def select_token(self, player_id: int, token_index: int) -> TurnUpdate:
        game = self._require_game()
        dice = game.pending_roll
        try:
            result = game.apply_move(player_id, token_index)
        except LudoError as err:
            return self._rejected(game, err)
        return TurnUpdate(
            snapshot=game.snapshot(),
            dice=dice,
            captured=result.captured,
            finished=result.finished,
        )
