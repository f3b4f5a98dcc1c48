from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .board import Board
from .config import config
from .dice import Die, RandomDie
from .errors import GameOver, IllegalMove, NoRollPending, NotYourTurn, RollAlreadyPending
from .player import Player
from .token import Token
from .types import (
    Capture,
    GameSnapshot,
    Move,
    MoveKind,
    MoveResult,
    PlayerView,
    TokenState,
)


@dataclass(slots=True)
class Game:
    players: List[Player]
    target: int = config.TOKENS_TO_WIN
    die: Die = field(default_factory=lambda: RandomDie(config.SEED))
    turn: int = field(default=0, init=False)
    pending_roll: Optional[int] = field(default=None, init=False)
    winner: Optional[int] = field(default=None, init=False)
    board: Board = field(init=False)
    _last_captured: list[Capture] = field(default_factory=list, init=False, repr=False)
    _last_finished: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not 2 <= len(self.players) <= config.MAX_PLAYERS:
            raise ValueError("a game needs between 2 and 4 players")
        if [p.player_id for p in self.players] != list(range(len(self.players))):
            raise ValueError("players must be seated in id order starting at 0")
        if not 1 <= self.target <= config.TOKENS_PER_PLAYER:
            raise ValueError("target must be between 1 and 4 finished tokens")
        self.board = Board(players=self.players)

    @classmethod
    def new(
        cls,
        player_count: int = config.NUM_PLAYERS,
        target: int = config.TOKENS_TO_WIN,
        names: Optional[List[str]] = None,
        die: Optional[Die] = None,
    ) -> "Game":
        """Create a fresh game: every token in base, player 0 to roll."""
        if not 2 <= player_count <= config.MAX_PLAYERS:
            raise ValueError("player_count must be between 2 and 4")
        names = list(names or [])
        players = [
            Player(player_id=i, name=names[i] if i < len(names) else "")
            for i in range(player_count)
        ]
        if die is None:
            return cls(players=players, target=target)
        return cls(players=players, target=target, die=die)

    # --- State queries ---
    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def active_player(self) -> Player:
        return self.players[self.turn]

    def must_pass(self) -> bool:
        return (
            not self.is_over
            and self.pending_roll is not None
            and not self.legal_moves(self.turn)
        )

    def _ensure_can_act(self, player_id: int) -> None:
        if self.is_over:
            raise GameOver(f"game over: {self.players[self.winner].name} has won")
        if player_id != self.turn:
            raise NotYourTurn(
                f"it is {self.active_player.name}'s turn, not player {player_id}'s"
            )

    # --- Dice ---
    def roll(self, player_id: Optional[int] = None) -> int:
        if player_id is None:
            player_id = self.turn
        self._ensure_can_act(player_id)
        if self.pending_roll is not None:
            raise RollAlreadyPending(
                f"roll of {self.pending_roll} has not been used yet"
            )
        value = self.die.roll()
        if not config.DICE_MIN <= value <= config.DICE_MAX:
            raise ValueError(f"die produced {value}, expected 1..6")
        self.pending_roll = value
        self._last_captured = []
        self._last_finished = False
        logger.debug(f"{self.active_player.name} rolled {value}")
        return value

    # --- Rules: destinations and legality ---
    @staticmethod
    def steps_to_home_entry(token: Token) -> int:
        """Track steps left before the token turns into its home column."""
        if token.position == 0:
            return 0 if token.lap_complete else config.TRACK_LENGTH
        return (config.TRACK_LENGTH - token.position) % config.TRACK_LENGTH

    @classmethod
    def move_for_roll(cls, token: Token, dice: int) -> Move | None:
        """Derive the single move a token can make with ``dice``, if any."""
        base = dict(
            player_index=token.player_index,
            token_index=token.token_index,
            dice_roll=dice,
        )
        if token.is_finished():
            return None
        if token.is_in_base():
            if dice != config.ENTER_ROLL:
                return None
            return Move(
                kind=MoveKind.ENTER,
                new_state=TokenState.ON_PATH,
                new_position=0,
                **base,
            )
        if token.is_in_home_column():
            step = token.position + dice
            if step > config.HOME_FINISH_STEP:
                return None
            return cls._home_move(MoveKind.ADVANCE_HOME, step, base)

        remaining = cls.steps_to_home_entry(token)
        if dice <= remaining:
            travelled = token.position + dice
            return Move(
                kind=MoveKind.ADVANCE,
                new_state=TokenState.ON_PATH,
                new_position=travelled % config.TRACK_LENGTH,
                lap_complete=travelled == config.TRACK_LENGTH,
                **base,
            )
        step = dice - remaining - 1
        if step > config.HOME_FINISH_STEP:
            return None
        return cls._home_move(MoveKind.ENTER_HOME, step, base)

    @staticmethod
    def _home_move(kind: MoveKind, step: int, base: dict) -> Move:
        if step == config.HOME_FINISH_STEP:
            return Move(kind=kind, new_state=TokenState.FINISHED, new_position=None, **base)
        return Move(kind=kind, new_state=TokenState.IN_HOME_COLUMN, new_position=step, **base)

    def legal_moves(self, player_id: int) -> List[Move]:
        if self.is_over or self.pending_roll is None or player_id != self.turn:
            return []
        moves: List[Move] = []
        for token in self.players[player_id].tokens:
            mv = self.move_for_roll(token, self.pending_roll)
            if mv is not None:
                moves.append(mv)
        return moves

    # --- Applying a move ---
    def apply_move(self, player_id: int, token_index: int) -> MoveResult:
        self._ensure_can_act(player_id)
        if self.pending_roll is None:
            raise NoRollPending("roll the die before moving")
        player = self.players[player_id]
        if not 0 <= token_index < len(player.tokens):
            raise IllegalMove(f"no token {token_index} for {player.name}")
        token = player.tokens[token_index]
        dice = self.pending_roll
        mv = self.move_for_roll(token, dice)
        if mv is None:
            raise IllegalMove(f"{token} cannot move with a roll of {dice}")

        token.place(mv.new_state, mv.new_position, mv.lap_complete)
        logger.debug(f"{player.name} {mv.kind.value}: {token}")

        captured = self._resolve_captures(token) if token.is_on_path() else []

        finished = mv.finishes
        if finished:
            count = player.record_finish()
            logger.debug(f"{player.name} finished token {token_index} ({count}/{self.target})")
            if player.has_reached(self.target):
                self.winner = player_id
                logger.info(f"{player.name} wins")

        self.pending_roll = None
        extra = dice == config.EXTRA_TURN_ROLL and self.winner is None
        if not extra and self.winner is None:
            self._advance_turn()

        self._last_captured = captured
        self._last_finished = finished
        return MoveResult(
            move=mv,
            token=token.view(self.board.cell_of(token)),
            captured=captured,
            finished=finished,
            winner=self.winner,
            extra_turn=extra,
        )

    def _resolve_captures(self, token: Token) -> list[Capture]:
        cell = self.board.cell_of(token)
        if self.board.is_safe(cell):
            return []
        captured: list[Capture] = []
        for victim in self.board.tokens_at_cell(cell, exclude_player=token.player_index):
            victim.send_to_base()
            captured.append(
                Capture(
                    player_index=victim.player_index,
                    token_index=victim.token_index,
                    cell=cell,
                )
            )
            logger.info(
                f"{self.players[token.player_index].name} captured "
                f"{self.players[victim.player_index].name} token {victim.token_index} on cell {cell}"
            )
        return captured

    def pass_turn(self, player_id: Optional[int] = None) -> int:
        """Give up a roll that has no legal move. Returns the next active player."""
        if player_id is None:
            player_id = self.turn
        self._ensure_can_act(player_id)
        if self.pending_roll is None:
            raise NoRollPending("roll the die before passing")
        if self.legal_moves(player_id):
            raise IllegalMove(
                f"{self.active_player.name} has a legal move for {self.pending_roll}"
            )
        logger.debug(f"{self.active_player.name} has no move for {self.pending_roll}, passing")
        self.pending_roll = None
        self._last_captured = []
        self._last_finished = False
        self._advance_turn()
        return self.turn

    def _advance_turn(self) -> None:
        self.turn = (self.turn + 1) % self.player_count

    # --- Output ---
    def snapshot(self) -> GameSnapshot:
        players = [
            PlayerView(
                player_id=p.player_id,
                name=p.name,
                color=p.color,
                finished_count=p.finished_count,
                tokens=[t.view(self.board.cell_of(t)) for t in p.tokens],
            )
            for p in self.players
        ]
        return GameSnapshot(
            players=players,
            active_player=self.turn,
            pending_roll=self.pending_roll,
            winner=self.winner,
            target=self.target,
            must_pass=self.must_pass(),
            last_captured=list(self._last_captured),
            last_finished=self._last_finished,
        )
