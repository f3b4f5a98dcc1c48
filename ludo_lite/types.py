from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3


class TokenState(Enum):
    """Where a token is. The meaning of ``Token.position`` depends on it."""

    BASE = "base"  # not in play, no position
    ON_PATH = "on_path"  # offset 0..51 from the owner's entry cell
    IN_HOME_COLUMN = "in_home_column"  # step 0..5 of the private home column
    FINISHED = "finished"  # terminal, no position


class MoveKind(Enum):
    ENTER = "enter"
    ADVANCE = "advance"
    ENTER_HOME = "enter_home"
    ADVANCE_HOME = "advance_home"


@dataclass(frozen=True, slots=True)
class Move:
    player_index: int
    token_index: int
    kind: MoveKind
    dice_roll: int
    new_state: TokenState
    new_position: Optional[int]
    lap_complete: bool = False

    @property
    def finishes(self) -> bool:
        return self.new_state is TokenState.FINISHED


@dataclass(frozen=True, slots=True)
class Capture:
    player_index: int
    token_index: int
    cell: int


@dataclass(frozen=True, slots=True)
class TokenView:
    player_index: int
    token_index: int
    state: TokenState
    position: Optional[int]
    lap_complete: bool = False
    cell: Optional[int] = None  # absolute track cell while on the path

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["state"] = self.state.value
        return data


@dataclass(frozen=True, slots=True)
class MoveResult:
    move: Move
    token: TokenView
    captured: List[Capture] = field(default_factory=list)
    finished: bool = False
    winner: Optional[int] = None
    extra_turn: bool = False


@dataclass(frozen=True, slots=True)
class PlayerView:
    player_id: int
    name: str
    color: str
    finished_count: int
    tokens: List[TokenView]


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything a renderer needs after a mutation."""

    players: List[PlayerView]
    active_player: int
    pending_roll: Optional[int]
    winner: Optional[int]
    target: int
    must_pass: bool = False
    last_captured: List[Capture] = field(default_factory=list)
    last_finished: bool = False

    @property
    def tokens(self) -> List[List[TokenView]]:
        return [p.tokens for p in self.players]

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "players": [
                {
                    "player_id": p.player_id,
                    "name": p.name,
                    "color": p.color,
                    "finished_count": p.finished_count,
                    "tokens": [t.to_dict() for t in p.tokens],
                }
                for p in self.players
            ],
            "active_player": self.active_player,
            "pending_roll": self.pending_roll,
            "winner": self.winner,
            "target": self.target,
            "must_pass": self.must_pass,
            "last_captured": [asdict(c) for c in self.last_captured],
            "last_finished": self.last_finished,
        }
