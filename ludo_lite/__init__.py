from .board import Board
from .config import config
from .dice import RandomDie, ScriptedDie
from .errors import (
    GameOver,
    IllegalMove,
    LudoError,
    NoRollPending,
    NotYourTurn,
    RollAlreadyPending,
)
from .game import Game
from .player import Player
from .session import GameSession, TurnUpdate
from .token import Token
from .types import (
    Capture,
    Color,
    GameSnapshot,
    Move,
    MoveKind,
    MoveResult,
    TokenState,
    TokenView,
)

__all__ = [
    "Board",
    "Capture",
    "Color",
    "config",
    "Game",
    "GameOver",
    "GameSession",
    "GameSnapshot",
    "IllegalMove",
    "LudoError",
    "Move",
    "MoveKind",
    "MoveResult",
    "NoRollPending",
    "NotYourTurn",
    "Player",
    "RandomDie",
    "RollAlreadyPending",
    "ScriptedDie",
    "Token",
    "TokenState",
    "TokenView",
    "TurnUpdate",
]
