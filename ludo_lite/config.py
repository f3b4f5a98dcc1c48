import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None


@dataclass(slots=True)
class Config:
    # --- Constants ---
    TRACK_LENGTH: int = 52  # shared circular track, absolute cells 0..51
    HOME_COLUMN_SIZE: int = 6  # private steps 0..5, step 5 = finished
    TOKENS_PER_PLAYER: int = 4
    MAX_PLAYERS: int = 4
    ENTRY_SPACING: int = 13  # player i enters the track at 13 * i
    ENTER_ROLL: int = 6
    EXTRA_TURN_ROLL: int = 6
    DICE_MIN: int = 1
    DICE_MAX: int = 6

    # Game defaults (overridable from the environment / .env)
    NUM_PLAYERS: int = int(os.getenv("NUM_PLAYERS", 4))
    TOKENS_TO_WIN: int = int(os.getenv("TOKENS_TO_WIN", 4))
    AUTO_PASS: bool = bool(int(os.getenv("AUTO_PASS", 1)))
    SEED: int | None = field(default_factory=lambda: _optional_int("LUDO_SEED"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Absolute indices on the 52-cell track
    SAFE_CELLS: frozenset[int] = field(
        default_factory=lambda: frozenset({0, 8, 13, 21, 26, 34, 39, 47})
    )

    # Red, Green, Yellow, Blue (clockwise)
    PLAYER_NAMES: list[str] = field(
        default_factory=lambda: ["Red", "Green", "Yellow", "Blue"]
    )
    PLAYER_COLORS: list[str] = field(
        default_factory=lambda: ["#ef4444", "#10b981", "#f59e0b", "#06b6d4"]
    )

    # Derived (populated in __post_init__ due to slots)
    HOME_FINISH_STEP: int = 0
    PLAYER_ENTRY_CELLS: list[int] = field(default_factory=list)

    def __post_init__(self):
        self.HOME_FINISH_STEP = self.HOME_COLUMN_SIZE - 1
        self.PLAYER_ENTRY_CELLS = [
            (self.ENTRY_SPACING * i) % self.TRACK_LENGTH
            for i in range(self.MAX_PLAYERS)
        ]

        if self.NUM_PLAYERS < 2 or self.NUM_PLAYERS > self.MAX_PLAYERS:
            raise ValueError("NUM_PLAYERS must be between 2 and 4")
        if self.TOKENS_TO_WIN < 1 or self.TOKENS_TO_WIN > self.TOKENS_PER_PLAYER:
            raise ValueError("TOKENS_TO_WIN must be between 1 and 4")
        if len(self.PLAYER_NAMES) != self.MAX_PLAYERS:
            raise ValueError("PLAYER_NAMES must name every seat")
        if len(self.PLAYER_COLORS) != self.MAX_PLAYERS:
            raise ValueError("PLAYER_COLORS must cover every seat")


config = Config()
