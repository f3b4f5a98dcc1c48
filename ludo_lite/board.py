from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .config import config
from .player import Player
from .token import Token


@dataclass(slots=True)
class Board:
    """Owns the mapping between per-player offsets and shared track cells (no rule logic)."""

    players: Sequence[Player]

    @staticmethod
    def entry_cell(player_index: int) -> int:
        return config.PLAYER_ENTRY_CELLS[player_index]

    @staticmethod
    def absolute_cell(player_index: int, offset: int) -> int:
        """Map a player's track offset (0..51) to the shared cell index (0..51)."""
        if not 0 <= offset < config.TRACK_LENGTH:
            raise ValueError(f"track offset out of range: {offset}")
        return (config.PLAYER_ENTRY_CELLS[player_index] + offset) % config.TRACK_LENGTH

    @staticmethod
    def relative_offset(player_index: int, cell: int) -> int:
        """Map a shared cell back to the player's offset frame."""
        if not 0 <= cell < config.TRACK_LENGTH:
            raise ValueError(f"track cell out of range: {cell}")
        return (cell - config.PLAYER_ENTRY_CELLS[player_index]) % config.TRACK_LENGTH

    @staticmethod
    def is_safe(cell: int) -> bool:
        return cell in config.SAFE_CELLS

    def cell_of(self, token: Token) -> Optional[int]:
        if not token.is_on_path():
            return None
        return self.absolute_cell(token.player_index, token.position)

    def tokens_at_cell(
        self, cell: int, *, exclude_player: int | None = None
    ) -> list[Token]:
        out: list[Token] = []
        for player in self.players:
            if exclude_player is not None and player.player_id == exclude_player:
                continue
            for token in player.tokens:
                if self.cell_of(token) == cell:
                    out.append(token)
        return out

    def occupancy(self) -> np.ndarray:
        """Return a (num_players, TRACK_LENGTH) count of tokens per track cell."""
        grid = np.zeros((len(self.players), config.TRACK_LENGTH), dtype=np.int64)
        for row, player in enumerate(self.players):
            for token in player.tokens:
                cell = self.cell_of(token)
                if cell is not None:
                    grid[row, cell] += 1
        return grid

    def home_columns(self) -> np.ndarray:
        """Return a (num_players, HOME_COLUMN_SIZE) count of tokens per home step."""
        grid = np.zeros((len(self.players), config.HOME_COLUMN_SIZE), dtype=np.int64)
        for row, player in enumerate(self.players):
            for token in player.tokens:
                if token.is_in_home_column():
                    grid[row, token.position] += 1
        return grid

    def __str__(self) -> str:
        result = "Board State:\n"
        for cell in range(config.TRACK_LENGTH):
            tokens = self.tokens_at_cell(cell)
            if tokens:
                result += f"Cell {cell}: {[str(token) for token in tokens]}\n"
        return result
