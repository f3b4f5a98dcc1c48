from __future__ import annotations

from dataclasses import dataclass, field

from .config import config
from .token import Token


@dataclass(slots=True)
class Player:
    player_id: int
    name: str = ""
    color: str = ""
    tokens: list[Token] = field(init=False)
    finished_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not 0 <= self.player_id < config.MAX_PLAYERS:
            raise ValueError(f"player_id must be 0..3, got {self.player_id}")
        if not self.name:
            self.name = config.PLAYER_NAMES[self.player_id]
        if not self.color:
            self.color = config.PLAYER_COLORS[self.player_id]
        self.tokens = [
            Token(player_index=self.player_id, token_index=i)
            for i in range(config.TOKENS_PER_PLAYER)
        ]

    def record_finish(self) -> int:
        self.finished_count += 1
        return self.finished_count

    def has_reached(self, target: int) -> bool:
        return self.finished_count >= target

    def __str__(self) -> str:
        return f"Player({self.name}, tokens: {[str(token) for token in self.tokens]})"
