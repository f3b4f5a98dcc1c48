from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from .config import config


class Die(Protocol):
    def roll(self) -> int:
        ...


@dataclass(slots=True)
class RandomDie:
    """Uniform 1..6 die backed by ``random.Random``."""

    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)


@dataclass(slots=True)
class ScriptedDie:
    """Replays a fixed sequence of values; raises once it runs dry."""

    values: Iterable[int] = ()
    _queue: deque[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._queue = deque()
        self.extend(self.values)

    def extend(self, values: Iterable[int]) -> None:
        for value in values:
            if not config.DICE_MIN <= value <= config.DICE_MAX:
                raise ValueError(f"die value must be 1..6, got {value}")
            self._queue.append(value)

    def remaining(self) -> int:
        return len(self._queue)

    def roll(self) -> int:
        if not self._queue:
            raise IndexError("scripted die has no values left")
        return self._queue.popleft()
