from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import config
from .types import TokenState, TokenView


@dataclass(slots=True)
class Token:
    """A single token. Holds state only.

    ``position`` is interpreted through ``state``: ``None`` in BASE and
    FINISHED, the offset from the owner's entry cell (0..51) while ON_PATH and
    the home-column step (0..5) while IN_HOME_COLUMN. ``lap_complete`` marks an
    ON_PATH token that has been all the way round and stands on its entry cell
    again. Rule logic lives in the game, not here.
    """

    player_index: int
    token_index: int  # 0..3 per player
    state: TokenState = TokenState.BASE
    position: Optional[int] = None
    lap_complete: bool = False

    def __post_init__(self) -> None:
        self._check()

    def _check(self) -> None:
        if self.state in (TokenState.BASE, TokenState.FINISHED):
            if self.position is not None:
                raise ValueError(f"{self.state.value} token has no position")
        elif self.state is TokenState.ON_PATH:
            if self.position is None or not 0 <= self.position < config.TRACK_LENGTH:
                raise ValueError(f"track offset out of range: {self.position}")
        elif self.position is None or not 0 <= self.position <= config.HOME_FINISH_STEP:
            raise ValueError(f"home column step out of range: {self.position}")
        if self.lap_complete and not (
            self.state is TokenState.ON_PATH and self.position == 0
        ):
            raise ValueError("only a token back on its entry cell completes a lap")

    def is_in_base(self) -> bool:
        return self.state is TokenState.BASE

    def is_on_path(self) -> bool:
        return self.state is TokenState.ON_PATH

    def is_in_home_column(self) -> bool:
        return self.state is TokenState.IN_HOME_COLUMN

    def is_finished(self) -> bool:
        return self.state is TokenState.FINISHED

    def place(
        self, state: TokenState, position: Optional[int], lap_complete: bool = False
    ) -> None:
        if self.is_finished():
            raise ValueError("finished tokens cannot move")
        previous = (self.state, self.position, self.lap_complete)
        self.state, self.position, self.lap_complete = state, position, lap_complete
        try:
            self._check()
        except ValueError:
            self.state, self.position, self.lap_complete = previous
            raise

    def send_to_base(self) -> None:
        self.place(TokenState.BASE, None)

    def view(self, cell: Optional[int] = None) -> TokenView:
        return TokenView(
            player_index=self.player_index,
            token_index=self.token_index,
            state=self.state,
            position=self.position,
            lap_complete=self.lap_complete,
            cell=cell,
        )

    def __str__(self) -> str:
        return f"Token(P{self.player_index}_{self.token_index}: {self.state.value} at {self.position})"
