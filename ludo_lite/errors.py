# Engine errors. All are raised before any state is touched.
class LudoError(Exception):
    """Base exception for rejected engine operations."""

    pass


class RollAlreadyPending(LudoError):
    """Raised when rolling while the previous roll is still unused."""

    pass


class NoRollPending(LudoError):
    """Raised when moving or passing before rolling."""

    pass


class IllegalMove(LudoError):
    """Raised when a token cannot move with the pending roll."""

    pass


class NotYourTurn(IllegalMove):
    """Raised when a player other than the active one acts."""

    pass


class GameOver(LudoError):
    """Raised on any mutation after the winner is decided."""

    pass
