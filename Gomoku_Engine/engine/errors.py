"""Exceptions raised when a board, move, or session operation is rejected."""


class GomokuError(ValueError):
    """Base class; a rejected call leaves the session untouched."""


class InvalidDimension(GomokuError):
    pass


class OutOfBounds(GomokuError):
    pass


class OccupiedCell(GomokuError):
    pass


class IllegalPhase(GomokuError):
    """Operation not allowed in the current phase (or a stale automated move)."""


class NotYourTurn(GomokuError):
    pass
