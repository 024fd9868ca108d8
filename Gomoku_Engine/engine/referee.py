"""Move validation: phase, turn ownership, bounds, and occupancy."""

try:
    from engine.errors import IllegalPhase, NotYourTurn, OccupiedCell, OutOfBounds
    from engine.state import Phase
except ImportError:
    from Gomoku_Engine.engine.errors import IllegalPhase, NotYourTurn, OccupiedCell, OutOfBounds
    from Gomoku_Engine.engine.state import Phase


def check_phase(phase, expected=Phase.IN_PROGRESS, action="move"):
    if phase not in ((expected,) if isinstance(expected, Phase) else tuple(expected)):
        raise IllegalPhase(f"cannot {action} while {phase.value}")


def check_move(move, board, phase, automated_turn=False):
    """
    Validate an externally submitted move in the order: phase, turn, bounds, occupancy.
    Raises a GomokuError subclass; returns True when the move may be applied.
    """
    check_phase(phase)
    if automated_turn:
        raise NotYourTurn("it is the automated player's turn")

    row, col = move
    if not board.in_bounds(row, col):
        raise OutOfBounds(f"move {tuple(move)} out of bounds")
    if not board.is_empty(row, col):
        raise OccupiedCell(f"cell {tuple(move)} already occupied")

    return True
