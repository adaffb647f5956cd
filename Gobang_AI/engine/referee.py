"""Move validation, nearest-legal repair, and turn inference."""

from Gobang_AI.Board import BLACK, WHITE
from . import renju_rules


def check_move(move, board, color, rules=None):
    """
    Validate a move against bounds, occupancy, and Renju forbidden-move rules.
    Raises ValueError on invalid moves.
    """
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed move {move!r}") from exc

    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty(row, col):
        raise ValueError("Cell already occupied")

    reason = renju_rules.forbidden_reason(board, row, col, color, rules)
    if reason is not None:
        raise ValueError(f"Forbidden move (Renju rule: {reason})")

    return True


def nearest_legal_move(board, row, col, color, rules=None):
    """
    Legal cell closest to (row, col) by Manhattan distance; ties go to the
    first cell in row-major order. None when nothing is playable.
    """
    best = None
    best_distance = None
    for r, c in board.empty_cells():
        distance = abs(r - row) + abs(c - col)
        if best_distance is not None and distance >= best_distance:
            continue
        if rules is not None and renju_rules.is_forbidden(board, r, c, color, rules):
            continue
        best, best_distance = (r, c), distance
    return best


def infer_color_to_move(board):
    """Black moves whenever both sides have the same number of stones."""
    blacks = len(board.stones(BLACK))
    whites = len(board.stones(WHITE))
    return BLACK if blacks <= whites else WHITE
