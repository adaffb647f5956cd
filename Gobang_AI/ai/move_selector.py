"""Candidate move generation (neighbourhood-based, top-N filtering) and fallback scans."""

from Gobang_AI.Board import opponent
from Gobang_AI.engine import renju_rules
from Gobang_AI.engine.patterns import would_win
from . import heuristic

FALLBACK_SPIRAL_RADIUS = 2


def _distance_ok(dr: int, dc: int, radius: int, metric: str) -> bool:
    """Return True if (dr, dc) falls within the chosen radius metric."""
    if metric == "manhattan":
        return abs(dr) + abs(dc) <= radius
    if metric == "euclidean":
        return dr * dr + dc * dc <= radius * radius
    if metric == "chebyshev":
        return max(abs(dr), abs(dc)) <= radius
    raise ValueError(f"unknown distance metric {metric!r}")


def _playable(board, row, col, color, rules):
    if not board.is_empty(row, col):
        return False
    return rules is None or not renju_rules.is_forbidden(board, row, col, color, rules)


def neighbourhood(board, radius=2, *, distance_metric="chebyshev"):
    """
    Empty cells within `radius` of any stone, in row-major order.
    On an empty board: the centre only.
    """
    occupied = board.stones()
    if not occupied:
        return [board.center]

    cells = set()
    for orow, ocol in occupied:
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                if not _distance_ok(dr, dc, radius, distance_metric):
                    continue
                r, c = orow + dr, ocol + dc
                if board.is_empty(r, c):
                    cells.add((r, c))
    return sorted(cells)


def generate_candidates(board, color, options, *, rules=None, weights=None, rng=None):
    """
    Score the neighbourhood for `color` and return the top `options.candidate_limit`
    as (score, move) pairs, best first. The sort is stable, so equal scores keep
    row-major order. Black fouls are dropped when `rules` is given.
    """
    opp = opponent(color)
    scored = []
    for row, col in neighbourhood(board, options.radius):
        if not _playable(board, row, col, color, rules):
            continue
        score = heuristic.evaluate(board, row, col, color, weights)
        if options.defense_weight:
            score += options.defense_weight * heuristic.evaluate(board, row, col, opp, weights)
        if options.noise and rng is not None:
            score += rng.random() * options.noise
        scored.append((score, (row, col)))

    scored.sort(key=lambda item: item[0], reverse=True)
    return scored[: options.candidate_limit]


def find_immediate_win(board, color, rules=None):
    """First cell in row-major order where `color` completes five."""
    for row, col in board.empty_cells():
        if would_win(board, row, col, color) and _playable(board, row, col, color, rules):
            return (row, col)
    return None


def find_immediate_block(board, color, rules=None):
    """First cell in row-major order where the opponent would complete five."""
    opp = opponent(color)
    for row, col in board.empty_cells():
        if would_win(board, row, col, opp) and _playable(board, row, col, color, rules):
            return (row, col)
    return None


def spiral_cells(board, radius=FALLBACK_SPIRAL_RADIUS):
    """Cells around the centre ring by ring, each ring clockwise from the cell above."""
    cr, cc = board.center
    yield (cr, cc)
    for ring in range(1, radius + 1):
        r, c = cr - ring, cc
        # walk the ring: right, down, left, up, then back to the start
        steps = (
            [(0, 1)] * ring
            + [(1, 0)] * (2 * ring)
            + [(0, -1)] * (2 * ring)
            + [(-1, 0)] * (2 * ring)
            + [(0, 1)] * (ring - 1)
        )
        yield (r, c)
        for dr, dc in steps:
            r, c = r + dr, c + dc
            yield (r, c)


def fallback_move(board, color, rules=None):
    """Centre-outward spiral, then a full row-major scan; None on a full board."""
    for row, col in spiral_cells(board):
        if _playable(board, row, col, color, rules):
            return (row, col)
    for row, col in board.empty_cells():
        if _playable(board, row, col, color, rules):
            return (row, col)
    return None
