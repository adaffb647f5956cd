"""Cell scoring (win/block/four/three bonuses) and static board evaluation."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import yaml

from Gobang_AI.Board import EMPTY, opponent
from Gobang_AI.engine.patterns import (
    AXES,
    Pattern,
    forms_any_four,
    forms_open_four,
    forms_open_three,
    pattern_for,
    scan_line,
    would_win,
)

LOGGER = logging.getLogger(__name__)

ILLEGAL_SCORE = -1_000_000.0
CENTER_REACH = 10.0

NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

# Value of a finished run on the board, used by the static evaluation at search leaves.
DEFAULT_RUN_VALUES = {
    Pattern.FIVE: 100000,
    Pattern.OPEN_FOUR: 10000,
    Pattern.HALF_OPEN_FOUR: 1000,
    Pattern.OPEN_THREE: 1000,
    Pattern.HALF_OPEN_THREE: 100,
    Pattern.OPEN_TWO: 100,
    Pattern.HALF_OPEN_TWO: 10,
    Pattern.NONE: 0,
}


@dataclass(frozen=True)
class EvalWeights:
    win: float = 100000
    block_win: float = 90000
    open_four: float = 3000
    block_open_four: float = 2800
    any_four: float = 1500
    block_any_four: float = 1400
    open_three: float = 1000
    block_open_three: float = 950
    own_neighbor: float = 5
    opponent_neighbor: float = 3

    def max_positional(self) -> float:
        """Largest score a cell can get without a win or a forced block."""
        tactical = (
            self.open_four + self.block_open_four + self.any_four
            + self.block_any_four + self.open_three + self.block_open_three
        )
        return tactical + CENTER_REACH + len(NEIGHBORS_8) * max(self.own_neighbor, self.opponent_neighbor)

    def validate(self) -> "EvalWeights":
        order = [
            ("win", self.win),
            ("block_win", self.block_win),
            ("open_four", self.open_four),
            ("block_open_four", self.block_open_four),
            ("any_four", self.any_four),
            ("block_any_four", self.block_any_four),
            ("open_three", self.open_three),
            ("block_open_three", self.block_open_three),
        ]
        for (hi_name, hi), (lo_name, lo) in zip(order, order[1:]):
            if not hi > lo:
                raise ValueError(f"weight {hi_name}={hi} must exceed {lo_name}={lo}")
        if self.block_open_three <= 0:
            raise ValueError("block_open_three must be positive")
        if not self.own_neighbor > self.opponent_neighbor >= 0:
            raise ValueError("own_neighbor must exceed opponent_neighbor, which must be >= 0")
        if not self.block_win > self.max_positional():
            raise ValueError(
                f"block_win={self.block_win} must exceed the largest non-terminal score {self.max_positional()}"
            )
        return self


DEFAULT_WEIGHTS = EvalWeights().validate()


def load_weights(path="config/settings.yaml"):
    """Load `weights:` from YAML; fallback to defaults when the file or section is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Gobang_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        LOGGER.debug("No weights file at %s; using defaults", path)
        return DEFAULT_WEIGHTS
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    return weights_from_dict(data.get("weights") or {})


def weights_from_dict(values):
    if not isinstance(values, dict):
        raise ValueError(f"weights must be a mapping, got {type(values).__name__}")
    known = {f.name for f in fields(EvalWeights)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"unknown weight(s): {', '.join(sorted(unknown))}")
    merged = {**asdict(DEFAULT_WEIGHTS), **{k: float(v) for k, v in values.items()}}
    return EvalWeights(**merged).validate()


def center_bonus(board, row, col):
    """Monotonically decreasing with distance from the centre; zero beyond CENTER_REACH."""
    cr, cc = board.center
    return max(CENTER_REACH - math.hypot(row - cr, col - cc), 0.0)


def evaluate(board, row, col, color, weights=None):
    """
    Desirability of playing `color` at (row, col).

    ILLEGAL_SCORE for occupied/off-board cells, `weights.win` for a winning
    cell, `weights.block_win` for a cell that stops the opponent's five, and
    otherwise the sum of tactical bonuses, the centre term and contact bonuses.
    Scores are only comparable within one board snapshot.
    """
    weights = weights or DEFAULT_WEIGHTS
    if not board.is_empty(row, col):
        return ILLEGAL_SCORE

    opp = opponent(color)
    if would_win(board, row, col, color):
        return weights.win
    if would_win(board, row, col, opp):
        return weights.block_win

    score = 0.0
    if forms_open_four(board, row, col, color):
        score += weights.open_four
    if forms_open_four(board, row, col, opp):
        score += weights.block_open_four
    if forms_any_four(board, row, col, color):
        score += weights.any_four
    if forms_any_four(board, row, col, opp):
        score += weights.block_any_four
    if forms_open_three(board, row, col, color):
        score += weights.open_three
    if forms_open_three(board, row, col, opp):
        score += weights.block_open_three

    score += center_bonus(board, row, col)

    for dr, dc in NEIGHBORS_8:
        v = board.get(row + dr, col + dc)
        if v == color:
            score += weights.own_neighbor
        elif v == opp:
            score += weights.opponent_neighbor

    return score


def _side_score(board, color, run_values):
    patterns = 0
    centre = 0.0
    frontier = set()
    for row, col in board.stones(color):
        centre += center_bonus(board, row, col)
        for dr, dc in AXES:
            # Score each run once, from its first stone along the axis.
            if board.get(row - dr, col - dc) == color:
                continue
            scan = scan_line(board, row, col, color, (dr, dc))
            patterns += run_values[pattern_for(scan.length, scan.open_ends)]
        for dr, dc in NEIGHBORS_8:
            if board.get(row + dr, col + dc) == EMPTY:
                frontier.add((row + dr, col + dc))
    return patterns + centre + len(frontier)


def score_board(board, color, run_values=None):
    """
    Static evaluation from `color`'s perspective: run patterns, centre control
    and mobility (empty cells touching own stones), own side minus opponent.
    """
    run_values = run_values or DEFAULT_RUN_VALUES
    return _side_score(board, color, run_values) - _side_score(board, opponent(color), run_values)
