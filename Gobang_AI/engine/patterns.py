"""Line scanning and shape classification for a hypothetical stone."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional, Tuple

from Gobang_AI.Board import EMPTY

# One unit vector per line through a cell; each is walked in both senses.
AXES: tuple[tuple[int, int], ...] = (
    (0, 1),   # horizontal
    (1, 0),   # vertical
    (1, 1),   # diagonal
    (1, -1),  # anti-diagonal
)


class Pattern(IntEnum):
    """Shapes ordered by priority; a larger value is a stronger shape."""

    NONE = 0
    HALF_OPEN_TWO = 1
    OPEN_TWO = 2
    HALF_OPEN_THREE = 3
    OPEN_THREE = 4
    HALF_OPEN_FOUR = 5
    OPEN_FOUR = 6
    FIVE = 7


# run length -> (both ends open, one end open)
_SHAPES = {
    4: (Pattern.OPEN_FOUR, Pattern.HALF_OPEN_FOUR),
    3: (Pattern.OPEN_THREE, Pattern.HALF_OPEN_THREE),
    2: (Pattern.OPEN_TWO, Pattern.HALF_OPEN_TWO),
}


class LineScan(NamedTuple):
    length: int
    open_start: bool
    open_end: bool

    @property
    def open_ends(self) -> int:
        return int(self.open_start) + int(self.open_end)


@dataclass(frozen=True)
class PatternMatch:
    pattern: Pattern
    length: int
    axis: Optional[Tuple[int, int]]


def _walk(board, row, col, color, dr, dc):
    """Count stones of `color` from (row, col) (exclusive); report whether the end is open."""
    count = 0
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c] == color:
        count += 1
        r += dr
        c += dc
    return count, board.in_bounds(r, c) and board.cells[r][c] == EMPTY


def scan_line(board, row, col, color, axis) -> LineScan:
    """
    Run through (row, col) along `axis` as if `color` stood on (row, col).
    The walk starts at the neighbours, so the board itself is only read.
    """
    dr, dc = axis
    forward, open_end = _walk(board, row, col, color, dr, dc)
    backward, open_start = _walk(board, row, col, color, -dr, -dc)
    return LineScan(1 + forward + backward, open_start, open_end)


def would_win(board, row, col, color) -> bool:
    return any(scan_line(board, row, col, color, axis).length >= 5 for axis in AXES)


def has_line_of_length(board, row, col, color, length, require_open_end) -> bool:
    """True if some axis has a run of exactly `length` (with an open end when required)."""
    for axis in AXES:
        scan = scan_line(board, row, col, color, axis)
        if scan.length != length:
            continue
        if not require_open_end or scan.open_ends > 0:
            return True
    return False


def forms_open_three(board, row, col, color) -> bool:
    return has_line_of_length(board, row, col, color, 3, True)


def forms_open_four(board, row, col, color) -> bool:
    return has_line_of_length(board, row, col, color, 4, True)


def forms_any_four(board, row, col, color) -> bool:
    return has_line_of_length(board, row, col, color, 4, False)


def pattern_for(length: int, open_ends: int) -> Pattern:
    if length >= 5:
        return Pattern.FIVE
    shapes = _SHAPES.get(length)
    if shapes is None or open_ends == 0:
        return Pattern.NONE
    return shapes[0] if open_ends == 2 else shapes[1]


def line_pattern(board, row, col, color, axis) -> PatternMatch:
    """Classify the single line through (row, col) along `axis`."""
    scan = scan_line(board, row, col, color, axis)
    return PatternMatch(pattern_for(scan.length, scan.open_ends), scan.length, axis)


def classify(board, row, col, color) -> PatternMatch:
    """Strongest shape across the four axes; ties go to the longer run, then the first axis."""
    best = None
    for axis in AXES:
        match = line_pattern(board, row, col, color, axis)
        if best is None or (match.pattern, match.length) > (best.pattern, best.length):
            best = match
    return best
