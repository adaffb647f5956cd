"""Renju rule enforcement: overline, double-four and double-three fouls for Black."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from Gobang_AI.Board import BLACK, EMPTY
from .patterns import AXES, scan_line

# Cells read on each side of the move when matching four/three windows.
SPAN = 5
OVERLINE_REACH = 5

OVERLINE = "overline"
DOUBLE_FOUR = "double-four"
DOUBLE_THREE = "double-three"


@dataclass(frozen=True)
class ForbiddenRules:
    overline: bool = True
    double_four: bool = True
    double_three: bool = True

    @property
    def any_enabled(self) -> bool:
        return self.overline or self.double_four or self.double_three

    @classmethod
    def disabled(cls) -> "ForbiddenRules":
        return cls(False, False, False)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "ForbiddenRules":
        """Build from rule names such as ["overline", "double-three"] (underscores accepted)."""
        wanted = {name.strip().lower().replace("_", "-") for name in names}
        unknown = wanted - {OVERLINE, DOUBLE_FOUR, DOUBLE_THREE}
        if unknown:
            raise ValueError(f"unknown forbidden rule(s): {', '.join(sorted(unknown))}")
        return cls(OVERLINE in wanted, DOUBLE_FOUR in wanted, DOUBLE_THREE in wanted)


def _segment(board, row, col, dr, dc):
    """Cells from -SPAN to +SPAN along (dr, dc); None marks off-board cells. Index SPAN is (row, col)."""
    return [board.get(row + i * dr, col + i * dc) for i in range(-SPAN, SPAN + 1)]


def _is_overline(board, row, col) -> bool:
    for dr, dc in AXES:
        count = 1
        for sign in (1, -1):
            for step in range(1, OVERLINE_REACH + 1):
                if board.get(row + sign * step * dr, col + sign * step * dc) != BLACK:
                    break
                count += 1
        if count >= 6:
            return True
    return False


def _has_four(line) -> bool:
    """
    A five-cell window through the move with four black stones and one gap
    (_BBBB, B_BBB, BB_BB, BBB_B and mirrors), not touching another black stone
    so that filling the gap makes exactly five.
    """
    for start in range(SPAN - 4, SPAN + 1):
        window = line[start:start + 5]
        if window.count(BLACK) != 4 or window.count(EMPTY) != 1:
            continue
        if line[start - 1] == BLACK or line[start + 5] == BLACK:
            continue
        return True
    return False


def _has_three(line) -> bool:
    """
    A six-cell window through the move with empty ends and three black stones
    plus one gap inside (_BBB__, __BBB_, _B_BB_, _BB_B_): one more stone makes
    an open four.
    """
    for start in range(SPAN - 4, SPAN):
        window = line[start:start + 6]
        if window[0] != EMPTY or window[5] != EMPTY:
            continue
        inner = window[1:5]
        if inner.count(BLACK) == 3 and inner.count(EMPTY) == 1:
            return True
    return False


def _has_three_only(line) -> bool:
    """A three on a line that does not already hold a four (a 4-3 is not a double three)."""
    return _has_three(line) and not _has_four(line)


def _count_axes(board, row, col, shape) -> int:
    return sum(1 for dr, dc in AXES if shape(_segment(board, row, col, dr, dc)))


def forbidden_reason(board, row, col, color, rules: Optional[ForbiddenRules] = None) -> Optional[str]:
    """
    Name of the foul committed by playing (row, col), or None.
    Only Black can foul, and only under an enabled rule; `rules=None` enables
    nothing. An exact five is never a foul.
    """
    if rules is None or color != BLACK or not rules.any_enabled:
        return None

    if not board.is_empty(row, col):
        return "occupied"

    with board.probe(row, col, color):
        # Five has priority over fouls
        if any(scan_line(board, row, col, color, axis).length == 5 for axis in AXES):
            return None

        if rules.overline and _is_overline(board, row, col):
            return OVERLINE
        if rules.double_four and _count_axes(board, row, col, _has_four) >= 2:
            return DOUBLE_FOUR
        if rules.double_three and _count_axes(board, row, col, _has_three_only) >= 2:
            return DOUBLE_THREE

    return None


def is_forbidden(board, row, col, color, rules: Optional[ForbiddenRules] = None) -> bool:
    """Return True if placing here is a foul for Black. White is never forbidden."""
    return forbidden_reason(board, row, col, color, rules) is not None
