"""Line scanner and shape classifier checks."""

import random

import pytest

from Gobang_AI.Board import BLACK, WHITE, Board
from Gobang_AI.engine import patterns
from Gobang_AI.engine.patterns import AXES, Pattern


def _place_all(board, stones, color):
    for row, col in stones:
        board.place(row, col, color)


@pytest.mark.parametrize("axis", AXES)
@pytest.mark.parametrize("origin", [(9, 9), (4, 12), (14, 6)])
def test_only_the_completing_cell_wins_a_half_open_four(axis, origin):
    dr, dc = axis
    r0, c0 = origin
    b = Board()
    _place_all(b, [(r0 + i * dr, c0 + i * dc) for i in range(4)], BLACK)
    b.place(r0 - dr, c0 - dc, WHITE)  # block one end
    completing = (r0 + 4 * dr, c0 + 4 * dc)

    winners = [cell for cell in b.empty_cells() if patterns.would_win(b, *cell, BLACK)]
    assert winners == [completing]


def test_would_win_does_not_touch_board():
    b = Board()
    _place_all(b, [(0, c) for c in range(4)], BLACK)
    before = [row[:] for row in b.cells]
    assert patterns.would_win(b, 0, 4, BLACK)
    assert not patterns.would_win(b, 0, 4, WHITE)
    assert b.cells == before


def test_scan_line_reports_blocked_ends():
    b = Board()
    _place_all(b, [(0, 1), (0, 2)], BLACK)
    scan = patterns.scan_line(b, 0, 0, BLACK, (0, 1))
    assert scan.length == 3
    assert scan.open_start is False  # board edge
    assert scan.open_end is True


def test_line_of_length_is_exact():
    b = Board()
    _place_all(b, [(5, c) for c in (3, 4, 5, 7)], BLACK)
    # (5, 6) joins both sides into a run of five: not a four.
    assert patterns.scan_line(b, 5, 6, BLACK, (0, 1)).length == 5
    assert not patterns.forms_any_four(b, 5, 6, BLACK)
    assert not patterns.forms_open_four(b, 5, 6, BLACK)


def test_any_four_counts_fully_blocked_runs():
    b = Board()
    _place_all(b, [(5, 1), (5, 2), (5, 3)], BLACK)
    b.place(5, 0, WHITE)
    b.place(5, 5, WHITE)
    assert patterns.forms_any_four(b, 5, 4, BLACK)
    assert not patterns.forms_open_four(b, 5, 4, BLACK)
    assert patterns.classify(b, 5, 4, BLACK).pattern == Pattern.NONE


@pytest.mark.parametrize(
    "stones, blockers, expected",
    [
        ([(9, 8), (9, 10), (9, 11)], [], Pattern.OPEN_FOUR),
        ([(9, 8), (9, 10), (9, 11)], [(9, 7)], Pattern.HALF_OPEN_FOUR),
        ([(9, 8), (9, 10)], [], Pattern.OPEN_THREE),
        ([(9, 8), (9, 10)], [(9, 11)], Pattern.HALF_OPEN_THREE),
        ([(9, 10)], [], Pattern.OPEN_TWO),
        ([(9, 10)], [(9, 8)], Pattern.HALF_OPEN_TWO),
        ([(9, 10)], [(9, 8), (9, 11)], Pattern.NONE),
        ([(9, 7), (9, 8), (9, 10), (9, 11)], [(9, 6), (9, 12)], Pattern.FIVE),
    ],
)
def test_classify_table(stones, blockers, expected):
    b = Board()
    _place_all(b, stones, BLACK)
    _place_all(b, blockers, WHITE)
    match = patterns.classify(b, 9, 9, BLACK)
    assert match.pattern == expected
    assert match.axis == (0, 1)


def test_classify_prefers_the_strongest_axis():
    b = Board()
    _place_all(b, [(9, 10), (9, 11)], BLACK)          # horizontal three
    _place_all(b, [(10, 9), (11, 9), (12, 9)], BLACK)  # vertical four
    match = patterns.classify(b, 9, 9, BLACK)
    assert match.pattern == Pattern.OPEN_FOUR
    assert match.length == 4
    assert match.axis == (1, 0)


def test_classify_single_stone_is_none():
    match = patterns.classify(Board(), 9, 9, WHITE)
    assert match.pattern == Pattern.NONE
    assert match.length == 1


def test_open_three_detection_agrees_with_classifier():
    b = Board()
    _place_all(b, [(9, 8), (9, 10)], BLACK)
    assert patterns.forms_open_three(b, 9, 9, BLACK)
    match = patterns.classify(b, 9, 9, BLACK)
    assert match.pattern == Pattern.OPEN_THREE
    assert match.axis == (0, 1)


def test_three_detection_agrees_with_per_axis_classification_on_random_boards():
    rng = random.Random(7)
    threes = {Pattern.OPEN_THREE, Pattern.HALF_OPEN_THREE}
    for _ in range(3):
        b = Board()
        cells = [(r, c) for r in range(19) for c in range(19)]
        for i, (row, col) in enumerate(rng.sample(cells, 80)):
            b.place(row, col, BLACK if i % 2 == 0 else WHITE)

        for row, col in b.empty_cells():
            flagged_axes = []
            for axis in AXES:
                scan = patterns.scan_line(b, row, col, BLACK, axis)
                match = patterns.line_pattern(b, row, col, BLACK, axis)
                flagged = scan.length == 3 and scan.open_ends > 0
                assert flagged == (match.pattern in threes)
                if flagged:
                    assert (match.pattern == Pattern.OPEN_THREE) == (scan.open_ends == 2)
                    flagged_axes.append(axis)
            assert patterns.forms_open_three(b, row, col, BLACK) == bool(flagged_axes)
