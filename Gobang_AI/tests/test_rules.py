"""Renju rule checks: forbidden for Black and allowed for White."""

import pytest

from Gobang_AI.Board import BLACK, WHITE, Board
from Gobang_AI.engine import renju_rules
from Gobang_AI.engine.renju_rules import ForbiddenRules

ALL_RULES = ForbiddenRules()


def _board_with(black=(), white=()):
    b = Board()
    for row, col in black:
        b.place(row, col, BLACK)
    for row, col in white:
        b.place(row, col, WHITE)
    return b


def _double_three_board():
    # (9, 9) makes a horizontal and a diagonal open three at once.
    return _board_with(black=[(9, 10), (9, 11), (10, 10), (11, 11)])


def test_black_overline_forbidden_only_with_overline_rule():
    b = _board_with(black=[(9, c) for c in range(3, 8)])
    assert renju_rules.is_forbidden(b, 9, 8, BLACK, ForbiddenRules(overline=True, double_four=False, double_three=False))
    assert renju_rules.forbidden_reason(b, 9, 8, BLACK, ALL_RULES) == renju_rules.OVERLINE
    assert not renju_rules.is_forbidden(b, 9, 8, BLACK, ForbiddenRules(overline=False))


def test_black_double_three_forbidden_only_with_double_three_rule():
    b = _double_three_board()
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules(False, False, True))
    assert renju_rules.forbidden_reason(b, 9, 9, BLACK, ALL_RULES) == renju_rules.DOUBLE_THREE
    assert not renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules(double_three=False))


def test_black_cross_shaped_double_three_forbidden():
    b = _board_with(black=[(6, 7), (8, 7), (7, 6), (7, 8)])
    assert renju_rules.is_forbidden(b, 7, 7, BLACK, ALL_RULES)


def test_gapped_three_counts_as_three():
    # _B_BB_ horizontally plus a plain open three vertically.
    b = _board_with(black=[(9, 7), (9, 10), (10, 9), (11, 9)])
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules(False, False, True))


def test_blocked_three_is_not_a_three():
    b = _double_three_board()
    b.place(9, 12, WHITE)
    b.place(9, 13, WHITE)
    b.place(9, 8, WHITE)
    assert not renju_rules.is_forbidden(b, 9, 9, BLACK, ALL_RULES)


def test_black_double_four_forbidden():
    b = _board_with(black=[(9, 6), (9, 7), (9, 8), (6, 9), (7, 9), (8, 9)])
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules(False, True, False))
    assert renju_rules.forbidden_reason(b, 9, 9, BLACK, ALL_RULES) == renju_rules.DOUBLE_FOUR
    assert not renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules(double_four=False))


def test_gapped_fours_count_as_fours():
    # B_BBB horizontally and BB_BB vertically through (9, 9).
    b = _board_with(black=[(9, 5), (9, 7), (9, 8), (7, 9), (8, 9), (11, 9)])
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules(False, True, False))


def test_black_single_open_four_allowed():
    b = _board_with(black=[(7, 5), (7, 6), (7, 7)])
    assert renju_rules.is_forbidden(b, 7, 8, BLACK, ALL_RULES) is False


def test_five_trumps_foul():
    # Completing vertical five while also forming a horizontal three.
    b = _board_with(black=[(r, 7) for r in range(2, 6)] + [(7, 6), (7, 8), (6, 6), (6, 8)])
    assert renju_rules.is_forbidden(b, 6, 7, BLACK, ALL_RULES) is False


def test_white_is_never_forbidden():
    b = _board_with(white=[(9, c) for c in range(3, 8)])
    assert renju_rules.is_forbidden(b, 9, 8, WHITE, ALL_RULES) is False


def test_no_rules_means_nothing_is_forbidden():
    b = _double_three_board()
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, None) is False
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, ForbiddenRules.disabled()) is False


def test_occupied_cell_is_forbidden_for_black():
    b = _board_with(white=[(9, 9)])
    assert renju_rules.is_forbidden(b, 9, 9, BLACK, ALL_RULES)
    assert renju_rules.is_forbidden(b, -1, 3, BLACK, ALL_RULES)


@pytest.mark.parametrize("move", [(9, 9), (9, 12), (0, 0), (18, 18)])
def test_is_forbidden_leaves_board_unchanged(move):
    b = _double_three_board()
    b.place(3, 3, WHITE)
    before = [row[:] for row in b.cells]
    before_count = b.move_count
    renju_rules.is_forbidden(b, *move, BLACK, ALL_RULES)
    assert b.cells == before
    assert b.move_count == before_count


def test_rules_from_names():
    rules = ForbiddenRules.from_names(["overline", "double_three"])
    assert rules == ForbiddenRules(overline=True, double_four=False, double_three=True)
    assert not ForbiddenRules.from_names([]).any_enabled
    with pytest.raises(ValueError):
        ForbiddenRules.from_names(["triple-three"])


def test_four_three_is_not_a_double_three():
    # B_BBB across (a four) and an open three down through (9, 9).
    b = _board_with(black=[(9, 5), (9, 7), (9, 8), (10, 9), (11, 9)])
    assert renju_rules.forbidden_reason(b, 9, 9, BLACK, ALL_RULES) is None
    assert not renju_rules.is_forbidden(b, 9, 9, BLACK, ALL_RULES)
