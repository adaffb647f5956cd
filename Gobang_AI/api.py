"""Engine operations for game-session controllers and external move providers."""

from .ai import heuristic, search_minimax
from .engine import patterns, renju_rules


def is_legal_move(board, row, col):
    return board.is_empty(row, col)


def evaluate_move(board, row, col, color, weights=None):
    return heuristic.evaluate(board, row, col, color, weights)


def classify_move(board, row, col, color):
    return patterns.classify(board, row, col, color)


def is_forbidden(board, row, col, color, rules=None):
    return renju_rules.is_forbidden(board, row, col, color, rules)


def select_move(board, color, options=None, rules=None, weights=None):
    """(row, col) for `color`, or None when nothing is playable."""
    return search_minimax.choose_move(board, color, options=options, rules=rules, weights=weights)
