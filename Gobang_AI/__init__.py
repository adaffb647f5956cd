"""Gobang_AI package exports."""

from .Board import Board, BLACK, WHITE, EMPTY, BOARD_SIZE
from .Gobanggame import Gobanggame
from .Player import Player, HumanPlayer, ComputerPlayer, AssistedPlayer
from .ai.presets import SearchOptions
from .engine.patterns import Pattern, PatternMatch
from .engine.renju_rules import ForbiddenRules
from .api import is_legal_move, evaluate_move, classify_move, is_forbidden, select_move

# Subpackages for rule engine, move search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "BLACK",
    "WHITE",
    "EMPTY",
    "BOARD_SIZE",
    "Gobanggame",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "AssistedPlayer",
    "SearchOptions",
    "Pattern",
    "PatternMatch",
    "ForbiddenRules",
    "is_legal_move",
    "evaluate_move",
    "classify_move",
    "is_forbidden",
    "select_move",
    "ai",
    "engine",
    "utils",
]
