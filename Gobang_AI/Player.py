"""Player interface plus human, computer, and externally-assisted controllers."""

import logging

from .ai import search_minimax
from .ai.presets import SearchOptions
from .engine import referee, renju_rules

LOGGER = logging.getLogger(__name__)


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for the next move, or None when no move is available."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, board):
        """Text-input player; raises ValueError on malformed input."""
        raw = self.input_fn("Enter move as 'row col' (0-indexed): ").strip()
        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class ComputerPlayer(Player):
    def __init__(self, color, options=None, rules=None, weights=None):
        super().__init__(color)
        self.options = options or SearchOptions()
        self.rules = rules
        self.weights = weights
        self.stats = []

    def next_move(self, board):
        return search_minimax.choose_move(
            board,
            self.color,
            options=self.options,
            rules=self.rules,
            weights=self.weights,
            stats=self.stats,
        )


class AssistedPlayer(ComputerPlayer):
    """
    Asks an external provider (e.g. a chat-completion model) for a move.

    `provider(board, color)` returns (row, col). Exceptions, None, malformed or
    off-board answers fall back to the local search. An occupied or forbidden
    answer is moved to the nearest legal cell.
    """

    def __init__(self, color, provider, options=None, rules=None, weights=None, logger=None):
        super().__init__(color, options=options, rules=rules, weights=weights)
        self.provider = provider
        self.logger = logger
        self.fallbacks = 0

    def _note(self, message):
        LOGGER.warning(message)
        if self.logger:
            self.logger(message)

    def next_move(self, board):
        try:
            suggestion = self.provider(board.clone(), self.color)
        except Exception as exc:
            self._note(f"Move provider failed ({exc}); using local search")
            return self._fallback(board)

        try:
            if not isinstance(suggestion, (tuple, list)) or len(suggestion) != 2:
                raise ValueError("expected a (row, col) pair")
            row, col = int(suggestion[0]), int(suggestion[1])
        except (TypeError, ValueError):
            self._note(f"Move provider returned no usable move ({suggestion!r}); using local search")
            return self._fallback(board)

        if not board.in_bounds(row, col):
            self._note(f"Suggested move ({row}, {col}) is off the board; using local search")
            return self._fallback(board)

        if board.is_empty(row, col) and not renju_rules.is_forbidden(board, row, col, self.color, self.rules):
            return (row, col)

        adjusted = referee.nearest_legal_move(board, row, col, self.color, self.rules)
        self._note(f"Suggested move ({row}, {col}) is not playable; adjusted to {adjusted}")
        return adjusted

    def _fallback(self, board):
        self.fallbacks += 1
        return super().next_move(board)
