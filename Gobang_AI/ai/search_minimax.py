"""Move selection: tactical guardrails, candidate ranking, and bounded alpha-beta search."""

import logging
import random

from Gobang_AI.engine.patterns import would_win
from . import heuristic
from . import move_selector
from .presets import SearchOptions

LOGGER = logging.getLogger(__name__)

INF = 10 ** 9
WIN_SCORE = 10 ** 8  # above any static board evaluation


class MinimaxSearcher:
    """Encapsulates the state and logic for one move decision."""

    def __init__(self, color, options=None, rules=None, weights=None, run_values=None, stats=None):
        self.color = color
        self.options = (options or SearchOptions()).validate()
        self.rules = rules
        self.weights = weights
        self.run_values = run_values
        self.stats_list = stats
        self.rng = random.Random(self.options.seed)

        # Internal state
        self.node_counter = 0

    def choose_move(self, board):
        """
        Return (row, col) for self.color, or None when no legal move exists.
        The board is left exactly as it was passed in.
        """
        self.node_counter = 0
        if board.is_full():
            return None

        # Tactical guardrails: immediate win or block before anything else.
        win_move = move_selector.find_immediate_win(board, self.color, self.rules)
        if win_move is not None:
            LOGGER.debug("winning move %s", win_move)
            return win_move
        block_move = move_selector.find_immediate_block(board, self.color, self.rules)
        if block_move is not None:
            LOGGER.debug("blocking move %s", block_move)
            return block_move

        candidates = self._candidates(board, self.color, rng=self.rng)
        if not candidates:
            move = move_selector.fallback_move(board, self.color, self.rules)
            LOGGER.debug("no candidates; fallback move %s", move)
            return move

        best_move = None
        if self.options.depth > 1:
            score, best_move = self._minimax(
                board,
                self.color,
                self.options.depth,
                -INF,
                INF,
                ply=0,
                candidates=candidates,
            )
            LOGGER.debug("search depth=%d nodes=%d score=%s move=%s",
                         self.options.depth, self.node_counter, score, best_move)

        if best_move is None:
            best_move = self._pick(candidates)

        if self.stats_list is not None:
            self._record_stats()

        return best_move

    def _candidates(self, board, color, rng=None):
        return move_selector.generate_candidates(
            board,
            color,
            self.options,
            rules=self.rules,
            weights=self.weights,
            rng=rng,
        )

    def _pick(self, candidates):
        """Best candidate, or with probability `randomness` a uniform pick among the top few."""
        if self.options.randomness and self.rng.random() < self.options.randomness:
            _, move = self.rng.choice(candidates[: self.options.random_top])
            return move
        return candidates[0][1]

    def _minimax(self, board, node_color, depth, alpha, beta, ply, candidates=None):
        self.node_counter += 1

        if depth == 0 or board.is_full():
            return heuristic.score_board(board, self.color, self.run_values), None

        if candidates is None:
            candidates = self._candidates(board, node_color)
        if not candidates:
            return heuristic.score_board(board, self.color, self.run_values), None

        maximizing = node_color == self.color
        best_score = -INF if maximizing else INF
        best_local_move = None

        for _, move in candidates:
            row, col = move
            if would_win(board, row, col, node_color):
                # Sooner wins score higher, later losses score higher.
                score = WIN_SCORE - ply if maximizing else -(WIN_SCORE - ply)
                return score, move

            with board.probe(row, col, node_color):
                score, _ = self._minimax(board, -node_color, depth - 1, alpha, beta, ply + 1)

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_local_move = move
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best_local_move = move
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return best_score, best_local_move

    def _record_stats(self):
        self.stats_list.append({
            "color": self.color,
            "depth": self.options.depth,
            "nodes": self.node_counter,
        })


def choose_move(board, color, options=None, rules=None, weights=None, run_values=None, stats=None):
    """
    Public function to pick a move. Instantiates and uses MinimaxSearcher.
    Returns (row, col) or None when the board has no legal move.
    """
    searcher = MinimaxSearcher(
        color=color,
        options=options,
        rules=rules,
        weights=weights,
        run_values=run_values,
        stats=stats,
    )
    return searcher.choose_move(board)
