"""Game loop and turn management for Gobang with optional Renju fouls for Black."""

from .Board import BLACK, BOARD_SIZE, WHITE, Board
from .engine import referee

DRAW = 0
COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


class Gobanggame:
    def __init__(self, black_player, white_player, board_size=BOARD_SIZE, rules=None, logger=print, renderer=None, board=None):
        self.board = board if board is not None else Board(size=board_size)
        self.players = {BLACK: black_player, WHITE: white_player}
        self.rules = rules
        self.logger = logger
        self.renderer = renderer
        self.move_index = 0
        self.last_move = None

    def play(self):
        """Run a single game. Returns BLACK (-1), WHITE (1), or DRAW (0)."""
        color = referee.infer_color_to_move(self.board)
        game_result = None
        while game_result is None:
            if self.renderer:
                self.renderer(self.board, self.last_move, color, game_result)
            game_result = self.play_turn(color)
            color = -color  # swap turns

        if self.renderer:
            self.renderer(self.board, self.last_move, color, game_result)
        return game_result

    def play_turn(self, color):
        """Ask `color` for a move and apply it. Returns the game result, or None to continue."""
        name = COLOR_NAMES[color]
        if self.board.is_full():
            self.logger("Result: Draw (board full)")
            return DRAW

        player = self.players[color]
        try:
            move = player.next_move(self.board)
            if move is None:
                self.logger(f"Result: Draw ({name} has no legal move)")
                return DRAW
            referee.check_move(move, self.board, color, self.rules)
            self.board.place(*move, color)
        except ValueError as exc:
            self.logger(f"Disqualification: {name} - {exc}")
            return -color  # opponent wins

        self.last_move = move
        self.move_index += 1
        self.logger(f"Move {self.move_index}: {name[0]} {move}")

        if self.board.has_five_or_more(*move):
            self.logger(f"Winner: {name}")
            return color
        if self.board.is_full():
            self.logger("Result: Draw (board full)")
            return DRAW
        return None
