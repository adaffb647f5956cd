"""Board state container, scoped probe placements, and a plain-text codec."""

from contextlib import contextmanager

EMPTY = 0
BLACK = -1
WHITE = 1

BOARD_SIZE = 19

# Text symbols: O for black, X for white, as the web board prints them.
SYMBOLS = {EMPTY: ".", BLACK: "O", WHITE: "X"}
_FROM_SYMBOL = {".": EMPTY, "+": EMPTY, "O": BLACK, "X": WHITE}


def opponent(color):
    return -color


class Board:
    def __init__(self, size=BOARD_SIZE):
        # Store cells as -1 (black), 0 (empty), 1 (white), indexed [row][col]
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    @property
    def center(self):
        return (self.size // 2, self.size // 2)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def get(self, row, col):
        """Return the occupant of (row, col); None when out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def is_full(self):
        return self.move_count >= self.size * self.size

    def place(self, row, col, color):
        """Place a stone; raise if out of bounds or occupied."""
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[row][col] = color
        self.move_count += 1
        self.history.append((row, col))

    @contextmanager
    def probe(self, row, col, color):
        """
        Temporarily put `color` on an empty (row, col).
        The cell is emptied again on every exit path, including exceptions.
        """
        if not self.is_empty(row, col):
            raise ValueError(f"cannot probe non-empty cell ({row}, {col})")
        self.cells[row][col] = color
        self.move_count += 1
        try:
            yield self
        finally:
            self.cells[row][col] = EMPTY
            self.move_count -= 1

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def empty_cells(self):
        """Yield empty cells in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                if self.cells[row][col] == EMPTY:
                    yield (row, col)

    def stones(self, color=None):
        """Return occupied cells (optionally of one color) in row-major order."""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.cells[row][col] != EMPTY and (color is None or self.cells[row][col] == color)
        ]

    def has_five_or_more(self, row, col):
        """Check for 5+ in any direction through the stone at (row, col)."""
        color = self.cells[row][col]
        if color not in (BLACK, WHITE):
            return False
        for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
            forward = self._count_dir(row, col, dr, dc, color)
            backward = self._count_dir(row, col, -dr, -dc, color)
            if 1 + forward + backward >= 5:
                return True
        return False

    def _count_dir(self, row, col, dr, dc, color):
        """Count contiguous stones of color from (row, col) (exclusive) in (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] == color:
            count += 1
            r += dr
            c += dc
        return count

    def render(self):
        """Text grid with row/column headers."""
        lines = ["   " + "".join(f"{c:>3}" for c in range(self.size))]
        for row in range(self.size):
            lines.append(f"{row:>2} " + "".join(f"  {SYMBOLS[v]}" for v in self.cells[row]))
        return "\n".join(lines)

    @classmethod
    def from_text(cls, text, size=None):
        """
        Parse a board from text. Accepts the output of `render` or bare rows of
        symbols ("O", "X", "."), optionally separated by spaces. Blank lines and
        a header line of column numbers are ignored.
        """
        rows = []
        for raw in text.splitlines():
            tokens = raw.split()
            if not tokens:
                continue
            if all(tok.isdigit() for tok in tokens):
                continue  # column header
            if tokens[0].isdigit():
                tokens = tokens[1:]  # row header
            symbols = list("".join(tokens))
            try:
                rows.append([_FROM_SYMBOL[s] for s in symbols])
            except KeyError as exc:
                raise ValueError(f"unknown board symbol {exc.args[0]!r}") from exc

        size = size or len(rows)
        if len(rows) != size or any(len(r) != size for r in rows):
            raise ValueError(f"expected a {size}x{size} board")

        board = cls(size)
        for row, values in enumerate(rows):
            for col, value in enumerate(values):
                if value != EMPTY:
                    board.place(row, col, value)
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __str__(self):
        return self.render()
