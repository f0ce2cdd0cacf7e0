"""The 8x8 Reversi board: piece placement, flipping and move validation."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

SIZE = 8
EMPTY = " "
BLACK = "B"
WHITE = "W"
HINT = "."

CLEAR_SCREEN = "\033[2J\033[1;1H"

# (dx, dy) steps for the eight neighbouring directions.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)


def opponent_of(color: str) -> str:
    """Return the colour that plays against ``color``."""
    return BLACK if color == WHITE else WHITE


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


class Board:
    """Game state of an 8x8 Reversi board, indexed as ``grid[row][col]``."""

    def __init__(self) -> None:
        self._grid: list[list[str]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        self._grid[3][3] = self._grid[4][4] = WHITE
        self._grid[3][4] = self._grid[4][3] = BLACK
        self.show_hints = False

    def render(self) -> str:
        """Return the board as text, marking cells playable by either side."""
        lines = ["  " + " ".join(str(col) for col in range(SIZE))]
        for y, row in enumerate(self._grid):
            parts = [str(y)]
            for x, piece in enumerate(row):
                if piece == EMPTY and (
                    self.is_valid_move(x, y, BLACK) or self.is_valid_move(x, y, WHITE)
                ):
                    parts.append(HINT)
                else:
                    parts.append(piece)
            lines.append(" ".join(parts) + " ")
        return "\n".join(lines) + "\n"

    def display(self) -> str:
        """Clear the terminal, print the board and return the text written."""
        text = CLEAR_SCREEN + self.render()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def toggle_show_hints(self) -> None:
        self.show_hints = not self.show_hints

    def set_board(self, new_board: Sequence[Sequence[str]]) -> None:
        """Replace the whole layout with ``new_board`` (8 rows of 8 cells)."""
        rows = [list(row) for row in new_board]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"board layout must be {SIZE}x{SIZE}")
        self._grid = rows

    def set_cell(self, row: int, col: int, value: str) -> None:
        """Set one cell; coordinates outside the board are ignored."""
        if _in_bounds(col, row):
            self._grid[row][col] = value

    def cells(self) -> list[list[str]]:
        """Return a copy of the layout, row by row."""
        return [row.copy() for row in self._grid]

    def cell(self, x: int, y: int) -> str:
        """Return the piece at column ``x``, row ``y``."""
        return self._grid[y][x]

    def move(self, pos_x: int, pos_y: int, color: str, is_test: bool = False) -> bool:
        """Place ``color`` at (pos_x, pos_y) if that flips something.

        With ``is_test`` the board is left unchanged and only legality is reported.
        """
        if not _in_bounds(pos_x, pos_y) or self._grid[pos_y][pos_x] != EMPTY:
            return False
        return self.flip(pos_x, pos_y, color, is_test)

    def _captures(self, x: int, y: int, color: str) -> Iterable[tuple[int, int]]:
        for dx, dy in DIRECTIONS:
            run: list[tuple[int, int]] = []
            cx, cy = x + dx, y + dy
            while _in_bounds(cx, cy):
                piece = self._grid[cy][cx]
                if piece == color:
                    yield from run
                    break
                if piece == EMPTY:
                    break
                run.append((cx, cy))
                cx, cy = cx + dx, cy + dy

    def flip(self, x: int, y: int, color: str, is_test: bool = False) -> bool:
        """Place ``color`` at (x, y) and flip enclosed pieces.

        Returns whether any piece would be flipped; the board changes only when
        something flips and ``is_test`` is false.
        """
        captured = list(self._captures(x, y, color))
        if not captured:
            return False
        if not is_test:
            self._grid[y][x] = color
            for cx, cy in captured:
                self._grid[cy][cx] = color
        return True

    def valid_moves(self, color: str) -> list[tuple[int, int]]:
        """Return every legal (x, y) for ``color``, row by row."""
        return [
            (x, y)
            for y in range(SIZE)
            for x in range(SIZE)
            if self._grid[y][x] == EMPTY and self.is_valid_move(x, y, color)
        ]

    def is_valid_move(self, x: int, y: int, color: str) -> bool:
        """Whether placing ``color`` at (x, y) would enclose an opponent run."""
        if not _in_bounds(x, y) or self._grid[y][x] != EMPTY:
            return False
        opponent = opponent_of(color)
        for dx, dy in DIRECTIONS:
            cx, cy = x + dx, y + dy
            found_opponent = False
            while _in_bounds(cx, cy):
                piece = self._grid[cy][cx]
                if piece == opponent:
                    found_opponent = True
                elif piece == color and found_opponent:
                    return True
                else:
                    break
                cx, cy = cx + dx, cy + dy
        return False