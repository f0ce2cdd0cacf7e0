"""A Reversi player: colour, score and the moves currently open to it."""

from __future__ import annotations

import warnings

from reversigame.board import BLACK, SIZE, WHITE

MAX_MOVES = SIZE * SIZE


class Player:
    """One side of the game."""

    def __init__(self, color: str) -> None:
        if color not in (BLACK, WHITE):
            warnings.warn(
                f"Invalid color. Set to default color '{BLACK}'.", stacklevel=2
            )
            color = BLACK
        self.color = color
        self.score = 0
        self.possible_moves: list[tuple[int, int]] = []

    @property
    def possible_moves_count(self) -> int:
        return len(self.possible_moves)

    def add_possible_move(self, x: int, y: int) -> None:
        if len(self.possible_moves) >= MAX_MOVES:
            raise IndexError("no room for another possible move")
        self.possible_moves.append((x, y))

    def clear_possible_moves(self) -> None:
        self.possible_moves.clear()

    def display_possible_moves(self) -> None:
        """Report when there is nothing to play."""
        if not self.possible_moves:
            print("No possible moves available.")

    def increment_score(self) -> None:
        self.score += 1

    def reset_score(self) -> None:
        self.score = 0