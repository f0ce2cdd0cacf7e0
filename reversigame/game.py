"""Turn handling, scoring, persistence and the console game loop."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from reversigame.board import BLACK, CLEAR_SCREEN, SIZE, WHITE, Board, opponent_of
from reversigame.player import Player

DEFAULT_SAVE_PATH = "db-reversi.txt"
TURN_SECONDS = 10
LOAD_SENTINEL = 9
CURSOR_HOME = "\033[1;1H"
SAVED_EMPTY = "."

# (dx, dy) steps checked by Game.is_valid_move.
_STEPS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)


def _clock(seconds: int) -> str:
    return f"00:0{seconds}" if seconds < 5 else f"00:{seconds}"


def countdown(seconds: int = TURN_SECONDS, out: TextIO | None = None) -> None:
    """Show a per-second countdown at the top of the terminal, then 'Time's up'."""
    stream = sys.stdout if out is None else out
    for remaining in range(seconds, 0, -1):
        stream.write(f"{CURSOR_HOME}{_clock(remaining)}\n")
        stream.flush()
        time.sleep(1)
    stream.write(f"{CURSOR_HOME}{_clock(0)}\nTime's up\n")
    stream.flush()


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Game:
    """A two-player Reversi game; black (player A) moves first."""

    def __init__(self, save_path: str | Path = DEFAULT_SAVE_PATH) -> None:
        self.save_path = Path(save_path)
        self.board = Board()
        self.player_a = Player(BLACK)
        self.player_b = Player(WHITE)
        self.current_player = self.player_a
        self.turn_seconds = TURN_SECONDS

    @property
    def current_player_color(self) -> str:
        return self.current_player.color

    @property
    def current_player_possible_moves_count(self) -> int:
        return self.current_player.possible_moves_count

    def set_current_player_color(self, color: str) -> None:
        """Hand the turn to the player of ``color``; unknown colours are ignored."""
        if color == self.player_a.color:
            self.current_player = self.player_a
        elif color == self.player_b.color:
            self.current_player = self.player_b

    def switch_turn(self) -> None:
        self.current_player = (
            self.player_b if self.current_player is self.player_a else self.player_a
        )

    def toggle_show_hints(self) -> None:
        self.board.show_hints = not self.board.show_hints
        self.board.display()

    def reset(self) -> None:
        """Start over with a fresh board and write an empty save file."""
        self.board = Board()
        for player in (self.player_a, self.player_b):
            player.reset_score()
            player.clear_possible_moves()
        self.current_player = self.player_a
        try:
            with self.save_path.open("w", encoding="utf-8") as outfile:
                for _ in range(SIZE):
                    outfile.write(SAVED_EMPTY * SIZE + "\n")
                outfile.write(self.current_player.color + "\n")
        except OSError:
            pass
        print("Game has been reset.")

    def move(self, x: int, y: int, color: str) -> bool:
        return self.board.move(x, y, color)

    def is_valid_move(self, row: int, col: int, color: str) -> bool:
        """Check a move at board cell (row, col) against cells marked '.' as empty.

        ``row`` and ``col`` are passed to the board as its x and y.
        """
        if self.board.cell(row, col) != SAVED_EMPTY:
            return False
        opponent = opponent_of(color)
        for dx, dy in _STEPS:
            x, y = row + dx, col + dy
            found_opponent = False
            while 0 <= x < SIZE and 0 <= y < SIZE:
                current = self.board.cell(x, y)
                if current == opponent:
                    found_opponent = True
                elif current == color:
                    if found_opponent:
                        return True
                    break
                else:
                    break
                x, y = x + dx, y + dy
        return False

    def _check_all_possible_moves(self) -> None:
        player = self.current_player
        player.clear_possible_moves()
        for row in range(SIZE):
            for col in range(SIZE):
                if self.board.move(col, row, player.color, True):
                    player.add_possible_move(col, row)

    def is_game_over(self) -> bool:
        """Whether neither side can move; passes the turn if only the other can."""
        self._check_all_possible_moves()
        if self.current_player.possible_moves_count == 0:
            self.switch_turn()
            self._check_all_possible_moves()
            if self.current_player.possible_moves_count == 0:
                return True
        return not any(
            self.board.move(x, y, self.player_a.color, True)
            or self.board.move(x, y, self.player_b.color, True)
            for y in range(SIZE)
            for x in range(SIZE)
        )

    def current_player_possible_moves(self) -> list[tuple[int, int]]:
        """Recompute and return the (x, y) moves open to the current player."""
        self._check_all_possible_moves()
        self.current_player.display_possible_moves()
        return list(self.current_player.possible_moves)

    def valid_moves(self, color: str) -> list[tuple[int, int]]:
        return [
            (row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.is_valid_move(row, col, color)
        ]

    def count_pieces(self) -> None:
        self.player_a.reset_score()
        self.player_b.reset_score()
        for row in self.board.cells():
            for piece in row:
                if piece == self.player_a.color:
                    self.player_a.increment_score()
                elif piece == self.player_b.color:
                    self.player_b.increment_score()

    def winner_message(self) -> str:
        """Count the pieces and describe the final scores and the winner."""
        self.count_pieces()
        a, b = self.player_a.score, self.player_b.score
        if a > b:
            verdict = "Player A wins!"
        elif b > a:
            verdict = "Player B wins!"
        else:
            verdict = "It's a tie!"
        return (
            "Final Scores:\n"
            f"Player A (B) Score: {a}\n"
            f"Player B (W) Score: {b}\n"
            f"{verdict}\n"
        )

    def display_winner(self) -> str:
        """Print the final scores and the winner, and return the text written."""
        message = self.winner_message()
        sys.stdout.write(message)
        sys.stdout.flush()
        return message

    def save(self) -> None:
        """Write the board, row by row, then the colour to move."""
        with self.save_path.open("w", encoding="utf-8") as outfile:
            for row in self.board.cells():
                outfile.write("".join(row) + "\n")
            outfile.write(self.current_player.color + "\n")

    def load(self) -> None:
        """Read a state written by :meth:`save`; raises OSError if unreadable."""
        with self.save_path.open(encoding="utf-8") as infile:
            for index, raw in enumerate(infile):
                line = raw.rstrip("\n")
                if index < SIZE:
                    for col, value in enumerate(line[:SIZE]):
                        self.board.set_cell(index, col, value)
                else:
                    self.current_player = (
                        self.player_a if line[:1] == BLACK else self.player_b
                    )

    def start(self, input_stream: TextIO | None = None, out: TextIO | None = None) -> None:
        """Run the console game until it is over or the input runs out.

        Entering 9 for either coordinate reloads the saved state first.
        """
        source = sys.stdin if input_stream is None else input_stream
        stream = sys.stdout if out is None else out
        tokens = _tokens(source)

        while not self.is_game_over():
            threading.Thread(
                target=countdown, args=(self.turn_seconds, stream), daemon=True
            ).start()

            stream.write(CLEAR_SCREEN + self.board.render())
            stream.write(f"Current Player: {self.current_player.color}\n\n")
            stream.write("Input move (column and row respectively): ")
            stream.flush()

            first, second = next(tokens, None), next(tokens, None)
            if first is None or second is None:
                stream.write("\n")
                return
            try:
                pos_x, pos_y = int(first), int(second)
            except ValueError:
                stream.write("Invalid move. Try again.\n")
                continue

            if LOAD_SENTINEL in (pos_x, pos_y):
                try:
                    self.load()
                except OSError:
                    stream.write("Unable to open the file.\n")

            if self.move(pos_x, pos_y, self.current_player.color):
                self.switch_turn()
                try:
                    self.save()
                except OSError:
                    stream.write("Failed to open the file.\n")
                else:
                    stream.write("File saved successfully!\n")
            else:
                stream.write("Invalid move. Try again.\n")

        stream.write("Game Over!\n")
        stream.write(CLEAR_SCREEN + self.board.render())
        stream.write(self.winner_message())
        stream.flush()