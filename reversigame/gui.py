"""Graphical Reversi front end: board, hints, turn timer and save/load."""

from __future__ import annotations

import argparse
import os
import random
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from reversigame.board import BLACK, SIZE, WHITE  # noqa: E402
from reversigame.game import DEFAULT_SAVE_PATH, Game  # noqa: E402

WINDOW_SIZE = 1000
CELL = 80
SQUARE = 78
BOARD_START_X = (WINDOW_SIZE - SIZE * CELL) / 2.0
BOARD_START_Y = 150
PIECE_RADIUS = 35
PIECE_INSET = 5
TURN_TIME_LIMIT = 21.0

BACKGROUND = (30, 30, 30)
BOARD_COLOR = (71, 153, 112)
BORDER_COLOR = (34, 77, 56)
TEXT_COLOR = (255, 255, 255)
TIMER_COLOR = (255, 0, 0)
BLACK_RGB = (0, 0, 0)
WHITE_RGB = (255, 255, 255)
HINT_ALPHA = 100

LOAD_BUTTON = (180, 830, 150, 40)
LOAD_BUTTON_COLOR = (100, 100, 200)
HINT_BUTTON = (380, 830, 150, 40)
HINT_BUTTON_COLOR = (100, 200, 100)

ANIMATION_START = 0.1
ANIMATION_END = 1.0
ANIMATION_STEP = 0.05
ANIMATION_FRAME_MS = 5


class GUI:
    """A windowed Reversi game for two players sharing the mouse."""

    def __init__(self, save_path: str | Path = DEFAULT_SAVE_PATH) -> None:
        self.game = Game(save_path)
        self.show_hints = True
        self.turn_time_limit = TURN_TIME_LIMIT
        self.black_score = 0
        self.white_score = 0
        self._turn_started = time.monotonic()
        self._rng = random.Random()
        self._screen: pygame.Surface | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        self._running = False
        self._hints: list[tuple[int, int]] = []
        if self.show_hints:
            self._hints = self.hint_cells()

    # ----- game logic -------------------------------------------------

    @staticmethod
    def cell_at(x: float, y: float) -> tuple[int, int] | None:
        """Map a window pixel to the (column, row) of the board cell under it."""
        col = int((x - BOARD_START_X) / CELL)
        row = int((y - BOARD_START_Y) / CELL)
        if 0 <= col < SIZE and 0 <= row < SIZE:
            return col, row
        return None

    def _restart_clock(self) -> None:
        self._turn_started = time.monotonic()

    @property
    def remaining(self) -> float:
        return self.turn_time_limit - (time.monotonic() - self._turn_started)

    def save_to_file(self) -> None:
        """Store the board and the colour to move; failures are ignored."""
        try:
            self.game.save()
        except OSError:
            pass

    def load_from_file(self) -> None:
        """Restore a saved board and turn; a missing file leaves the game as is."""
        try:
            with self.game.save_path.open(encoding="utf-8") as infile:
                for row, raw in enumerate(infile):
                    line = raw.rstrip("\n")
                    if row < SIZE:
                        for col, value in enumerate(line[:SIZE]):
                            self.game.board.set_cell(row, col, value)
                    elif row == SIZE and line:
                        self.game.set_current_player_color(line[0])
        except OSError:
            pass

    def hint_cells(self) -> list[tuple[int, int]]:
        """Return the (x, y) cells open to the current player, if hints are on."""
        if not self.show_hints:
            return []
        return [
            (x, y)
            for x, y in self.game.current_player_possible_moves()
            if 0 <= x < SIZE and 0 <= y < SIZE
        ]

    def scores(self) -> tuple[int, int]:
        """Count the black and white pieces on the board."""
        pieces = [piece for row in self.game.board.cells() for piece in row]
        self.black_score = pieces.count(BLACK)
        self.white_score = pieces.count(WHITE)
        return self.black_score, self.white_score

    def reset_game(self) -> None:
        """Start a new game and overwrite the save file with it."""
        self.game.reset()
        self._restart_clock()
        self.black_score = 0
        self.white_score = 0
        self._hints = []
        self.save_to_file()
        if self.show_hints:
            self._hints = self.hint_cells()

    def _toggle_hints(self) -> None:
        self.show_hints = not self.show_hints
        self._hints = self.hint_cells() if self.show_hints else []

    def _play(self, x: int, y: int) -> bool:
        color = self.game.current_player_color
        if not self.game.move(x, y, color):
            return False
        self._animate_piece(x, y, BLACK_RGB if color == BLACK else WHITE_RGB)
        self.save_to_file()
        self.game.switch_turn()
        return True

    def _handle_board_click(self, col: int, row: int) -> None:
        if self.game.current_player_possible_moves_count == 0:
            self.game.switch_turn()
            self._restart_clock()
        elif self._play(col, row):
            self._restart_clock()

    def _on_timeout(self) -> None:
        """Play a random legal move for the player whose time ran out."""
        moves = self.game.current_player_possible_moves()
        if moves:
            x, y = self._rng.choice(moves)
            self._play(x, y)
        else:
            self.game.switch_turn()
        self._restart_clock()

    def _winner_text(self) -> str:
        black, white = self.scores()
        if black > white:
            winner = "Black wins!"
        elif white > black:
            winner = "White wins!"
        else:
            winner = "It's a tie!"
        return f"{winner}\n\nBlack: {black}\nWhite: {white}"

    # ----- window -----------------------------------------------------

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self._screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
            pygame.display.set_caption("Reversi")
            clock = pygame.time.Clock()
            self._running = True
            self._restart_clock()
            while self._running:
                self._process_events()
                if not self._running:
                    break
                self._update()
                self._render()
                clock.tick(60)
        finally:
            self._screen = None
            self._fonts.clear()
            pygame.quit()

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("arial", size)
        return self._fonts[size]

    def _process_events(self) -> None:
        load_rect = pygame.Rect(LOAD_BUTTON)
        hint_rect = pygame.Rect(HINT_BUTTON)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if load_rect.collidepoint(event.pos):
                    self.load_from_file()
                    self._restart_clock()
                elif hint_rect.collidepoint(event.pos):
                    self._toggle_hints()
                else:
                    cell = self.cell_at(*event.pos)
                    if cell is not None:
                        self._handle_board_click(*cell)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_h:
                self._toggle_hints()

    def _update(self) -> None:
        if self.remaining <= 0:
            self._on_timeout()
        self.scores()

    @staticmethod
    def _piece_center(x: int, y: int) -> tuple[float, float]:
        offset = PIECE_INSET + PIECE_RADIUS
        return BOARD_START_X + x * CELL + offset, BOARD_START_Y + y * CELL + offset

    def _blit_centered(self, text: str, size: int, color, y: float) -> None:
        assert self._screen is not None
        surface = self._font(size).render(text, True, color)
        self._screen.blit(surface, ((WINDOW_SIZE - surface.get_width()) / 2, y))

    def _draw_board(self) -> None:
        screen = self._screen
        assert screen is not None
        hint_rgb = BLACK_RGB if self.game.current_player_color == BLACK else WHITE_RGB
        hint_surface = pygame.Surface((PIECE_RADIUS * 2, PIECE_RADIUS * 2), pygame.SRCALPHA)
        pygame.draw.circle(
            hint_surface, (*hint_rgb, HINT_ALPHA), (PIECE_RADIUS, PIECE_RADIUS), PIECE_RADIUS
        )
        hints = set(self._hints)
        for y, row in enumerate(self.game.board.cells()):
            for x, piece in enumerate(row):
                left = BOARD_START_X + x * CELL
                top = BOARD_START_Y + y * CELL
                square = pygame.Rect(left, top, SQUARE, SQUARE)
                pygame.draw.rect(screen, BOARD_COLOR, square)
                pygame.draw.rect(screen, BORDER_COLOR, square.inflate(4, 4), 2)
                if piece == BLACK:
                    pygame.draw.circle(screen, BLACK_RGB, self._piece_center(x, y), PIECE_RADIUS)
                elif piece == WHITE:
                    pygame.draw.circle(screen, WHITE_RGB, self._piece_center(x, y), PIECE_RADIUS)
                elif (x, y) in hints:
                    screen.blit(hint_surface, (left + PIECE_INSET, top + PIECE_INSET))

    def _draw_buttons(self) -> None:
        screen = self._screen
        assert screen is not None
        load_rect = pygame.Rect(LOAD_BUTTON)
        pygame.draw.rect(screen, LOAD_BUTTON_COLOR, load_rect)
        screen.blit(
            self._font(25).render(" Load", True, TEXT_COLOR),
            (load_rect.x + 40, load_rect.y + 5),
        )
        hint_rect = pygame.Rect(HINT_BUTTON)
        pygame.draw.rect(screen, HINT_BUTTON_COLOR, hint_rect)
        label = self._font(25).render(
            "Hints: ON" if self.show_hints else "Hints: OFF", True, TEXT_COLOR
        )
        screen.blit(label, label.get_rect(center=hint_rect.center))

    def _render(self) -> None:
        screen = self._screen
        assert screen is not None
        screen.fill(BACKGROUND)
        self._blit_centered("Reversi", 48, TEXT_COLOR, 20)
        player = "Black" if self.game.current_player_color == BLACK else "White"
        self._blit_centered(f"Turn: {player}", 24, TEXT_COLOR, 80)
        self._blit_centered(f"Timer: {int(self.remaining)}", 24, TIMER_COLOR, 120)
        self._draw_board()
        self._blit_centered(
            f"Black: {self.black_score} White: {self.white_score}", 24, TEXT_COLOR, 900
        )
        self._draw_buttons()
        pygame.display.flip()

        if self.show_hints:
            self._hints = self.hint_cells()

        if self.game.is_game_over():
            self._show_winner()
            if self._ask_play_again():
                self.reset_game()
            else:
                self._running = False

    def _animate_piece(self, x: int, y: int, color) -> None:
        screen = self._screen
        if screen is None:
            return
        center = self._piece_center(x, y)
        scale = ANIMATION_START
        frames = int((ANIMATION_END - ANIMATION_START) / ANIMATION_STEP)
        for _ in range(frames):
            pygame.time.wait(ANIMATION_FRAME_MS)
            pygame.event.pump()
            scale += ANIMATION_STEP
            pygame.draw.circle(screen, color, center, PIECE_RADIUS * scale)
            pygame.display.flip()

    def _popup_rect(self, width: int, height: int) -> pygame.Rect:
        rect = pygame.Rect(0, 0, width, height)
        rect.center = (WINDOW_SIZE // 2, WINDOW_SIZE // 2)
        return rect

    def _show_winner(self) -> None:
        screen = self._screen
        assert screen is not None
        lines = self._winner_text().split("\n")
        box = self._popup_rect(400, 250)
        font = self._font(24)
        waiting = True
        while waiting:
            for event in pygame.event.get():
                if event.type in (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                    waiting = False
            pygame.draw.rect(screen, BACKGROUND, box)
            height = font.get_linesize()
            top = box.centery - height * len(lines) / 2
            for index, line in enumerate(lines):
                surface = font.render(line, True, TEXT_COLOR)
                screen.blit(
                    surface, (box.centerx - surface.get_width() / 2, top + index * height)
                )
            pygame.display.flip()
            pygame.time.wait(10)

    def _ask_play_again(self) -> bool:
        screen = self._screen
        assert screen is not None
        box = self._popup_rect(400, 200)
        font = self._font(20)
        yes_rect = pygame.Rect(box.x + 50, box.y + 120, 100, 40)
        no_rect = pygame.Rect(box.x + 250, box.y + 120, 100, 40)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.MOUSEBUTTONDOWN:
                    if yes_rect.collidepoint(event.pos):
                        return True
                    if no_rect.collidepoint(event.pos):
                        return False
            pygame.draw.rect(screen, BACKGROUND, box)
            screen.blit(
                font.render("Do you want to play again?", True, TEXT_COLOR),
                (box.x + 50, box.y + 50),
            )
            pygame.draw.rect(screen, (0, 255, 0), yes_rect)
            screen.blit(font.render("Yes", True, BLACK_RGB), (box.x + 75, box.y + 125))
            pygame.draw.rect(screen, (255, 0, 0), no_rect)
            screen.blit(font.render("No", True, BLACK_RGB), (box.x + 280, box.y + 125))
            pygame.display.flip()
            pygame.time.wait(10)


def main(argv: list[str] | None = None) -> int:
    """Start the windowed game."""
    parser = argparse.ArgumentParser(prog="reversigame", description="Play Reversi.")
    parser.add_argument(
        "--save-file",
        default=DEFAULT_SAVE_PATH,
        help="file used to save and load the game (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    GUI(args.save_file).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())