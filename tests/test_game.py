import io
from unittest.mock import patch

import pytest

from reversigame.board import Board
from reversigame.game import Game, countdown


def _layout(first_row):
    return [first_row] + [" " * 8 for _ in range(7)]


@pytest.fixture
def game(tmp_path):
    g = Game(tmp_path / "save.txt")
    g.turn_seconds = 0
    return g


def test_black_moves_first(game):
    assert game.current_player_color == "B"


def test_switch_turn_alternates(game):
    game.switch_turn()
    assert game.current_player_color == "W"
    game.switch_turn()
    assert game.current_player_color == "B"


def test_set_current_player_color(game):
    game.set_current_player_color("W")
    assert game.current_player_color == "W"
    game.set_current_player_color("X")
    assert game.current_player_color == "W"


def test_move_changes_board(game):
    assert game.move(2, 3, "B")
    assert game.board.cell(2, 3) == "B"
    assert game.board.cell(3, 3) == "B"


def test_illegal_move_rejected(game):
    before = game.board.cells()
    assert not game.move(0, 0, "B")
    assert game.board.cells() == before


def test_count_pieces_after_move(game):
    game.move(2, 3, "B")
    game.count_pieces()
    assert game.player_a.score + game.player_b.score == 5
    assert game.player_a.score > game.player_b.score


def test_winner_message_tie_and_win(game):
    assert "It's a tie!" in game.winner_message()
    game.move(2, 3, "B")
    message = game.winner_message()
    assert message.startswith("Final Scores:\n")
    assert "Player A wins!" in message


def test_display_winner_prints(game, capsys):
    game.display_winner()
    assert "Final Scores:" in capsys.readouterr().out


def test_not_over_at_start(game):
    assert not game.is_game_over()
    assert game.current_player_color == "B"


def test_game_over_when_nobody_can_move(game):
    game.board.set_board(_layout("BB      "))
    assert game.is_game_over()


def test_game_over_passes_turn_when_only_opponent_can_move(game):
    game.board.set_board(_layout("WB      "))
    assert not game.is_game_over()
    assert game.current_player_color == "W"


def test_possible_moves_match_board(game):
    moves = game.current_player_possible_moves()
    assert moves == Board().valid_moves("B")
    assert game.current_player_possible_moves_count == len(moves)


def test_is_valid_move_needs_dot_empties(game):
    assert game.valid_moves("B") == []
    game.board.set_board(["BW......"] + ["." * 8 for _ in range(7)])
    assert game.is_valid_move(2, 0, "B")
    assert not game.is_valid_move(0, 0, "B")
    assert (2, 0) in game.valid_moves("B")


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "state.txt"
    first = Game(path)
    first.move(2, 3, "B")
    first.switch_turn()
    first.save()

    second = Game(path)
    second.load()
    assert second.board.cells() == first.board.cells()
    assert second.current_player_color == "W"


def test_save_format(game):
    game.save()
    lines = game.save_path.read_text(encoding="utf-8").split("\n")
    assert lines[8] == "B"
    assert lines[:8] == ["".join(row) for row in Board().cells()]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Game(tmp_path / "missing.txt").load()


def test_reset(game, capsys):
    game.move(2, 3, "B")
    game.switch_turn()
    game.reset()
    assert game.board.cells() == Board().cells()
    assert game.current_player_color == "B"
    lines = game.save_path.read_text(encoding="utf-8").splitlines()
    assert lines == ["." * 8] * 8 + ["B"]
    assert "Game has been reset." in capsys.readouterr().out


def test_toggle_show_hints(game, capsys):
    game.toggle_show_hints()
    assert game.board.show_hints
    capsys.readouterr()
    game.toggle_show_hints()
    assert not game.board.show_hints


def test_countdown_output():
    out = io.StringIO()
    with patch("time.sleep") as sleep:
        countdown(10, out)
    text = out.getvalue()
    assert "00:10" in text
    assert "00:04" in text
    assert text.endswith("00:00\nTime's up\n")
    assert sleep.call_count == 10


def test_start_saves_after_valid_move(game):
    out = io.StringIO()
    game.start(io.StringIO("0 0\n2 3\n"), out)
    text = out.getvalue()
    assert "Invalid move. Try again." in text
    assert "File saved successfully!" in text
    assert game.current_player_color == "W"
    assert game.save_path.read_text(encoding="utf-8").splitlines()[8] == "W"


def test_start_plays_to_game_over(game):
    game.board.set_board(_layout("BW      "))
    out = io.StringIO()
    game.start(io.StringIO("2 0\n"), out)
    text = out.getvalue()
    assert "Game Over!" in text
    assert "Player A wins!" in text


def test_start_loads_saved_state(tmp_path):
    path = tmp_path / "state.txt"
    saved = Game(path)
    saved.move(2, 3, "B")
    saved.switch_turn()
    saved.save()

    game = Game(path)
    game.turn_seconds = 0
    out = io.StringIO()
    game.start(io.StringIO("9 9\n"), out)
    assert game.board.cells() == saved.board.cells()
    assert game.current_player_color == "W"
    assert "Invalid move. Try again." in out.getvalue()