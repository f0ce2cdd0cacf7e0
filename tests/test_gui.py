import pytest

from reversigame.board import Board
from reversigame.gui import GUI, main


@pytest.fixture
def gui(tmp_path):
    return GUI(tmp_path / "db-reversi.txt")


@pytest.mark.parametrize(
    ("pixel", "expected"),
    [
        ((180, 150), (0, 0)),
        ((180 + 80 * 7 + 79, 150 + 80 * 7 + 79), (7, 7)),
        ((180 + 80 * 3 + 10, 150 + 80 * 2 + 10), (3, 2)),
        ((900, 150), None),
        ((500, 50), None),
        ((500, 150 + 80 * 8), None),
    ],
)
def test_cell_at(pixel, expected):
    assert GUI.cell_at(*pixel) == expected


def test_initial_scores(gui):
    assert gui.scores() == (2, 2)
    assert (gui.black_score, gui.white_score) == (2, 2)


def test_initial_hints_are_black_moves(gui):
    assert gui.hint_cells() == [(3, 2), (2, 3), (5, 4), (4, 5)]
    assert gui.hint_cells() == gui.game.board.valid_moves("B")


def test_hints_off_gives_nothing(gui):
    gui.show_hints = False
    assert gui.hint_cells() == []


def test_board_click_plays_and_switches(gui):
    gui._handle_board_click(3, 2)
    assert gui.game.board.cell(3, 2) == "B"
    assert gui.game.board.cell(3, 3) == "B"
    assert gui.game.current_player_color == "W"
    assert gui.game.save_path.exists()


def test_illegal_click_keeps_turn(gui):
    before = gui.game.board.cells()
    gui._handle_board_click(0, 0)
    assert gui.game.board.cells() == before
    assert gui.game.current_player_color == "B"


def test_timeout_plays_a_random_legal_move(gui):
    gui._on_timeout()
    black, white = gui.scores()
    assert black + white == 5
    assert black > white
    assert gui.game.current_player_color == "W"


def test_save_file_layout(gui):
    gui.save_to_file()
    lines = gui.game.save_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 9
    assert lines[0] == " " * 8
    assert lines[3] == "   WB   "
    assert lines[4] == "   BW   "
    assert lines[8] == "B"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "state.txt"
    first = GUI(path)
    first._handle_board_click(3, 2)
    first.save_to_file()

    second = GUI(path)
    second.load_from_file()
    assert second.game.board.cells() == first.game.board.cells()
    assert second.game.current_player_color == "W"


def test_load_missing_file_keeps_game(gui):
    gui.load_from_file()
    assert gui.game.board.cells() == Board().cells()
    assert gui.game.current_player_color == "B"


def test_load_ignores_unknown_turn(gui):
    rows = ["B" * 8] + [" " * 8] * 7
    gui.game.save_path.write_text("\n".join(rows) + "\nX\n", encoding="utf-8")
    gui.load_from_file()
    assert gui.game.board.cells()[0] == ["B"] * 8
    assert gui.game.current_player_color == "B"


def test_load_short_lines(gui):
    gui.game.save_path.write_text("WW\n", encoding="utf-8")
    gui.load_from_file()
    cells = gui.game.board.cells()
    assert cells[0][:2] == ["W", "W"]
    assert cells[0][2:] == [" "] * 6


def test_reset_game_restores_start(gui):
    gui._handle_board_click(3, 2)
    gui.reset_game()
    assert gui.game.board.cells() == Board().cells()
    assert gui.game.current_player_color == "B"
    assert (gui.black_score, gui.white_score) == (0, 0)
    lines = gui.game.save_path.read_text(encoding="utf-8").splitlines()
    assert lines[3] == "   WB   "
    assert lines[8] == "B"


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2