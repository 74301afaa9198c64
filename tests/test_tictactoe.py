import io

import pytest

from algodojo.tictactoe import Board, main, play, rules_text

EMPTY_BOARD = (
    "    1   2   3 \n"
    "1 |   |   |   |\n"
    "  -------------\n"
    "2 |   |   |   |\n"
    "  -------------\n"
    "3 |   |   |   |\n"
)


def test_empty_board_render():
    assert Board().render() == EMPTY_BOARD


def test_render_shows_marks():
    board = Board()
    board.place(11, "X")
    board.place(33, "O")
    lines = board.render().splitlines()
    assert lines[1] == "1 | X |   |   |"
    assert lines[5] == "3 |   |   | O |"


@pytest.mark.parametrize("position", [0, 10, 14, 41, 40, -11, 99])
def test_off_board_positions_are_invalid(position):
    assert not Board().is_valid(position)


def test_occupied_cell_is_invalid():
    board = Board()
    assert board.is_valid(22)
    board.place(22, "O")
    assert not board.is_valid(22)
    with pytest.raises(ValueError):
        board.place(22, "X")


def test_unknown_player_rejected():
    with pytest.raises(ValueError):
        Board().place(11, "Z")


@pytest.mark.parametrize(
    "positions",
    [(11, 12, 13), (21, 22, 23), (12, 22, 32), (11, 22, 33), (13, 22, 31)],
)
def test_lines_win(positions):
    board = Board()
    for position in positions:
        board.place(position, "O")
    assert board.has_won("O")
    assert not board.has_won("X")


def test_play_first_player_wins():
    out = io.StringIO()
    winner = play([11, 21, 12, 22, 13], out)
    assert winner == "X"
    assert out.getvalue().endswith("Player X wins!\n\n")


def test_play_draw():
    out = io.StringIO()
    result = play([11, 12, 13, 22, 21, 23, 32, 31, 33], out)
    assert result is None
    assert "It's a draw!" in out.getvalue()
    assert "wins!" not in out.getvalue()


def test_play_rejects_invalid_and_repeated_moves():
    out = io.StringIO()
    winner = play(["abc", 11, 11, 44, 21, 12, 22, 13], out)
    assert winner == "X"
    assert out.getvalue().count("Invalid position. Try again.\n") == 3


def test_play_stops_when_moves_run_out():
    out = io.StringIO()
    assert play([11], out) is None
    assert out.getvalue().count("'s turn. Choose the Position:") == 2


def test_rules_text_ends_with_empty_board():
    text = rules_text()
    assert text.startswith("HELLO GAMERS!\n")
    assert "LETS BEGIN THE GAME!!\n\n" + EMPTY_BOARD + "\n" in text


def test_main_reads_moves_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("11 21\n12 22 13\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Player X wins!" in captured