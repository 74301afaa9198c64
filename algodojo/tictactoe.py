"""A two-player tic-tac-toe game played from the terminal.

Cells are named by two digits "ij": i is the row and j the column, both
counted from 1, so 11 is the top-left cell and 33 the bottom-right one.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO, Union

PLAYERS = ("X", "O")

_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def _cell(position: int) -> tuple[int, int]:
    return position // 10 - 1, position % 10 - 1


class Board:
    """A 3x3 board whose cells are empty or hold "X" or "O"."""

    def __init__(self) -> None:
        self.cells: list[list[Optional[str]]] = [[None] * 3 for _ in range(3)]

    def is_valid(self, position: int) -> bool:
        """Tell whether the position names an empty cell on the board."""
        if position < 0:
            return False
        row, column = _cell(position)
        return 0 <= row < 3 and 0 <= column < 3 and self.cells[row][column] is None

    def place(self, position: int, player: str) -> None:
        """Put the player's mark on the cell; raise ValueError if it cannot go there."""
        if player not in PLAYERS:
            raise ValueError(f"unknown player {player!r}")
        if not self.is_valid(position):
            raise ValueError(f"invalid position {position}")
        row, column = _cell(position)
        self.cells[row][column] = player

    def has_won(self, player: str) -> bool:
        """Tell whether the player holds a full row, column or diagonal."""
        return any(
            all(self.cells[row][column] == player for row, column in line)
            for line in _LINES
        )

    def render(self) -> str:
        """Return the board drawn as text."""
        parts = ["    1   2   3 \n"]
        for number, row in enumerate(self.cells, start=1):
            marks = "".join(f" {mark or ' '} |" for mark in row)
            parts.append(f"{number} |{marks}\n")
            if number < 3:
                parts.append("  -------------\n")
        return "".join(parts)


def rules_text() -> str:
    """Return the greeting, the rules and the empty board shown at start."""
    parts = [
        "HELLO GAMERS!\nWELCOME TO THIS TIC-TAC-TOE GAME!!\n\n",
        "Lets go through the rules first:\n\n",
        "1. The game board will be displayed in given form:\n\n",
        "      1    2    3 \n",
    ]
    for i in range(1, 4):
        cells = "".join(f" {i}{j} |" for j in range(3))
        parts.append(f"   {i} {cells}\n")
        if i < 3:
            parts.append("     ---------------\n")
    parts.append("\n")
    parts.append(
        '2. Each cell is represented by the double digit number "ij", '
        "where i is the row number, j is the column number.\n\n"
    )
    parts.append(
        "   For example, the top-left cell is represented by '11', "
        "the bottom-right cell is represented by '33', and so on.\n"
    )
    parts.append(
        "3. Players will take turns to make a move by entering the cell number "
        "where they want to place their symbol.\n"
    )
    parts.append(
        "   X will represent the first player, and O will represent the second player.\n\n"
    )
    parts.append(
        "4. The game ends when one player gets three of their symbols in a row "
        "(horizontally, vertically, or diagonally), or when the availablePositions "
        "is full, resulting in a draw.\n\n"
    )
    parts.append("LETS BEGIN THE GAME!!\n\n")
    parts.append(Board().render())
    parts.append("\n")
    return "".join(parts)


def _parse(move: Union[int, str]) -> Optional[int]:
    try:
        return int(move)
    except (TypeError, ValueError):
        return None


def play(moves: Iterable[Union[int, str]], out: TextIO) -> Optional[str]:
    """Play a game from a sequence of moves, writing the dialogue to ``out``.

    Returns the winner ("X" or "O"), or None for a draw or when the moves
    run out before the game is decided.
    """
    board = Board()
    pending = iter(moves)
    turn = 0
    while turn < 9:
        player = PLAYERS[turn % 2]
        out.write(f'It\'s "{player}" \'s turn. Choose the Position:\n')
        try:
            move = next(pending)
        except StopIteration:
            return None
        position = _parse(move)
        if position is None or not board.is_valid(position):
            out.write("Invalid position. Try again.\n")
            continue
        turn += 1
        board.place(position, player)
        out.write(board.render())
        if board.has_won(player):
            out.write(f"Player {player} wins!\n\n")
            return player
        if turn == 9:
            out.write("It's a draw!\n\n")
    return None


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Show the rules, then play a game with moves read from standard input."""
    sys.stdout.write(rules_text())
    play(_tokens(sys.stdin), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())