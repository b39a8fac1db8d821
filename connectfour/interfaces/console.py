"""
console.py - Text input/output for the Connect Four console game

The game core only talks to an InputProvider and an OutputSink. ConsoleIO
implements both on top of the terminal.
"""

from typing import TYPE_CHECKING, Protocol

from connectfour.exceptions import InputExhaustedError

if TYPE_CHECKING:
    from connectfour.game.board import Board

BOARD_TITLE = "Current board:"


class InputProvider(Protocol):
    def read_line(self, prompt: str = "") -> str:
        ...


class OutputSink(Protocol):
    def write_line(self, text: str = "") -> None:
        ...


class ConsoleIO:
    """Reads from stdin and writes to stdout."""

    def read_line(self, prompt: str = "") -> str:
        try:
            return input(prompt)
        except EOFError as e:
            raise InputExhaustedError("No more input available") from e

    def write_line(self, text: str = "") -> None:
        print(text)


def display_board(board: "Board", out: OutputSink) -> None:
    """Write the board under a title line, followed by a blank line."""
    out.write_line(BOARD_TITLE)
    for row in board.render():
        out.write_line(" ".join(row))
    out.write_line()
