"""
players.py - Human and computer players for Connect Four

Both player kinds share the choose_column capability. Whatever column they
return is already known to be on the board and not full, so the controller
can place it without checking again.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import GameOverError
from connectfour.game.board import Board
from connectfour.interfaces.console import InputProvider, OutputSink
from connectfour.utils import COLS, Token, is_valid_column


class Player(ABC):
    """A named participant holding one token kind."""

    def __init__(self, name: str, token: Token):
        if token == Token.EMPTY:
            raise ValueError("A player needs a non-empty token")
        self._name = name
        self._token = token

    @property
    def name(self) -> str:
        return self._name

    @property
    def token(self) -> Token:
        return self._token

    @abstractmethod
    def choose_column(self, board: Board) -> int:
        """Return a column in [0, COLS) that is not full."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, token={self._token.name})"


class HumanPlayer(Player):
    """
    A player whose moves are typed in.

    Text that is not a number is silently asked for again. Numbers outside the
    board or pointing at a full column get a message before asking again.
    """

    def __init__(self, name: str, token: Token, io):
        super().__init__(name, token)
        self.input: InputProvider = io
        self.output: OutputSink = io

    def choose_column(self, board: Board) -> int:
        prompt = f"{self.name}, enter a column (0-{COLS - 1}): "
        while True:
            raw = self.input.read_line(prompt)
            try:
                column = int(raw.strip())
            except ValueError:
                debug.trace(f"Unparseable column input {raw!r}", "player")
                continue

            if not is_valid_column(column):
                self.output.write_line(
                    f"Invalid column. Please choose a column between 0 and {COLS - 1}.")
                continue

            if board.is_column_full(column):
                self.output.write_line(
                    f"Column {column} is full. Please choose another column.")
                continue

            debug.debug(f"{self.name} chose column {column}", "player")
            return column


class ComputerPlayer(Player):
    """
    A player that picks columns uniformly at random.

    Draws cover every column and are repeated until one lands on an open
    column. The generator is owned by the player so games can be seeded.
    """

    def __init__(self, token: Token, name: str = "Computer",
                 rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        super().__init__(name, token)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def choose_column(self, board: Board) -> int:
        if board.is_board_full():
            raise GameOverError("Board is full, no column left to choose")

        draws = 0
        while True:
            column = int(self.rng.integers(0, COLS))
            draws += 1
            if not board.is_column_full(column):
                debug.debug(f"{self.name} chose column {column} after {draws} draw(s)", "player")
                return column
