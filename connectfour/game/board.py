"""
board.py - Board representation for the Connect Four console game

This module implements the Board class which owns the 6x7 grid, drops tokens
by gravity and answers occupancy and win queries.
"""

import numpy as np
from typing import List

from connectfour.debug import debug
from connectfour.exceptions import ColumnFullError, InvalidColumnError, PositionFormatError
from connectfour.utils import (ROWS, COLS, CONNECT_N, GLYPH_TOKENS, DIRECTION_VECTORS,
                               Token, is_valid_column, is_valid_position)


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board and row ROWS - 1 the bottom. The grid only
    changes through place(), which keeps every column gravity-filled.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        self.grid = np.full((ROWS, COLS), Token.EMPTY.value, dtype=np.int8)
        self.move_count = 0
        debug.trace("Initialized empty board", "board")

    @classmethod
    def from_string(cls, position: str) -> "Board":
        """
        Build a board from a textual position.

        The position lists the cells row by row from the top, using "." or
        "0" for empty, "X" or "1" for the first token and "O" or "2" for the
        second. Whitespace is ignored.

        Raises:
            PositionFormatError: if the text is malformed or has floating tokens
        """
        cells = "".join(position.split()).upper()
        if len(cells) != ROWS * COLS:
            raise PositionFormatError(
                f"Position must have {ROWS * COLS} cells, got {len(cells)}")

        board = cls()
        for index, char in enumerate(cells):
            if char not in GLYPH_TOKENS:
                raise PositionFormatError(f"Unknown cell character {char!r} at index {index}")
            token = GLYPH_TOKENS[char]
            board.grid[index // COLS, index % COLS] = token.value
            if token != Token.EMPTY:
                board.move_count += 1

        for col in range(COLS):
            column = board.grid[:, col]
            occupied = np.flatnonzero(column != Token.EMPTY.value)
            if occupied.size and occupied.size != ROWS - occupied[0]:
                raise PositionFormatError(f"Column {col} has a token above an empty cell")

        return board

    def cell(self, row: int, col: int) -> Token:
        """Get the token at a position."""
        if not is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is off the board")
        return Token(int(self.grid[row, col]))

    def is_column_full(self, column: int) -> bool:
        """
        Check whether a column can take no more tokens.

        Only the top cell is inspected; gravity guarantees the rest is filled.
        """
        if not is_valid_column(column):
            raise InvalidColumnError(column)
        return bool(self.grid[0, column] != Token.EMPTY.value)

    def is_board_full(self) -> bool:
        """Check whether every column is full."""
        return all(self.is_column_full(col) for col in range(COLS))

    def get_valid_moves(self) -> List[int]:
        """List the columns that can still take a token."""
        return [col for col in range(COLS) if not self.is_column_full(col)]

    def place(self, column: int, token: Token) -> int:
        """
        Drop a token into a column.

        Args:
            column: The column to place the token in (0-indexed)
            token: The token to place

        Returns:
            The row the token landed in

        Raises:
            InvalidColumnError: if the column is outside the board
            ColumnFullError: if the column has no empty cell; the grid is unchanged
        """
        if token == Token.EMPTY:
            raise ValueError("Cannot place an empty token")
        if self.is_column_full(column):
            debug.debug(f"Column {column} is full, rejecting {token}", "board")
            raise ColumnFullError(column)

        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == Token.EMPTY.value:
                self.grid[row, column] = token.value
                self.move_count += 1
                debug.trace(f"Placed {token} at ({row}, {column})", "board")
                return row

        raise ColumnFullError(column)

    def check_win(self, token: Token) -> bool:
        """
        Check whether a token has four in a row anywhere on the board.

        Every start cell is tried in every direction where a full run fits,
        stopping at the first match.
        """
        value = token.value
        grid = self.grid
        for dr, dc in DIRECTION_VECTORS.values():
            for row in range(ROWS):
                for col in range(COLS):
                    end_row = row + dr * (CONNECT_N - 1)
                    end_col = col + dc * (CONNECT_N - 1)
                    if not is_valid_position(end_row, end_col):
                        continue
                    if all(grid[row + i * dr, col + i * dc] == value for i in range(CONNECT_N)):
                        debug.debug(f"{token} has four in a row from ({row}, {col})", "board")
                        return True
        return False

    def get_state(self) -> np.ndarray:
        """Get a copy of the grid."""
        return self.grid.copy()

    def render(self) -> List[List[str]]:
        """
        Render the board as rows of glyphs.

        Returns:
            Row-major list of glyph rows, top row first
        """
        return [[str(Token(int(value))) for value in row] for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.render())
