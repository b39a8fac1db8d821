"""
utils.py - Constants, enumerations and helpers for the Connect Four console game

This module provides the board dimensions, the token and result enumerations,
and the direction vectors used for win checking.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win

EMPTY_GLYPH = "."


class Token(Enum):
    """Enumeration representing cell states and player tokens."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> "Token":
        """Get the opposing token."""
        if self == Token.ONE:
            return Token.TWO
        elif self == Token.TWO:
            return Token.ONE
        return Token.EMPTY

    def __str__(self) -> str:
        if self == Token.EMPTY:
            return EMPTY_GLYPH
        elif self == Token.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, token: Token) -> "GameResult":
        """Get the winning result for the given token."""
        if token == Token.ONE:
            return cls.PLAYER_ONE_WIN
        if token == Token.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {token!r}")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # bottom-left to top-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}

# Glyph lookup used when loading positions from text
GLYPH_TOKENS: Dict[str, Token] = {
    EMPTY_GLYPH: Token.EMPTY,
    "0": Token.EMPTY,
    "X": Token.ONE,
    "1": Token.ONE,
    "O": Token.TWO,
    "2": Token.TWO,
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def is_valid_column(col: int) -> bool:
    """Check if a column index is within [0, COLS)."""
    return 0 <= col < COLS
