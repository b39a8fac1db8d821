"""
exceptions.py - Error types raised by the Connect Four game
"""


class ConnectFourError(Exception):
    """Base class for all game errors."""


class InvalidColumnError(ConnectFourError, ValueError):
    """Column index outside the board."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is out of range")
        self.column = column


class ColumnFullError(ConnectFourError):
    """Target column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class InputExhaustedError(ConnectFourError, EOFError):
    """No further input is available from the input provider."""


class GameOverError(ConnectFourError):
    """A move was requested for a game that has already ended."""


class PositionFormatError(ConnectFourError, ValueError):
    """A textual board position could not be loaded."""
