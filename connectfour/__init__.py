"""
connectfour - Connect Four for the text console

This package provides the board and rules, human and computer players, and
the game loop for a two-player Connect Four game played in a terminal.
"""

__version__ = '0.1.0'
