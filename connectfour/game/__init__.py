"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board, the players, and the game controller.
"""

from connectfour.game.board import Board
from connectfour.game.players import Player, HumanPlayer, ComputerPlayer
from connectfour.game.controller import GameController, GameSession

__all__ = ['Board', 'Player', 'HumanPlayer', 'ComputerPlayer', 'GameController', 'GameSession']
