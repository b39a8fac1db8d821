"""
controller.py - Game loop for the Connect Four console game

This module provides the GameController, which picks the game mode, runs the
turn loop over one Board and two Players, and reports the outcome.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from connectfour.debug import debug
from connectfour.exceptions import GameOverError
from connectfour.game.board import Board
from connectfour.game.players import ComputerPlayer, HumanPlayer, Player
from connectfour.interfaces.console import display_board
from connectfour.utils import GameResult, Token

TITLE = "Connect Four"

MODE_VS_COMPUTER = 1
MODE_TWO_HUMANS = 2


@dataclass
class GameSession:
    """State of one game: whose turn it is and how it ended."""
    players: Sequence[Player]
    current: int = 0
    result: GameResult = GameResult.IN_PROGRESS
    winner: Optional[Player] = None
    moves: List[int] = field(default_factory=list)

    @property
    def current_player(self) -> Player:
        return self.players[self.current]

    def switch_player(self) -> None:
        self.current = 1 - self.current

    def is_game_over(self) -> bool:
        return self.result.is_game_over()


class GameController:
    """
    Runs a single game of Connect Four.

    The controller owns the board. Players only read it; every token is
    placed here, right after the current player has chosen its column.
    """

    def __init__(self, io, player1: Optional[Player] = None,
                 player2: Optional[Player] = None, seed: Optional[int] = None):
        """
        Initialize the controller.

        Args:
            io: Object providing read_line() and write_line()
            player1: First player, defaults to a human named "Player 1"
            player2: Second player, defaults to a human named "Player 2"
            seed: Seed for the computer player's generator in mode 1
        """
        self.io = io
        self.seed = seed
        self.board = Board()
        self.player1 = player1 or HumanPlayer("Player 1", Token.ONE, io)
        self.player2 = player2 or HumanPlayer("Player 2", Token.TWO, io)
        self.session: Optional[GameSession] = None

    def start_game(self) -> GameSession:
        """Show the title, let the user pick a mode, and play to the end."""
        self.io.write_line(TITLE)
        self.io.write_line()

        self.choose_game_mode()
        return self.play()

    def choose_game_mode(self) -> int:
        """
        Ask for the game mode and set up the players for it.

        Returns:
            The chosen mode (MODE_VS_COMPUTER or MODE_TWO_HUMANS)
        """
        self.io.write_line("Choose game mode:")
        self.io.write_line(f"{MODE_VS_COMPUTER}. Play against the computer")
        self.io.write_line(f"{MODE_TWO_HUMANS}. Play with two human players")

        while True:
            raw = self.io.read_line("Enter your choice (1 or 2): ")
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = None
            if choice in (MODE_VS_COMPUTER, MODE_TWO_HUMANS):
                break
            self.io.write_line("Invalid input. Please enter 1 or 2.")

        if choice == MODE_VS_COMPUTER:
            self.player2 = ComputerPlayer(Token.TWO, seed=self.seed)
        else:
            self.player1 = HumanPlayer(self._ask_name(1), Token.ONE, self.io)
            self.player2 = HumanPlayer(self._ask_name(2), Token.TWO, self.io)

        debug.info(f"Mode {choice}: {self.player1!r} vs {self.player2!r}", "controller")
        return choice

    def _ask_name(self, number: int) -> str:
        self.io.write_line(f"Player {number}, enter your name: ")
        name = self.io.read_line().strip()
        return name or f"Player {number}"

    def play(self) -> GameSession:
        """
        Run the turn loop until someone wins or the board is full.

        Returns:
            The finished session

        Raises:
            GameOverError: if this controller's game has already ended
        """
        if self.session is not None and self.session.is_game_over():
            raise GameOverError("This game has already ended")
        if self.player1.token == self.player2.token:
            raise ValueError("Both players hold the same token")

        if self.session is None:
            self.session = GameSession(players=(self.player1, self.player2))
        session = self.session

        debug.start_timer("game")
        while not session.is_game_over():
            player = session.current_player
            column = player.choose_column(self.board)
            row = self.board.place(column, player.token)
            session.moves.append(column)
            debug.debug(f"Move {len(session.moves)}: {player.name} -> ({row}, {column})", "controller")

            display_board(self.board, self.io)

            if self.board.check_win(player.token):
                session.result = GameResult.win_for(player.token)
                session.winner = player
                self.io.write_line(f"{player.name} wins!")
            elif self.board.is_board_full():
                session.result = GameResult.DRAW
                self.io.write_line("It's a draw!")
            else:
                session.switch_player()

        debug.end_timer("game", "controller")
        debug.info(f"Game over after {len(session.moves)} moves: {session.result.name}", "controller")
        return session
