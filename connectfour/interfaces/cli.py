"""
cli.py - Command-line interface for the Connect Four console game

This module provides the `play` command for an interactive game and the
`check` command for inspecting a board position given as text.
"""

import argparse
import sys
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.exceptions import InputExhaustedError, PositionFormatError
from connectfour.game.board import Board
from connectfour.game.controller import GameController
from connectfour.interfaces.console import ConsoleIO
from connectfour.utils import ROWS, COLS, Token

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BAD_POSITION = 2
EXIT_INTERRUPTED = 130


class ConsoleCLI:
    """Command-line interface for Connect Four."""

    def __init__(self, io=None):
        """Initialize the CLI."""
        self.io = io or ConsoleIO()
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four for the text console')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', help='Also write log records to this file')
        parser.add_argument('--components', nargs='*',
                            help='Only log these components (board, player, controller, cli)')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Seed for the computer player')

        check_parser = subparsers.add_parser('check', help='Inspect a board position')
        check_parser.add_argument('--position', required=True,
                                  help=f'{ROWS * COLS} cells row by row from the top '
                                       '(. or 0 empty, X or 1, O or 2)')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            level = DebugLevel.DEBUG
        else:
            level = DebugLevel[self.args.debug_level.upper()]
        debug.configure(level=level, log_file=self.args.log_file,
                        components=self.args.components)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the selected command and return the exit status."""
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'check':
            return self.check_position()

        self.io.write_line("Please specify a command. Use --help for options.")
        return EXIT_ERROR

    def play_game(self) -> int:
        """Play a Connect Four game interactively."""
        controller = GameController(self.io, seed=self.args.seed)
        try:
            session = controller.start_game()
        except InputExhaustedError:
            debug.error("Input ended before the game finished", "cli")
            self.io.write_line("No more input. Game aborted.")
            return EXIT_ERROR
        except KeyboardInterrupt:
            self.io.write_line()
            self.io.write_line("Game aborted.")
            return EXIT_INTERRUPTED

        debug.info(f"Finished: {session.result.name}, moves {session.moves}", "cli")
        return EXIT_OK

    def check_position(self) -> int:
        """Report wins, fullness and valid moves for a position."""
        try:
            board = Board.from_string(self.args.position)
        except PositionFormatError as e:
            self.io.write_line(f"Error parsing position: {e}")
            return EXIT_BAD_POSITION

        self.io.write_line("Loaded position:")
        for row in board.render():
            self.io.write_line(" ".join(row))
        self.io.write_line()

        winners = [token for token in (Token.ONE, Token.TWO) if board.check_win(token)]
        if winners:
            for token in winners:
                self.io.write_line(f"Four in a row for {token}")
        else:
            self.io.write_line("No four in a row")

        if board.is_board_full():
            self.io.write_line("Board is full")
        else:
            self.io.write_line(f"Empty cells: {ROWS * COLS - board.move_count}")
            self.io.write_line(f"Valid moves: {board.get_valid_moves()}")
        return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return ConsoleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
