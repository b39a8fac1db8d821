import numpy as np
import pytest

from connectfour.exceptions import GameOverError, InputExhaustedError
from connectfour.game.board import Board
from connectfour.game.players import ComputerPlayer, HumanPlayer, Player
from connectfour.utils import COLS, Token

from conftest import DRAW_POSITION, ScriptedIO

COLUMN_4_OPEN = "".join(
    "." if i % COLS == 4 else ch for i, ch in enumerate(DRAW_POSITION))


def test_player_identity_is_read_only():
    player = HumanPlayer("Ada", Token.ONE, ScriptedIO())
    assert player.name == "Ada"
    assert player.token == Token.ONE
    with pytest.raises(AttributeError):
        player.name = "Bob"


def test_player_needs_a_real_token():
    with pytest.raises(ValueError):
        ComputerPlayer(Token.EMPTY)


def test_player_base_is_abstract():
    with pytest.raises(TypeError):
        Player("nobody", Token.ONE)


def test_human_returns_valid_column():
    io = ScriptedIO(["3"])
    assert HumanPlayer("Ada", Token.ONE, io).choose_column(Board()) == 3
    assert io.prompts == ["Ada, enter a column (0-6): "]
    assert io.output == []


def test_human_reprompts_silently_on_unparseable_input():
    io = ScriptedIO(["abc", "", "2.5", " 5 "])
    assert HumanPlayer("Ada", Token.ONE, io).choose_column(Board()) == 5
    assert len(io.prompts) == 4
    assert io.output == []


@pytest.mark.parametrize("bad", ["7", "-1", "42"])
def test_human_reprompts_with_message_when_out_of_range(bad):
    io = ScriptedIO([bad, "0"])
    assert HumanPlayer("Ada", Token.ONE, io).choose_column(Board()) == 0
    assert io.output == ["Invalid column. Please choose a column between 0 and 6."]


def test_human_reprompts_with_message_on_full_column():
    board = Board()
    for _ in range(6):
        board.place(1, Token.TWO)
    io = ScriptedIO(["1", "x", "6"])
    assert HumanPlayer("Ada", Token.ONE, io).choose_column(board) == 6
    assert io.output == ["Column 1 is full. Please choose another column."]


def test_human_does_not_touch_the_board():
    board = Board()
    HumanPlayer("Ada", Token.ONE, ScriptedIO(["4"])).choose_column(board)
    assert board.move_count == 0


def test_human_input_exhaustion_is_fatal():
    io = ScriptedIO(["nope"])
    with pytest.raises(InputExhaustedError):
        HumanPlayer("Ada", Token.ONE, io).choose_column(Board())


def test_computer_only_picks_the_open_column():
    board = Board.from_string(COLUMN_4_OPEN)
    assert board.get_valid_moves() == [4]
    computer = ComputerPlayer(Token.TWO, seed=0)
    for _ in range(50):
        assert computer.choose_column(board) == 4


def test_computer_never_picks_a_full_column():
    board = Board()
    for col in (0, 2, 5):
        for _ in range(6):
            board.place(col, Token.ONE)
    computer = ComputerPlayer(Token.TWO, seed=123)
    picks = {computer.choose_column(board) for _ in range(200)}
    assert picks <= {1, 3, 4, 6}
    assert picks == {1, 3, 4, 6}


def test_computer_is_deterministic_for_a_seed():
    board = Board()
    first = ComputerPlayer(Token.TWO, seed=99)
    second = ComputerPlayer(Token.TWO, rng=np.random.default_rng(99))
    assert [first.choose_column(board) for _ in range(20)] == \
        [second.choose_column(board) for _ in range(20)]


def test_computer_default_name():
    assert ComputerPlayer(Token.TWO).name == "Computer"


def test_computer_on_full_board_raises():
    board = Board.from_string(DRAW_POSITION)
    with pytest.raises(GameOverError):
        ComputerPlayer(Token.ONE, seed=1).choose_column(board)
