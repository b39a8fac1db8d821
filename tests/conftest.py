from typing import List

import pytest

from connectfour.exceptions import InputExhaustedError

# Alternating rows with no four in a row anywhere; 21 tokens of each kind.
ROW_A = "XXOOXXO"
ROW_B = "OOXXOOX"
DRAW_POSITION = (ROW_A + ROW_B) * 3


class ScriptedIO:
    """Feeds canned input lines and records everything written."""

    def __init__(self, lines=()):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise InputExhaustedError("script finished")
        return self.lines.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.append(text)


@pytest.fixture
def scripted_io():
    return ScriptedIO
