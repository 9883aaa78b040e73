"""Terminal colours and a small line-oriented console wrapper."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Color(str, Enum):
    """ANSI escape sequences used by the game."""

    RESET = "\033[0m"
    BLOOD_RED = "\033[91m"
    WARNING_YELL = "\033[93m"
    GREY = "\x1b[90m"
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    BRIGHT_WHITE = "\033[97m"


def paint(text: str, color: Color) -> str:
    """Wrap ``text`` in the escape code of ``color`` followed by a reset."""
    return f"{color.value}{text}{Color.RESET.value}"


class Console:
    """Reads player input and writes game output on a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as is and flush it."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and return the next line without its newline.

        Raises EOFError when the input is exhausted.
        """
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        """Read a line and parse it as an integer; raises ValueError if it is not one."""
        text = self.read_line(prompt).strip()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"not a number: {text!r}") from None

    def read_char(self, prompt: str = "") -> str:
        """Return the first non-blank character typed, skipping empty lines."""
        if prompt:
            self.write(prompt)
        while True:
            text = self.read_line().strip()
            if text:
                return text[0]

    def wait_for_enter(self, line: str) -> None:
        """Show ``line`` and wait until the player presses ENTER."""
        self.write(line + "\n")
        self.read_line(paint("Press ENTER to continue...", Color.GREY))

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.write("\033[2J\033[H")