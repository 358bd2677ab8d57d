"""
Console user interface.
"""

import sys
from typing import Optional, TextIO

from .core.interfaces import Ui


def _console_supports_utf8(stream: TextIO) -> bool:
    try:
        enc = getattr(stream, "encoding", None)
        return enc is not None and "utf" in enc.lower()
    except Exception:
        return False


DIVIDER = "_" * 60
WELCOME_MESSAGE = "Welcome to TAA, your Teaching Assistant Assistant!\nType 'help' to see all commands."
PROMPT = "> "


class ConsoleUi(Ui):
    """Prints framed messages to stdout and reads commands from stdin."""

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self._input = input_stream or sys.stdin
        self._output = output_stream or sys.stdout
        self._error_char = "✗" if _console_supports_utf8(self._output) else "[ERROR]"

    def print_message(self, message: str) -> None:
        print(DIVIDER, file=self._output)
        print(message, file=self._output)
        print(DIVIDER, file=self._output)

    def print_error(self, message: str) -> None:
        self.print_message(f"{self._error_char} {message}")

    def print_welcome(self) -> None:
        self.print_message(WELCOME_MESSAGE)

    def read_command(self) -> Optional[str]:
        """Read one line of input. Returns None at end of input."""
        if self._input is sys.stdin and self._input.isatty():
            print(PROMPT, end="", file=self._output, flush=True)
        line = self._input.readline()
        if not line:
            return None
        return line.rstrip("\n")
