"""Token-based console input.

Reads behave like C ``scanf``: a prompt is printed, then the next
whitespace-separated token is taken from the current line, reading a new
line only when the current one is used up. Typing ``1 3 4`` on one line
therefore answers three prompts in a row.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Optional, TextIO, TypeVar

from rich.console import Console

from toybox.errors import InputClosed

T = TypeVar("T")


class Prompter:
    """Prompt on a rich Console and read tokens from a text stream."""

    def __init__(self, console: Console, stream: Optional[TextIO] = None) -> None:
        self.console = console
        self._stream = stream
        self._pending: deque[str] = deque()

    @property
    def stream(self) -> TextIO:
        # Resolved per read so a replaced sys.stdin is picked up.
        return self._stream if self._stream is not None else sys.stdin

    def prompt(self, text: str) -> None:
        self.console.print(text, end="")

    def next_token(self) -> str:
        """Return the next token, reading more lines as needed.

        Raises:
            InputClosed: the stream hit end of file.
        """
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise InputClosed("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def ask(self, text: str, convert: Callable[[str], T]) -> Optional[T]:
        """Prompt with ``text`` and convert the next token.

        Returns None when ``convert`` rejects the token with ValueError;
        the caller decides whether to discard the rest of the line.
        """
        self.prompt(text)
        token = self.next_token()
        try:
            return convert(token)
        except ValueError:
            return None

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending.clear()
