"""Line-oriented reading of menu choices and names from a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

_BLANKS = (" ", "\t", "\n")


class Console:
    """Reads user input character by character and writes prompts."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending: str | None = None

    def _getc(self) -> str:
        if self._pending is not None:
            ch, self._pending = self._pending, None
            return ch
        return self.stdin.read(1)

    def _ungetc(self, ch: str) -> None:
        if ch:
            self._pending = ch

    def write(self, text: str) -> None:
        """Write ``text`` and flush it."""
        self.stdout.write(text)
        self.stdout.flush()

    def clear_input(self) -> None:
        """Discard everything up to and including the next newline."""
        ch = self._getc()
        while ch and ch != "\n":
            ch = self._getc()

    def read_char(self) -> str:
        """Return the next non-blank character and discard the rest of its line.

        Raises EOFError when the input runs out first.
        """
        ch = self._getc()
        while ch and ch.isspace():
            ch = self._getc()
        if not ch:
            raise EOFError("no input")
        self.clear_input()
        return ch

    def _read_upto(self, ch: str, max_size: int) -> str:
        chars = []
        while ch and ch != "\n" and len(chars) < max_size - 1:
            chars.append(ch)
            ch = self._getc()
        if ch and ch != "\n":
            self.clear_input()
        return "".join(chars)

    def read_string(self, max_size: int) -> str:
        """Read a line after skipping leading blanks, keeping at most ``max_size - 1`` characters."""
        ch = self._getc()
        while ch in _BLANKS and ch:
            ch = self._getc()
        return self._read_upto(ch, max_size)

    def read_line(self, max_size: int) -> str:
        """Read a line as typed, keeping at most ``max_size - 1`` characters."""
        return self._read_upto(self._getc(), max_size)

    def read_int(self) -> int:
        """Read a whole number, leaving what follows it unread.

        Input that is not a number is discarded up to the end of the line and
        0 is returned. Raises EOFError when the input runs out first.
        """
        ch = self._getc()
        while ch and ch.isspace():
            ch = self._getc()
        if not ch:
            raise EOFError("no input")
        sign = ""
        if ch in "+-":
            sign = ch
            ch = self._getc()
        digits = []
        while ch and ch in "0123456789":
            digits.append(ch)
            ch = self._getc()
        if not digits:
            if ch != "\n":
                self.clear_input()
            return 0
        self._ungetc(ch)
        return int(sign + "".join(digits))