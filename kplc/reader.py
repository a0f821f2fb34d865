"""Character reader that tracks line and column positions."""

from __future__ import annotations

import os

__all__ = ["Reader"]


class Reader:
    """Reads source text one character at a time.

    ``current_char`` holds the character just read, or ``None`` at end of
    input. ``line_no`` and ``col_no`` give its position; after a newline the
    column is reset to 0 and the line number is advanced.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.line_no = 1
        self.col_no = 0
        self.current_char: str | None = None
        self.read_char()

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "Reader":
        """Open ``path`` and return a reader over its contents."""
        with open(path, encoding="latin-1") as stream:
            return cls(stream.read())

    def read_char(self) -> str | None:
        """Advance to the next character and return it, or ``None`` at end."""
        if self._pos < len(self._text):
            self.current_char = self._text[self._pos]
            self._pos += 1
        else:
            self.current_char = None
        self.col_no += 1
        if self.current_char == "\n":
            self.line_no += 1
            self.col_no = 0
        return self.current_char