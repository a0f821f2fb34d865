"""Character classes used by the scanner."""

from __future__ import annotations

from enum import Enum

__all__ = ["CharCode", "char_code"]


class CharCode(Enum):
    """Lexical class of a single source character."""

    SPACE = "space"
    LETTER = "letter"
    DIGIT = "digit"
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    SLASH = "slash"
    LT = "lt"
    GT = "gt"
    EXCLAMATION = "exclamation"
    EQ = "eq"
    COMMA = "comma"
    PERIOD = "period"
    COLON = "colon"
    SEMICOLON = "semicolon"
    SINGLEQUOTE = "singlequote"
    LPAR = "lpar"
    RPAR = "rpar"
    UNKNOWN = "unknown"


def _build_table() -> dict[str, CharCode]:
    table: dict[str, CharCode] = {}
    for code in range(9, 14):
        table[chr(code)] = CharCode.SPACE
    table[" "] = CharCode.SPACE
    for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        table[ch] = CharCode.LETTER
        table[ch.lower()] = CharCode.LETTER
    for ch in "0123456789":
        table[ch] = CharCode.DIGIT
    table.update(
        {
            "!": CharCode.EXCLAMATION,
            "'": CharCode.SINGLEQUOTE,
            "(": CharCode.LPAR,
            ")": CharCode.RPAR,
            "*": CharCode.TIMES,
            "+": CharCode.PLUS,
            ",": CharCode.COMMA,
            "-": CharCode.MINUS,
            ".": CharCode.PERIOD,
            "/": CharCode.SLASH,
            ":": CharCode.COLON,
            ";": CharCode.SEMICOLON,
            "<": CharCode.LT,
            "=": CharCode.EQ,
            ">": CharCode.GT,
        }
    )
    return table


_TABLE = _build_table()


def char_code(ch: str) -> CharCode:
    """Return the lexical class of the single character ``ch``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _TABLE.get(ch, CharCode.UNKNOWN)