"""Character sets and small helpers shared by the lexer mixins."""

from __future__ import annotations

from typing import TypeAlias

from linealign.tokens import TokenType

# Result of a scanner or classifier: token type and exclusive end position
ScanResult: TypeAlias = tuple[TokenType, int]

BRACKET_PAIRS = {
    "{": "}",
    "[": "]",
    "(": ")",
}

OPENING_BRACKETS = frozenset(BRACKET_PAIRS)
CLOSING_BRACKETS = frozenset(BRACKET_PAIRS.values())

ARROW = "=>"
DOUBLE_COLON = "::"
COMMA = ","
ESCAPE = "\\"


def is_escaped(text: str, pos: int) -> bool:
    """Return True if the character at ``pos`` is escaped by a backslash.

    A character is escaped when an odd number of backslashes directly
    precede it, so ``\\"`` is an escaped quote while ``\\\\"`` is an
    escaped backslash followed by a real quote.

    Args:
        text: Line text
        pos: Index of the character to test

    Returns:
        True if the character is escaped.
    """
    count = 0
    i = pos - 1
    while i >= 0 and text[i] == ESCAPE:
        count += 1
        i -= 1
    return count % 2 == 1
