"""Token and TokenType definitions for the linealign lexer.

The lexer turns one line of source into an ordered tuple of Token objects.
Every character of the line belongs to exactly one token, so joining the
token texts gives back the original line.

Thread Safety:
Token and LineTokenInfo are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Alignment anchors (assignment, arrow, colon, other operators, comments)
    - Separators (comma, leading comma)
    - Opaque regions (brackets, strings)
    - Filler (words, whitespace, formatter insertions)

    Values are the names used in ``surround_space`` configuration.

    """

    # Alignment anchors
    ASSIGNMENT = "assignment"  # = += := ...
    OTHER_OPERATOR = "other_operator"  # profile-defined operators
    ARROW = "arrow"  # =>
    COLON = "colon"  # : ?:
    COMMENT = "comment"  # // ... or /* ... */

    # Separators
    COMMA = "comma"
    COMMA_AS_WORD = "comma_as_word"  # Comma-first style

    # Opaque regions
    BLOCK = "block"  # {} [] ()
    PARTIAL_BLOCK = "partial_block"  # { [ ( without a close on this line
    END_OF_BLOCK = "end_of_block"  # } ] ) without an open on this line
    STRING = "string"
    PARTIAL_STRING = "partial_string"

    # Filler
    WORD = "word"
    WHITESPACE = "whitespace"
    INSERTION = "insertion"  # Padding added by the formatter


ALIGNABLE_TYPES = frozenset(
    {
        TokenType.ASSIGNMENT,
        TokenType.COLON,
        TokenType.ARROW,
        TokenType.COMMENT,
        TokenType.OTHER_OPERATOR,
    }
)

# Tokens that leave the line in an unfinished state
PARTIAL_TYPES = frozenset(
    {
        TokenType.PARTIAL_BLOCK,
        TokenType.PARTIAL_STRING,
        TokenType.END_OF_BLOCK,
    }
)


def is_alignable(token_type: TokenType | None) -> bool:
    """Return True if tokens of this type may anchor vertical alignment."""
    return token_type in ALIGNABLE_TYPES


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        text: The exact source text covered by the token

    """

    type: TokenType
    text: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"

    @property
    def width(self) -> int:
        """Rendered width of the token in columns."""
        return len(self.text)


@dataclass(frozen=True, slots=True)
class LineTokenInfo:
    """Tokenization result for a single line.

    Attributes:
        tokens: Ordered tokens covering the whole line
        significant_types: Alignable token types, deduplicated, in the
            order they were first seen

    """

    tokens: tuple[Token, ...]
    significant_types: tuple[TokenType, ...]

    @property
    def text(self) -> str:
        """The line text rebuilt from its tokens."""
        return "".join(t.text for t in self.tokens)

    @property
    def is_partial(self) -> bool:
        """True if the line ends inside a string or has unbalanced brackets."""
        return any(t.type in PARTIAL_TYPES for t in self.tokens)

    @property
    def indent(self) -> str:
        """Leading whitespace of the line ("" when there is none)."""
        if self.tokens and self.tokens[0].type is TokenType.WHITESPACE:
            return self.tokens[0].text
        return ""


__all__ = [
    "ALIGNABLE_TYPES",
    "PARTIAL_TYPES",
    "LineTokenInfo",
    "Token",
    "TokenType",
    "is_alignable",
]
