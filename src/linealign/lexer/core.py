"""Single-line lexer with guaranteed forward progress.

Each step classifies the text at the cursor (pure logic, no position
change), then commits the cursor to the reported end. A commit always
advances at least one character, so the scan finishes in at most
``len(line)`` steps whatever the profile patterns do.

Thread Safety:
LineLexer instances are single-use. Create one per line.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linealign.lexer.classifiers import (
    OperatorClassifierMixin,
    PunctuationClassifierMixin,
)
from linealign.lexer.scanners import (
    BracketScannerMixin,
    CommentScannerMixin,
    StringScannerMixin,
)
from linealign.profiles import GENERIC_PROFILE
from linealign.tokens import LineTokenInfo, Token, TokenType, is_alignable

if TYPE_CHECKING:
    from linealign.lexer.charsets import ScanResult
    from linealign.profiles import LanguageProfile


class LineLexer(
    # Scanners (opaque regions)
    CommentScannerMixin,
    StringScannerMixin,
    BracketScannerMixin,
    # Classifiers (short lexemes)
    OperatorClassifierMixin,
    PunctuationClassifierMixin,
):
    """Lexer for one line of source code.

    Classification order at each position:
    1. Whitespace run
    2. Line comment
    3. Block comment
    4. String literal
    5. Bracketed block
    6. Unbalanced closing bracket
    7. Arrow ``=>``
    8. Assignment / other operator (longest match)
    9. Colon
    10. Comma
    11. Word piece

    Usage:
        >>> info = LineLexer("x = 1  // one").tokenize()
        >>> [t.type.name for t in info.tokens]
        ['WORD', 'WHITESPACE', 'ASSIGNMENT', 'WHITESPACE', 'WORD', 'WHITESPACE', 'COMMENT']
        >>> [t.name for t in info.significant_types]
        ['ASSIGNMENT', 'COMMENT']

    Thread Safety:
        LineLexer instances are single-use. Create one per line.

    """

    __slots__ = (
        "_text",
        "_len",  # Cached len(text)
        "_pos",
        "_profile",
        "_tokens",
        "_significant",
    )

    def __init__(self, text: str, profile: LanguageProfile | None = None) -> None:
        """Initialize lexer with line text.

        Args:
            text: Line text, without its line terminator
            profile: Language profile (generic C-like profile if None)
        """
        self._text = text
        self._len = len(text)
        self._pos = 0
        self._profile = profile if profile is not None else GENERIC_PROFILE
        self._tokens: list[Token] = []
        self._significant: list[TokenType] = []

    def tokenize(self) -> LineTokenInfo:
        """Tokenize the line.

        Returns:
            LineTokenInfo whose token texts join back to the line.

        Complexity: O(n) steps where n = len(text)
        """
        while self._pos < self._len:
            token_type, end = self._classify(self._pos)
            self._commit(token_type, end)
        return LineTokenInfo(tuple(self._tokens), tuple(self._significant))

    def _classify(self, pos: int) -> ScanResult:
        """Classify the text at pos without moving the cursor."""
        if self._text[pos].isspace():
            return TokenType.WHITESPACE, self._scan_whitespace(pos)

        for attempt in (
            self._try_scan_line_comment,
            self._try_scan_block_comment,
            self._try_scan_string,
            self._try_scan_block,
            self._try_scan_block_end,
            self._try_classify_arrow,
            self._try_classify_operator,
            self._try_classify_colon,
            self._try_classify_comma,
        ):
            result = attempt(pos)
            if result is not None:
                return result

        return self._classify_word(pos)

    def _scan_whitespace(self, pos: int) -> int:
        """Find the end of the whitespace run starting at pos."""
        text = self._text
        end = pos + 1
        while end < self._len and text[end].isspace():
            end += 1
        return end

    def _commit(self, token_type: TokenType, end: int) -> None:
        """Emit a token for text[pos:end] and advance the cursor.

        Enforces a minimum step of one character. Adjacent word pieces are
        merged into a single WORD token.
        """
        end = min(max(end, self._pos + 1), self._len)
        text = self._text[self._pos : end]
        self._pos = end

        tokens = self._tokens
        if token_type is TokenType.WORD and tokens and tokens[-1].type is TokenType.WORD:
            tokens[-1] = Token(TokenType.WORD, tokens[-1].text + text)
            return

        if token_type is TokenType.COMMA and self._profile.comma_first and self._at_line_start():
            token_type = TokenType.COMMA_AS_WORD

        tokens.append(Token(token_type, text))
        if is_alignable(token_type) and token_type not in self._significant:
            self._significant.append(token_type)

    def _at_line_start(self) -> bool:
        """True if only whitespace has been emitted so far."""
        return all(t.type is TokenType.WHITESPACE for t in self._tokens)


def tokenize_line(text: str, profile: LanguageProfile | None = None) -> LineTokenInfo:
    """Tokenize one line of source.

    Args:
        text: Line text, without its line terminator
        profile: Language profile (generic C-like profile if None)

    Returns:
        LineTokenInfo with tokens and significant types.

    Example:
        >>> tokenize_line("a, b").text
        'a, b'
    """
    return LineLexer(text, profile).tokenize()
