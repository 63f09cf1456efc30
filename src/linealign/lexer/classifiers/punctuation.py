"""Colon, comma and word classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linealign.lexer.charsets import COMMA, DOUBLE_COLON
from linealign.tokens import TokenType

if TYPE_CHECKING:
    from linealign.lexer.charsets import ScanResult
    from linealign.profiles import LanguageProfile


class PunctuationClassifierMixin:
    """Mixin providing colon, comma and word classification."""

    _text: str
    _len: int
    _profile: LanguageProfile

    def _try_classify_colon(self, pos: int) -> ScanResult | None:
        """Classify a colon lexeme (``:`` or ``?:``) at pos.

        A lexeme ending in ``:`` that is directly followed by another ``:``
        is rejected, so ``self::FOO`` never yields a COLON.

        Returns:
            (COLON, end position) or None.
        """
        text = self._text
        best = 0
        for op in self._profile.colon_operators:
            if len(op) <= best or not text.startswith(op, pos):
                continue
            end = pos + len(op)
            if op.endswith(":") and end < self._len and text[end] == ":":
                continue
            best = len(op)

        if best == 0:
            return None
        return TokenType.COLON, pos + best

    def _try_classify_comma(self, pos: int) -> ScanResult | None:
        """Classify ``,`` as COMMA.

        Comma-first retagging needs the preceding tokens, so the core does it
        when the token is committed.
        """
        if self._text[pos] == COMMA:
            return TokenType.COMMA, pos + 1
        return None

    def _classify_word(self, pos: int) -> ScanResult:
        """Classify one word piece at pos.

        ``::`` is taken as a single piece so its second colon is never
        looked at on its own. The core merges adjacent word pieces.

        Returns:
            (WORD, end position), always at least one character long.
        """
        if self._text.startswith(DOUBLE_COLON, pos):
            return TokenType.WORD, pos + len(DOUBLE_COLON)
        return TokenType.WORD, pos + 1
