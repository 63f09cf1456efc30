"""Bracket scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linealign.lexer.charsets import BRACKET_PAIRS, CLOSING_BRACKETS, is_escaped
from linealign.tokens import TokenType

if TYPE_CHECKING:
    from linealign.lexer.charsets import ScanResult


class BracketScannerMixin:
    """Mixin providing bracketed region scanning.

    A bracketed region is opaque to alignment: the opening bracket, its
    contents and the matching close form one BLOCK token.
    """

    _text: str
    _len: int

    def _try_scan_block(self, pos: int) -> ScanResult | None:
        """Try to scan a bracketed region opened at pos.

        Only brackets of the same kind are counted for nesting. Escaped
        closing brackets are ignored. Without a match at depth zero the
        region is PARTIAL_BLOCK and takes the rest of the line.

        Returns:
            (BLOCK or PARTIAL_BLOCK, end position) or None.
        """
        opener = self._text[pos]
        closer = BRACKET_PAIRS.get(opener)
        if closer is None:
            return None

        text = self._text
        depth = 1
        i = pos + 1
        while i < self._len:
            char = text[i]
            if char == opener:
                depth += 1
            elif char == closer and not is_escaped(text, i):
                depth -= 1
                if depth == 0:
                    return TokenType.BLOCK, i + 1
            i += 1

        return TokenType.PARTIAL_BLOCK, self._len

    def _try_scan_block_end(self, pos: int) -> ScanResult | None:
        """Classify a closing bracket with no opener on this line.

        Matched closers are consumed by _try_scan_block, so any closer the
        main loop reaches is unbalanced.

        Returns:
            (END_OF_BLOCK, pos + 1) or None.
        """
        if self._text[pos] in CLOSING_BRACKETS:
            return TokenType.END_OF_BLOCK, pos + 1
        return None
