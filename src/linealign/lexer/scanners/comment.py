"""Comment scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linealign.tokens import TokenType

if TYPE_CHECKING:
    from linealign.lexer.charsets import ScanResult
    from linealign.profiles import LanguageProfile


class CommentScannerMixin:
    """Mixin providing line and block comment scanning.

    Comments are opaque: anything inside them, operators included, belongs
    to the single COMMENT token.
    """

    _text: str
    _len: int
    _profile: LanguageProfile

    def _try_scan_line_comment(self, pos: int) -> ScanResult | None:
        """Try to scan a line comment starting at pos.

        A line comment consumes the rest of the line. With the profile's
        url_guard set, a comment start directly after ``:`` is rejected so
        ``http://example.com`` stays code.

        Returns:
            (COMMENT, line length) or None.
        """
        pattern = self._profile.line_comment_re
        if pattern is None or pattern.match(self._text, pos) is None:
            return None
        if self._profile.url_guard and pos > 0 and self._text[pos - 1] == ":":
            return None
        return TokenType.COMMENT, self._len

    def _try_scan_block_comment(self, pos: int) -> ScanResult | None:
        """Try to scan a block comment starting at pos.

        An unclosed block comment runs to the end of the line. It is still a
        plain COMMENT, never a partial token.

        Returns:
            (COMMENT, end position) or None.
        """
        start = self._profile.block_comment_start_re
        if start is None:
            return None
        match = start.match(self._text, pos)
        if match is None:
            return None

        end = self._profile.block_comment_end_re
        close = end.search(self._text, match.end()) if end is not None else None
        if close is None:
            return TokenType.COMMENT, self._len
        return TokenType.COMMENT, close.end()
