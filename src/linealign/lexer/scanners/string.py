"""String literal scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linealign.lexer.charsets import is_escaped
from linealign.tokens import TokenType

if TYPE_CHECKING:
    from linealign.lexer.charsets import ScanResult
    from linealign.profiles import LanguageProfile


class StringScannerMixin:
    """Mixin providing string literal scanning."""

    _text: str
    _len: int
    _profile: LanguageProfile

    def _try_scan_string(self, pos: int) -> ScanResult | None:
        """Try to scan a string literal opened at pos.

        Looks for the same delimiter, skipping escaped ones. A string with no
        closing delimiter on this line becomes PARTIAL_STRING and takes the
        rest of the line.

        Returns:
            (STRING or PARTIAL_STRING, end position) or None.
        """
        quote = self._text[pos]
        if quote not in self._profile.string_delimiters:
            return None

        text = self._text
        idx = text.find(quote, pos + 1)
        while idx != -1:
            if not is_escaped(text, idx):
                return TokenType.STRING, idx + 1
            idx = text.find(quote, idx + 1)

        return TokenType.PARTIAL_STRING, self._len
