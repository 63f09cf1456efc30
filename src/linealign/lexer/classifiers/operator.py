"""Operator classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linealign.lexer.charsets import ARROW
from linealign.tokens import TokenType

if TYPE_CHECKING:
    from linealign.lexer.charsets import ScanResult
    from linealign.profiles import LanguageProfile


class OperatorClassifierMixin:
    """Mixin providing arrow and operator classification."""

    _text: str
    _profile: LanguageProfile

    def _try_classify_arrow(self, pos: int) -> ScanResult | None:
        """Classify ``=>`` as ARROW."""
        if self._text.startswith(ARROW, pos):
            return TokenType.ARROW, pos + len(ARROW)
        return None

    def _try_classify_operator(self, pos: int) -> ScanResult | None:
        """Classify the longest profile operator starting at pos.

        Assignment and other operators compete on length, so ``===`` beats
        ``=`` whichever set it belongs to. On equal length the assignment
        operator wins. This departs from assignment-first matching, which
        would hide an other operator such as ``==`` behind ``=``.

        Returns:
            (ASSIGNMENT or OTHER_OPERATOR, end position) or None.
        """
        text = self._text
        best = 0
        best_type: TokenType | None = None

        for op in self._profile.assignment_operators:
            if len(op) > best and text.startswith(op, pos):
                best = len(op)
                best_type = TokenType.ASSIGNMENT

        for op in self._profile.other_operators:
            if len(op) > best and text.startswith(op, pos):
                best = len(op)
                best_type = TokenType.OTHER_OPERATOR

        if best_type is None:
            return None
        return best_type, pos + best
