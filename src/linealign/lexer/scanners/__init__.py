"""Region scanners for the linealign lexer.

Each scanner is a mixin that recognizes one opaque region (comment,
string, bracketed block) starting at the scan position and reports where
it ends. Scanners never move the lexer position; the core commits it.
"""

from linealign.lexer.scanners.bracket import BracketScannerMixin
from linealign.lexer.scanners.comment import CommentScannerMixin
from linealign.lexer.scanners.string import StringScannerMixin

__all__ = [
    "BracketScannerMixin",
    "CommentScannerMixin",
    "StringScannerMixin",
]
