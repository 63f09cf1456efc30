"""Lexeme classifiers for the linealign lexer.

Each classifier is a mixin that decides whether the text at the scan
position is a particular short lexeme (operator, colon, comma, word
piece). Classifiers are pure functions of the line and the profile.
"""

from linealign.lexer.classifiers.operator import OperatorClassifierMixin
from linealign.lexer.classifiers.punctuation import PunctuationClassifierMixin

__all__ = [
    "OperatorClassifierMixin",
    "PunctuationClassifierMixin",
]
