"""Single-line lexer for linealign.

This package provides a lexer that splits one line of source into typed
tokens covering every character, while treating strings, comments and
bracketed regions as opaque.

Architecture:
lexer/
├── __init__.py          # Re-exports LineLexer, tokenize_line
├── core.py              # LineLexer class (mixin composition + commit)
├── charsets.py          # Bracket pairs, escape handling
├── scanners/            # Opaque region scanners
│   ├── comment.py       # Line and block comments
│   ├── string.py        # String literals
│   └── bracket.py       # Bracketed blocks, unbalanced closers
└── classifiers/         # Short lexeme classifiers
    ├── operator.py      # Arrow, assignment and other operators
    └── punctuation.py   # Colon, comma, word pieces

Usage:
    >>> from linealign.lexer import tokenize_line
    >>> for token in tokenize_line("x = {a: 1}").tokens:
    ...     print(token)
    Token(WORD, 'x')
    Token(WHITESPACE, ' ')
    Token(ASSIGNMENT, '=')
    Token(WHITESPACE, ' ')
    Token(BLOCK, '{a: 1}')

"""

from linealign.lexer.core import LineLexer, tokenize_line

__all__ = ["LineLexer", "tokenize_line"]
