"""Utility modules for linealign.

Provides:
- logger: get_logger for logging
- text: whitespace helpers shared by the lexer and formatter
"""

from linealign.utils.logger import get_logger
from linealign.utils.text import detect_line_ending, spaces

__all__ = [
    "detect_line_ending",
    "get_logger",
    "spaces",
]
