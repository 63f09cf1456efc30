"""Text helpers for linealign.

Example:
    >>> from linealign.utils.text import spaces, detect_line_ending
    >>> spaces(3)
    '   '
    >>> detect_line_ending("a = 1\\r\\nb = 2")
    '\\r\\n'
"""

from __future__ import annotations


def spaces(count: int) -> str:
    """Return a run of ``count`` spaces (empty for zero or negative counts)."""
    return " " * count if count > 0 else ""


def detect_line_ending(text: str) -> str:
    """Detect the line ending used by a document.

    Args:
        text: Document text

    Returns:
        "\\r\\n" if the first line break is CRLF, otherwise "\\n".
    """
    idx = text.find("\n")
    if idx > 0 and text[idx - 1] == "\r":
        return "\r\n"
    return "\n"
