"""
linealign — vertical alignment of source code lines

Lines up assignments, colons, arrows, commas and trailing comments across
a block of similar lines, while ignoring anything inside strings, comments
and brackets. Works on plain lists of strings; applying the edits to an
editor buffer is left to the caller.

Quick Start:
    >>> from linealign import align_lines
    >>> align_lines(["x = 1", "longer = 2"])
    ['x      = 1', 'longer = 2']

    >>> # Editor-style: compute edits for cursor positions
    >>> from linealign import align, Selection
    >>> lines = ["a: 1", "bbb: 2"]
    >>> align(lines, [Selection.at(0)])
    [Replacement(start=0, end=1, lines=('a  : 1', 'bbb: 2'))]

Pipeline:
    tokenize_line → narrow → ColumnAligner.format → Replacement
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from linealign.config import DEFAULT_CONFIG, AlignConfig, SurroundSpace
from linealign.errors import ConfigError, LineAlignError, ProfileError, SelectionError
from linealign.formatter import ColumnAligner, format_range
from linealign.lexer import LineLexer, tokenize_line
from linealign.narrowing import (
    LineRange,
    LineRangeInfo,
    Selection,
    line_ranges,
    narrow,
)
from linealign.profiles import LanguageProfile, builtin_profiles, get_profile
from linealign.tokens import LineTokenInfo, Token, TokenType, is_alignable
from linealign.utils.logger import get_logger
from linealign.utils.text import detect_line_ending

__version__ = "0.1.0"

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Replacement:
    """New text for a block of lines.

    Attributes:
        start: First replaced line (0-indexed)
        end: Last replaced line (inclusive)
        lines: Replacement lines, one per replaced line

    """

    start: int
    end: int
    lines: tuple[str, ...]


def _as_selection(selection: Selection | int) -> Selection:
    if isinstance(selection, Selection):
        return selection
    return Selection.at(selection)


def align(
    lines: Sequence[str],
    selections: Iterable[Selection | int],
    config: AlignConfig | None = None,
    profile: LanguageProfile | None = None,
) -> list[Replacement]:
    """Compute the edits that align the blocks under the given selections.

    Args:
        lines: Document lines without terminators
        selections: Selections, or bare line numbers for single cursors
        config: Alignment configuration (defaults if None)
        profile: Language profile (generic C-like profile if None)

    Returns:
        Non-overlapping replacements in selection order. Blocks that are
        already aligned produce no replacement.

    Raises:
        SelectionError: If a selection does not fit the document.

    Example:
        >>> align(["a = 1", "bb = 2"], [0])
        [Replacement(start=0, end=1, lines=('a  = 1', 'bb = 2'))]
    """
    config = config if config is not None else DEFAULT_CONFIG
    aligner = ColumnAligner(config)

    replacements: list[Replacement] = []
    taken: list[tuple[int, int]] = []
    for line_range in line_ranges(lines, [_as_selection(s) for s in selections], config, profile):
        if any(line_range.start <= end and start <= line_range.end for start, end in taken):
            logger.debug("Skipping range %d-%d: already aligned", line_range.start, line_range.end)
            continue
        taken.append((line_range.start, line_range.end))

        formatted = aligner.format(line_range)
        if not formatted:
            continue
        if formatted == [info.text for info in line_range.infos]:
            continue
        replacements.append(Replacement(line_range.start, line_range.end, tuple(formatted)))

    return replacements


def apply_replacements(lines: Sequence[str], replacements: Iterable[Replacement]) -> list[str]:
    """Apply replacements to a list of lines.

    Args:
        lines: Original lines
        replacements: Non-overlapping replacements, in any order

    Returns:
        New list of lines; the input is not modified.
    """
    result = list(lines)
    for replacement in sorted(replacements, key=lambda r: r.start, reverse=True):
        result[replacement.start : replacement.end + 1] = replacement.lines
    return result


def align_lines(
    lines: Sequence[str],
    line: int | None = None,
    config: AlignConfig | None = None,
    profile: LanguageProfile | None = None,
) -> list[str]:
    """Align lines and return the updated list.

    Args:
        lines: Document lines without terminators
        line: Cursor line; the block around it is aligned. None aligns every
            block of the document.
        config: Alignment configuration (defaults if None)
        profile: Language profile (generic C-like profile if None)

    Returns:
        New list of lines.
    """
    if not lines:
        return []
    if line is None:
        selection = Selection(0, len(lines) - 1)
    else:
        selection = Selection.at(line)
    return apply_replacements(lines, align(lines, [selection], config, profile))


def align_text(
    text: str,
    line: int | None = None,
    config: AlignConfig | None = None,
    profile: LanguageProfile | None = None,
) -> str:
    """Align a whole document given as a string.

    The document's own line ending (LF or CRLF) and final newline are kept.

    Args:
        text: Document text
        line: Cursor line, or None to align every block
        config: Alignment configuration (defaults if None)
        profile: Language profile (generic C-like profile if None)

    Returns:
        Aligned document text.
    """
    eol = detect_line_ending(text)
    lines = text.split(eol)
    trailer = ""
    if text.endswith(eol):
        lines.pop()
        trailer = eol
    aligned = align_lines(lines, line, config, profile)
    return eol.join(aligned) + trailer


__all__ = [
    # Main API
    "align",
    "align_lines",
    "align_text",
    "apply_replacements",
    "Replacement",
    "Selection",
    # Configuration
    "AlignConfig",
    "DEFAULT_CONFIG",
    "SurroundSpace",
    # Profiles
    "LanguageProfile",
    "builtin_profiles",
    "get_profile",
    # Pipeline stages
    "ColumnAligner",
    "LineLexer",
    "LineRange",
    "LineRangeInfo",
    "LineTokenInfo",
    "Token",
    "TokenType",
    "format_range",
    "is_alignable",
    "line_ranges",
    "narrow",
    "tokenize_line",
    # Errors
    "ConfigError",
    "LineAlignError",
    "ProfileError",
    "SelectionError",
]
