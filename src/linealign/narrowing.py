"""Range narrowing: which lines around the cursor align together.

Starting from an anchor line, the narrower grows a block of contiguous
lines upward and downward for as long as every line still shares at least
one significant token type with the rest of the block.

Boundaries of a block:
1. A line with no significant tokens (blank lines included)
2. A line with no significant type in common with the block so far
3. A line left unfinished by an open string or bracket (it stops the
   block from below, or closes the block from above)
4. With indentation pinned, a line indented differently from the anchor

Thread Safety:
All functions are pure. LineRangeInfo and LineRange are frozen.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from linealign.errors import SelectionError
from linealign.lexer import tokenize_line
from linealign.tokens import LineTokenInfo, Token, TokenType
from linealign.utils.logger import get_logger

if TYPE_CHECKING:
    from linealign.config import AlignConfig
    from linealign.profiles import LanguageProfile

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Selection:
    """A selected span of lines (0-indexed, inclusive).

    Attributes:
        start: First selected line
        end: Last selected line
        active: Line holding the cursor (defaults to start)

    """

    start: int
    end: int
    active: int | None = None

    @classmethod
    def at(cls, line: int) -> Selection:
        """A cursor on a single line."""
        return cls(line, line, line)

    @property
    def is_single_line(self) -> bool:
        return self.start == self.end

    @property
    def cursor(self) -> int:
        """The line holding the cursor."""
        return self.start if self.active is None else self.active

    def validate(self, line_count: int) -> None:
        """Check that the selection fits a document of line_count lines.

        Raises:
            SelectionError: If the selection is reversed or out of range.
        """
        if self.start > self.end:
            raise SelectionError("selection starts after it ends", self.start, self.end)
        if self.start < 0 or self.end >= line_count:
            raise SelectionError(
                f"selection outside document of {line_count} lines", self.start, self.end
            )
        if not self.start <= self.cursor <= self.end:
            raise SelectionError(f"cursor line {self.cursor} outside selection", self.start, self.end)


@dataclass(frozen=True, slots=True)
class LineRangeInfo:
    """One line taking part in a range.

    Attributes:
        line_number: Line index in the document (0-indexed)
        text: Original line text
        tokens: Tokens of the original text (never modified)
        significant_types: Alignable types found on the line
        anchor_type: Type the whole range aligns on (None if unresolved)

    """

    line_number: int
    text: str
    tokens: tuple[Token, ...]
    significant_types: tuple[TokenType, ...]
    anchor_type: TokenType | None = None

    @classmethod
    def from_line(
        cls, line_number: int, text: str, profile: LanguageProfile | None = None
    ) -> LineRangeInfo:
        """Tokenize a document line into a LineRangeInfo."""
        info: LineTokenInfo = tokenize_line(text, profile)
        return cls(line_number, text, info.tokens, info.significant_types)

    @property
    def is_partial(self) -> bool:
        return LineTokenInfo(self.tokens, self.significant_types).is_partial

    @property
    def indent(self) -> str:
        return LineTokenInfo(self.tokens, self.significant_types).indent


@dataclass(frozen=True, slots=True)
class LineRange:
    """A contiguous block of lines aligned as one unit.

    Attributes:
        anchor: Line the range was grown from
        infos: The lines, in document order

    """

    anchor: int
    infos: tuple[LineRangeInfo, ...]

    @property
    def start(self) -> int:
        return self.infos[0].line_number

    @property
    def end(self) -> int:
        return self.infos[-1].line_number

    @property
    def anchor_type(self) -> TokenType | None:
        return self.infos[0].anchor_type if self.infos else None

    def __len__(self) -> int:
        return len(self.infos)


def resolve_anchor_type(types: Sequence[TokenType]) -> TokenType | None:
    """Pick the anchor type from the types shared by a range.

    Assignment wins whenever it is shared; otherwise the first type in
    discovery order is used.
    """
    if TokenType.ASSIGNMENT in types:
        return TokenType.ASSIGNMENT
    return types[0] if types else None


def _intersect(current: Sequence[TokenType], other: Iterable[TokenType]) -> list[TokenType]:
    other_set = set(other)
    return [t for t in current if t in other_set]


def narrow(
    lines: Sequence[str],
    start: int,
    end: int,
    anchor: int,
    *,
    pin_indent: bool = False,
    profile: LanguageProfile | None = None,
) -> LineRange:
    """Grow the block of lines that align with the anchor line.

    Args:
        lines: Document lines without terminators
        start: First line the block may include
        end: Last line the block may include
        anchor: Line to grow from (start <= anchor <= end)
        pin_indent: Stop at lines indented differently from the anchor
        profile: Language profile for tokenization

    Returns:
        LineRange whose infos all carry the resolved anchor type. A single
        line range is returned when the anchor has nothing to align on or is
        itself unfinished.
    """
    anchor_info = LineRangeInfo.from_line(anchor, lines[anchor], profile)
    types = list(anchor_info.significant_types)

    if not types or anchor_info.is_partial:
        anchor_type = resolve_anchor_type(types)
        logger.debug("Line %d aligns alone (type %s)", anchor, anchor_type)
        return LineRange(anchor, (replace(anchor_info, anchor_type=anchor_type),))

    above: list[LineRangeInfo] = []
    i = anchor - 1
    while i >= start:
        info = LineRangeInfo.from_line(i, lines[i], profile)
        shared = _intersect(types, info.significant_types)
        if info.is_partial:
            logger.debug("Range above %d stops at unfinished line %d", anchor, i)
            break
        if not shared:
            logger.debug("Range above %d stops at dissimilar line %d", anchor, i)
            break
        if pin_indent and info.indent != anchor_info.indent:
            logger.debug("Range above %d stops at indentation change on line %d", anchor, i)
            break
        types = shared
        above.append(info)
        i -= 1

    below: list[LineRangeInfo] = []
    i = anchor + 1
    while i <= end:
        info = LineRangeInfo.from_line(i, lines[i], profile)
        shared = _intersect(types, info.significant_types)
        if not shared:
            logger.debug("Range below %d stops at dissimilar line %d", anchor, i)
            break
        if pin_indent and info.indent != anchor_info.indent:
            logger.debug("Range below %d stops at indentation change on line %d", anchor, i)
            break
        types = shared
        below.append(info)
        if info.is_partial:
            logger.debug("Range below %d closed by unfinished line %d", anchor, i)
            break
        i += 1

    anchor_type = resolve_anchor_type(types)
    infos = (*reversed(above), anchor_info, *below)
    logger.debug(
        "Range %d-%d around line %d aligns on %s",
        infos[0].line_number,
        infos[-1].line_number,
        anchor,
        anchor_type,
    )
    return LineRange(anchor, tuple(replace(info, anchor_type=anchor_type) for info in infos))


def line_ranges(
    lines: Sequence[str],
    selections: Iterable[Selection],
    config: AlignConfig,
    profile: LanguageProfile | None = None,
) -> list[LineRange]:
    """Compute the ranges to align for a set of selections.

    A single-line selection grows a range over the whole document around its
    cursor. A multi-line selection is cut into consecutive ranges that stay
    inside the selection. Ranges with nothing to align on are dropped.

    Args:
        lines: Document lines without terminators
        selections: Cursor positions or selected spans
        config: Alignment configuration (indent_base decides pinning)
        profile: Language profile for tokenization

    Returns:
        Ranges in selection order.

    Raises:
        SelectionError: If a selection does not fit the document.
    """
    ranges: list[LineRange] = []
    if not lines:
        return ranges

    pin_indent = config.pin_indent
    for selection in selections:
        selection.validate(len(lines))

        if selection.is_single_line:
            found = narrow(
                lines,
                0,
                len(lines) - 1,
                selection.cursor,
                pin_indent=pin_indent,
                profile=profile,
            )
            if found.anchor_type is not None:
                ranges.append(found)
            continue

        start = selection.start
        while True:
            found = narrow(
                lines,
                start,
                selection.end,
                start,
                pin_indent=pin_indent,
                profile=profile,
            )
            if found.anchor_type is not None:
                ranges.append(found)
            if found.end >= selection.end:
                break
            start = found.end + 1

    return ranges


__all__ = [
    "LineRange",
    "LineRangeInfo",
    "Selection",
    "line_ranges",
    "narrow",
    "resolve_anchor_type",
]
