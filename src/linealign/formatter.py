"""Column alignment of a narrowed line range.

Rendering is a pipeline of pure stages. Each stage takes the rows produced
by the previous one and returns new rows; the tokens recorded on the
LineRange are never modified.

Stages:
1. Indentation: strip leading/trailing whitespace, pick the shared prefix
2. First words: line up ``x = 1`` with ``var x = 1``
3. Operator spacing: drop whitespace around anchors and inner commas
4. Columns: pad each line, pass by pass, up to the next anchor or comma
5. Trailing comments: line comments up after the widest code

Thread Safety:
ColumnAligner holds only its frozen config. All per-call state is local,
so one instance can format ranges from several threads.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from linealign.config import DEFAULT_CONFIG, AlignConfig
from linealign.narrowing import LineRange, LineRangeInfo
from linealign.tokens import Token, TokenType
from linealign.utils.text import spaces

SINGLE_SPACE = Token(TokenType.INSERTION, " ")


@dataclass(frozen=True, slots=True)
class _Row:
    """Working copy of one line between stages.

    Attributes:
        indent: Literal indentation kept after the shared prefix
        tokens: Tokens still to render

    """

    indent: str
    tokens: tuple[Token, ...]

    @property
    def is_comment_only(self) -> bool:
        return len(self.tokens) == 1 and self.tokens[0].type is TokenType.COMMENT


def _is_stop(token: Token, index: int, anchor_type: TokenType | None) -> bool:
    """True if the token starts a new column: an anchor or a non-leading comma."""
    if token.type is TokenType.COMMA:
        return index != 0
    return anchor_type is not None and token.type is anchor_type


def _scan_end(tokens: Sequence[Token]) -> int:
    """Index where column scanning stops (before a trailing comment)."""
    size = len(tokens)
    if size and tokens[-1].type is TokenType.COMMENT:
        if size > 1 and tokens[-2].type is TokenType.WHITESPACE:
            return size - 2
        return size - 1
    return size


def _word_groups(tokens: Sequence[Token], anchor_type: TokenType | None) -> list[int] | None:
    """Split the text before the anchor into whitespace-separated groups.

    Returns the end index of each group that counts as a word, or None if
    the line has no anchor token. Groups made only of bracketed blocks do
    not count, and a leading comma is always a group of its own.
    """
    groups: list[int] = []
    in_group = False
    counts = False
    for i, token in enumerate(tokens):
        if anchor_type is not None and token.type is anchor_type:
            if in_group and counts:
                groups.append(i)
            return groups
        if token.type in (TokenType.WHITESPACE, TokenType.INSERTION):
            if in_group and counts:
                groups.append(i)
            in_group = counts = False
            continue
        if token.type is TokenType.COMMA_AS_WORD and i == 0:
            groups.append(1)
            continue
        in_group = True
        counts = counts or token.type is not TokenType.BLOCK
    return None


class ColumnAligner:
    """Render a LineRange as aligned lines.

    Usage:
        >>> from linealign.narrowing import narrow
        >>> aligner = ColumnAligner()
        >>> aligner.format(narrow(["a = 1", "bcd = 2"], 0, 1, 0))
        ['a   = 1', 'bcd = 2']

    """

    __slots__ = ("_config",)

    def __init__(self, config: AlignConfig | None = None) -> None:
        """Initialize aligner.

        Args:
            config: Alignment configuration (defaults if None)
        """
        self._config = config if config is not None else DEFAULT_CONFIG

    @property
    def config(self) -> AlignConfig:
        return self._config

    def format(self, line_range: LineRange) -> list[str]:
        """Align every line of the range.

        Args:
            line_range: Range produced by narrowing

        Returns:
            Replacement text for each line of the range, in order. Empty if
            the range is empty or its base line has no tokens.
        """
        if not line_range.infos:
            return []
        if not self._base_line(line_range).tokens:
            return []

        anchor_type = line_range.anchor_type
        prefix, rows = self._normalize_indentation(line_range)
        rows = self._harmonize_first_words(rows, anchor_type)
        rows = [self._collapse_operator_spacing(row, anchor_type) for row in rows]
        results, remainders = self._align_columns(prefix, rows, anchor_type)
        return self._align_trailing_comments(results, remainders, rows)

    # =========================================================================
    # Stage 1: indentation
    # =========================================================================

    def _base_line(self, line_range: LineRange) -> LineRangeInfo:
        """Line whose tokens decide whether the range is rendered at all."""
        if self._config.indent_base == "activeline":
            for info in line_range.infos:
                if info.line_number == line_range.anchor:
                    return info
        return line_range.infos[0]

    def _normalize_indentation(self, line_range: LineRange) -> tuple[str, list[_Row]]:
        """Strip indentation and trailing whitespace from every line.

        Returns:
            (shared prefix, rows). A row keeps the part of its indentation
            that goes beyond the prefix.
        """
        infos = line_range.infos
        indents = [info.indent for info in infos]
        width = min(len(indent) for indent in indents)

        indent_char = next((indent[0] for indent in indents if indent), " ")
        prefix = indent_char * width

        rows: list[_Row] = []
        for info, indent in zip(infos, indents, strict=True):
            tokens = info.tokens
            if tokens and tokens[0].type is TokenType.WHITESPACE:
                tokens = tokens[1:]
            if tokens and tokens[-1].type is TokenType.WHITESPACE:
                tokens = tokens[:-1]
            rows.append(_Row(indent[width:], tokens))
        return prefix, rows

    # =========================================================================
    # Stage 2: first words
    # =========================================================================

    def _harmonize_first_words(
        self, rows: list[_Row], anchor_type: TokenType | None
    ) -> list[_Row]:
        """Line up one-word and multi-word lines.

        Example::

            var abc = 123;          var abc     = 123;
            var fsdafsf = 32423,    var fsdafsf = 32423,
            fasdf = 1231321;            fasdf   = 1231321;

        The first word of multi-word lines is padded to the longest one, and
        one-word lines are indented so their word lands in the second column.
        When this happens, extra indentation of individual lines is dropped,
        except on comment-only lines. With indentation pinned, one-word lines
        are left alone so their leading whitespace never changes.
        """
        groups = [_word_groups(row.tokens, anchor_type) for row in rows]

        first_word = 0
        for row, ends in zip(rows, groups, strict=True):
            if ends is not None and len(ends) >= 2:
                first_word = max(first_word, len(self._first_word(row.tokens, ends[0])))
        if first_word == 0:
            return rows

        harmonized: list[_Row] = []
        for row, ends in zip(rows, groups, strict=True):
            tokens = row.tokens
            if ends is None or not ends:
                harmonized.append(_Row(row.indent if row.is_comment_only else "", tokens))
            elif len(ends) == 1 and self._config.pin_indent:
                # Indentation is pinned; the column pass pads after the word
                harmonized.append(row)
            elif len(ends) == 1:
                word_space = Token(TokenType.INSERTION, spaces(first_word + 1))
                harmonized.append(_Row("", (word_space, *tokens)))
            else:
                harmonized.append(_Row("", self._pad_first_word(tokens, ends[0], first_word)))
        return harmonized

    @staticmethod
    def _first_word(tokens: Sequence[Token], end: int) -> str:
        return "".join(t.text for t in tokens[:end])

    def _pad_first_word(
        self, tokens: tuple[Token, ...], end: int, first_word: int
    ) -> tuple[Token, ...]:
        word = tokens[:end]
        rest = tokens[end:]
        if rest and rest[0].type is TokenType.WHITESPACE:
            rest = rest[1:]

        padding = first_word - len(self._first_word(tokens, end))
        if padding <= 0:
            return (*word, SINGLE_SPACE, *rest)
        fill = Token(TokenType.INSERTION, spaces(padding))
        if word[0].type is TokenType.COMMA_AS_WORD:
            # Comma-first lines keep the comma right-justified
            return (fill, *word, SINGLE_SPACE, *rest)
        return (*word, fill, SINGLE_SPACE, *rest)

    # =========================================================================
    # Stage 3: operator spacing
    # =========================================================================

    @staticmethod
    def _collapse_operator_spacing(row: _Row, anchor_type: TokenType | None) -> _Row:
        """Drop whitespace directly around anchors and inner commas."""
        tokens = row.tokens
        dropped: set[int] = set()
        for i, token in enumerate(tokens):
            if not _is_stop(token, i, anchor_type):
                continue
            if i > 0 and tokens[i - 1].type is TokenType.WHITESPACE:
                dropped.add(i - 1)
            if i + 1 < len(tokens) and tokens[i + 1].type is TokenType.WHITESPACE:
                dropped.add(i + 1)
        if not dropped:
            return row
        return _Row(row.indent, tuple(t for i, t in enumerate(tokens) if i not in dropped))

    # =========================================================================
    # Stage 4: columns
    # =========================================================================

    def _align_columns(
        self, prefix: str, rows: list[_Row], anchor_type: TokenType | None
    ) -> tuple[list[str], list[tuple[Token, ...]]]:
        """Align anchors and inner commas column by column.

        Each pass moves every unfinished line up to its next stop token,
        then pads all of them to the widest one and appends the stop token.
        A line with no stop left before its trailing comment is finished.

        Returns:
            (rendered code per line, unrendered tail per line). The tail
            holds the trailing comment, if any.
        """
        size = len(rows)
        results = [prefix + row.indent for row in rows]
        cursors = [0] * size
        ends = [_scan_end(row.tokens) for row in rows]
        finished = [False] * size

        while not all(finished):
            width = 0
            op_width = 0

            # Measure: collect literal text up to the next stop
            for l, row in enumerate(rows):
                if finished[l]:
                    continue
                i = cursors[l]
                parts = [results[l]]
                while i < ends[l] and not _is_stop(row.tokens[i], i, anchor_type):
                    parts.append(row.tokens[i].text)
                    i += 1
                results[l] = "".join(parts)
                cursors[l] = i
                if i >= ends[l]:
                    finished[l] = True
                else:
                    width = max(width, len(results[l]))
                    op_width = max(op_width, row.tokens[i].width)

            # Commit: pad to the widest line and append the stop token
            for l, row in enumerate(rows):
                if finished[l]:
                    continue
                i = cursors[l]
                has_more = i < len(row.tokens) - 1
                results[l] = self._commit(results[l], row.tokens[i], width, op_width, has_more)
                cursors[l] = i + 1

        remainders = [row.tokens[cursors[l] :] for l, row in enumerate(rows)]
        return results, remainders

    def _commit(self, text: str, token: Token, width: int, op_width: int, has_more: bool) -> str:
        padding = spaces(width - len(text))

        if token.type is TokenType.COMMA:
            # Comma stays on its word; the padding goes after it
            text += token.text
            if has_more:
                text += padding + " "
            return text

        op = token.text
        if len(op) < op_width:
            fill = spaces(op_width - len(op))
            op = fill + op if self._config.operator_padding == "right" else op + fill

        before, after = self._config.surround_space.for_type(token.type)
        if before < 0:
            if after < 0:
                # Push the last word right so it touches the operator
                split = max(text.rfind(" "), text.rfind("\t")) + 1
                text = text[:split] + padding + text[split:] + op
            else:
                text += op
                if has_more:
                    text += padding
        else:
            text += padding + spaces(before) + op

        if after > 0 and has_more:
            text += spaces(after)
        return text

    # =========================================================================
    # Stage 5: trailing comments
    # =========================================================================

    def _align_trailing_comments(
        self,
        results: list[str],
        remainders: list[tuple[Token, ...]],
        rows: list[_Row],
    ) -> list[str]:
        """Append tails, lining trailing comments up past the widest code."""
        gutter = self._config.surround_space.comment
        if gutter < 0:
            return [
                result + "".join(t.text for t in tail)
                for result, tail in zip(results, remainders, strict=True)
            ]

        commented = [
            l
            for l, tail in enumerate(remainders)
            if tail and tail[-1].type is TokenType.COMMENT and not rows[l].is_comment_only
        ]
        column = max((len(results[l]) for l in commented), default=0) + gutter

        lines: list[str] = []
        for l, (result, tail) in enumerate(zip(results, remainders, strict=True)):
            if not tail:
                lines.append(result)
            elif l in commented:
                lines.append(result + spaces(column - len(result)) + tail[-1].text)
            else:
                lines.append(result + "".join(t.text for t in tail))
        return lines


def format_range(line_range: LineRange, config: AlignConfig | None = None) -> list[str]:
    """Align a range with a one-off ColumnAligner.

    Args:
        line_range: Range produced by narrowing
        config: Alignment configuration (defaults if None)

    Returns:
        Replacement text for each line of the range.
    """
    return ColumnAligner(config).format(line_range)


__all__ = ["ColumnAligner", "format_range"]
