"""Tests for the high-level linealign API."""

import pytest


class TestAlignFunction:
    """Tests for the align() function."""

    def test_align_cursor(self) -> None:
        """A cursor aligns the block around it."""
        from linealign import Replacement, Selection, align

        lines = ["x = 1", "", "a = 1", "bb = 2", "", "y = 2"]
        assert align(lines, [Selection.at(3)]) == [
            Replacement(start=2, end=3, lines=("a  = 1", "bb = 2")),
        ]

    def test_bare_line_numbers(self) -> None:
        """Integers are accepted as single-line cursors."""
        from linealign import Selection, align

        lines = ["a = 1", "bb = 2"]
        assert align(lines, [1]) == align(lines, [Selection.at(1)])

    def test_aligned_block_gives_no_replacement(self) -> None:
        from linealign import align

        assert align(["a  = 1", "bb = 2"], [0]) == []

    def test_line_without_anchor_gives_no_replacement(self) -> None:
        from linealign import align

        assert align(["a = 1", "return x;", "bb = 2"], [1]) == []

    def test_multi_line_selection(self) -> None:
        """A selection aligns every block inside it, and only those."""
        from linealign import Replacement, Selection, align

        lines = ["a = 1", "bb = 2", "", "ccc: 3", "d: 4", "", "e = 1", "fff = 2"]
        assert align(lines, [Selection(0, 4)]) == [
            Replacement(0, 1, ("a  = 1", "bb = 2")),
            Replacement(3, 4, ("ccc: 3", "d  : 4")),
        ]

    def test_overlapping_cursors_are_deduplicated(self) -> None:
        """Two cursors in the same block produce a single replacement."""
        from linealign import Selection, align

        lines = ["a = 1", "bb = 2", "ccc = 3"]
        replacements = align(lines, [Selection.at(0), Selection.at(2)])
        assert len(replacements) == 1
        assert replacements[0].start == 0
        assert replacements[0].end == 2

    def test_cursors_in_separate_blocks(self) -> None:
        from linealign import align

        lines = ["a = 1", "bb = 2", "", "ccc: 3", "d: 4"]
        replacements = align(lines, [0, 4])
        assert [(r.start, r.end) for r in replacements] == [(0, 1), (3, 4)]

    def test_invalid_selection(self) -> None:
        from linealign import SelectionError, align

        with pytest.raises(SelectionError):
            align(["a = 1"], [5])

    def test_config_and_profile(self) -> None:
        from linealign import AlignConfig, align, get_profile

        config = AlignConfig(operator_padding="left")
        replacements = align(["a = 1  # c", "bb += 2"], [0], config, get_profile("python"))
        assert replacements[0].lines == ("a  =  1  # c", "bb += 2")


class TestApplyReplacements:
    """Tests for apply_replacements()."""

    def test_applies_in_any_order(self) -> None:
        from linealign import Replacement, apply_replacements

        lines = ["a", "b", "c", "d"]
        replacements = [Replacement(0, 0, ("A",)), Replacement(2, 3, ("C", "D"))]
        assert apply_replacements(lines, reversed(replacements)) == ["A", "b", "C", "D"]

    def test_input_is_not_modified(self) -> None:
        from linealign import Replacement, apply_replacements

        lines = ["a", "b"]
        apply_replacements(lines, [Replacement(0, 0, ("A",))])
        assert lines == ["a", "b"]


class TestAlignLines:
    """Tests for align_lines()."""

    def test_whole_document(self) -> None:
        from linealign import align_lines

        lines = ["a = 1", "bb = 2", "", "x: 1", "yyy: 2"]
        assert align_lines(lines) == ["a  = 1", "bb = 2", "", "x  : 1", "yyy: 2"]

    def test_cursor_only_touches_its_block(self) -> None:
        from linealign import align_lines

        lines = ["a = 1", "bb = 2", "", "x: 1", "yyy: 2"]
        assert align_lines(lines, line=4) == ["a = 1", "bb = 2", "", "x  : 1", "yyy: 2"]

    def test_empty(self) -> None:
        from linealign import align_lines

        assert align_lines([]) == []

    @pytest.mark.parametrize(
        "lines",
        [
            ["var abc = 123;", "var fsdafsf = 32423,", "fasdf = 1231321;"],
            ["    line: textline", "  , sgfntTokenType: TokenType.Invalid", "  , tokens: []"],
            ["int myNum; // Attribute (int)", "string myString; // Attribute (string)"],
            ["test123 := 123", "global test1 := 13", "test2332 = 1234", "test4124 += 124"],
            ["a = 1 // x", "  // note", "bb = 2"],
            ["a = 1", '  b = "open', "  c = 3", "  dd = 4"],
        ],
    )
    @pytest.mark.parametrize("indent_base", ["firstline", "activeline", "dontchange"])
    def test_idempotent(self, lines: list[str], indent_base: str) -> None:
        """Aligning twice gives the same result as aligning once."""
        from linealign import AlignConfig, align_lines

        config = AlignConfig(indent_base=indent_base)
        once = align_lines(lines, None, config)
        assert align_lines(once, None, config) == once

    def test_repeated_cursor_alignment_is_stable(self) -> None:
        """The cursor on a one-word line does not re-indent the block."""
        from linealign import AlignConfig, align_lines

        config = AlignConfig(indent_base="activeline")
        once = align_lines(["a = 1", "var bb = 2"], 0, config)
        assert once == ["    a  = 1", "var bb = 2"]
        assert align_lines(once, 0, config) == once
        assert align_lines(align_lines(once, 0, config), 0, config) == once


class TestAlignText:
    """Tests for align_text()."""

    def test_lf(self) -> None:
        from linealign import align_text

        assert align_text("a = 1\nbb = 2\n") == "a  = 1\nbb = 2\n"

    def test_crlf_is_kept(self) -> None:
        from linealign import align_text

        assert align_text("a = 1\r\nbb = 2\r\n") == "a  = 1\r\nbb = 2\r\n"

    def test_no_trailing_newline(self) -> None:
        from linealign import align_text

        assert align_text("a = 1\nbb = 2") == "a  = 1\nbb = 2"

    def test_cursor_line(self) -> None:
        from linealign import align_text

        text = "a = 1\nbb = 2\n\nx: 1\nyyy: 2\n"
        assert align_text(text, line=0) == "a  = 1\nbb = 2\n\nx: 1\nyyy: 2\n"

    def test_empty(self) -> None:
        from linealign import align_text

        assert align_text("") == ""


class TestPublicSurface:
    """The package root exports the whole API."""

    def test_all_names_exist(self) -> None:
        import linealign

        for name in linealign.__all__:
            assert hasattr(linealign, name), name

    def test_version(self) -> None:
        import linealign

        assert linealign.__version__ == "0.1.0"
