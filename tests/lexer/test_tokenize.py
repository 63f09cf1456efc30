"""Tests for single-line tokenization.

Covers each scanner and classifier of the lexer, one class per concern.
"""

import pytest

from linealign.lexer import LineLexer, tokenize_line
from linealign.profiles import LUA_PROFILE, PYTHON_PROFILE, SHELL_PROFILE, LanguageProfile
from linealign.tokens import Token, TokenType


def types(text: str, profile=None) -> list[TokenType]:
    return [t.type for t in tokenize_line(text, profile).tokens]


def find(text: str, token_type: TokenType, profile=None) -> list[str]:
    return [t.text for t in tokenize_line(text, profile).tokens if t.type is token_type]


class TestBasicTokens:
    """Words, whitespace and the assignment anchor."""

    def test_simple_assignment(self) -> None:
        assert tokenize_line("x = 1").tokens == (
            Token(TokenType.WORD, "x"),
            Token(TokenType.WHITESPACE, " "),
            Token(TokenType.ASSIGNMENT, "="),
            Token(TokenType.WHITESPACE, " "),
            Token(TokenType.WORD, "1"),
        )

    def test_empty_line_has_no_tokens(self) -> None:
        info = tokenize_line("")
        assert info.tokens == ()
        assert info.significant_types == ()

    def test_whitespace_only_line(self) -> None:
        info = tokenize_line(" \t  ")
        assert info.tokens == (Token(TokenType.WHITESPACE, " \t  "),)
        assert info.significant_types == ()

    def test_adjacent_word_pieces_merge(self) -> None:
        """Punctuation that is not an anchor is part of the surrounding word."""
        assert find("obj.field;", TokenType.WORD) == ["obj.field;"]

    def test_whitespace_runs_are_single_tokens(self) -> None:
        assert find("a  \t b", TokenType.WHITESPACE) == ["  \t "]

    def test_significant_types_in_discovery_order(self) -> None:
        info = tokenize_line("key: value = 1 // note")
        assert info.significant_types == (
            TokenType.COLON,
            TokenType.ASSIGNMENT,
            TokenType.COMMENT,
        )

    def test_significant_types_are_deduplicated(self) -> None:
        info = tokenize_line("a = b = c")
        assert info.significant_types == (TokenType.ASSIGNMENT,)

    def test_line_without_anchor(self) -> None:
        assert tokenize_line("return total;").significant_types == ()

    def test_indent_property(self) -> None:
        assert tokenize_line("    x = 1").indent == "    "
        assert tokenize_line("x = 1").indent == ""


class TestOperators:
    """Assignment, other operators and arrows."""

    @pytest.mark.parametrize("op", ["=", "+=", "-=", ":=", ".=", "**=", "<<=", "??="])
    def test_generic_assignment_operators(self, op: str) -> None:
        assert find(f"a {op} b", TokenType.ASSIGNMENT) == [op]

    def test_longest_operator_wins(self) -> None:
        assert find("a === b", TokenType.ASSIGNMENT) == ["==="]
        assert find("a !== b", TokenType.ASSIGNMENT) == ["!=="]

    def test_arrow_before_assignment(self) -> None:
        assert types("a => b") == [
            TokenType.WORD,
            TokenType.WHITESPACE,
            TokenType.ARROW,
            TokenType.WHITESPACE,
            TokenType.WORD,
        ]

    def test_python_comparisons_are_other_operators(self) -> None:
        assert find("a == b", TokenType.OTHER_OPERATOR, PYTHON_PROFILE) == ["=="]
        assert find("a <= b", TokenType.OTHER_OPERATOR, PYTHON_PROFILE) == ["<="]
        assert find("a == b", TokenType.ASSIGNMENT, PYTHON_PROFILE) == []

    def test_python_floor_division_assignment(self) -> None:
        assert find("a //= 2", TokenType.ASSIGNMENT, PYTHON_PROFILE) == ["//="]

    def test_lua_not_equal(self) -> None:
        assert find("if a ~= b then", TokenType.OTHER_OPERATOR, LUA_PROFILE) == ["~="]

    def test_custom_operator(self) -> None:
        profile = PYTHON_PROFILE.with_operators(other=["->"])
        assert find("def f() -> int", TokenType.OTHER_OPERATOR, profile) == ["->"]


class TestColons:
    """Colon lexemes and the double-colon exception."""

    def test_colon(self) -> None:
        assert find("key: value", TokenType.COLON) == [":"]

    def test_optional_property_colon(self) -> None:
        info = tokenize_line("page_type?: string")
        assert info.tokens[:2] == (
            Token(TokenType.WORD, "page_type"),
            Token(TokenType.COLON, "?:"),
        )

    def test_double_colon_is_part_of_word(self) -> None:
        info = tokenize_line("self::LAUNCH => 'x'")
        assert info.tokens[0] == Token(TokenType.WORD, "self::LAUNCH")
        assert TokenType.COLON not in info.significant_types

    def test_walrus_is_assignment_not_colon(self) -> None:
        assert find("test := 1", TokenType.ASSIGNMENT) == [":="]
        assert find("test := 1", TokenType.COLON) == []

    def test_lua_method_call_has_no_colon(self) -> None:
        assert find("obj:method()", TokenType.COLON, LUA_PROFILE) == []


class TestComments:
    """Line and block comments, and the URL guard."""

    def test_line_comment_runs_to_end(self) -> None:
        assert find("x = 1 // one = two", TokenType.COMMENT) == ["// one = two"]

    def test_anchor_inside_comment_is_ignored(self) -> None:
        info = tokenize_line("// a = b")
        assert info.significant_types == (TokenType.COMMENT,)

    def test_block_comment(self) -> None:
        info = tokenize_line("a = 1 /* note */ + 2")
        assert find("a = 1 /* note */ + 2", TokenType.COMMENT) == ["/* note */"]
        assert info.tokens[-1] == Token(TokenType.WORD, "2")

    def test_unclosed_block_comment_is_not_partial(self) -> None:
        info = tokenize_line("a = 1 /* open")
        assert info.tokens[-1] == Token(TokenType.COMMENT, "/* open")
        assert not info.is_partial

    def test_url_is_not_a_comment(self) -> None:
        info = tokenize_line("url = http://example.com")
        assert TokenType.COMMENT not in info.significant_types
        assert info.tokens[-1] == Token(TokenType.WORD, "//example.com")

    def test_url_guard_can_be_disabled(self) -> None:
        profile = LanguageProfile.from_dict(
            {"line_comment": "//", "url_guard": False, "assignment_operators": ["="]}
        )
        assert find("url = http://example.com", TokenType.COMMENT, profile) == [
            "//example.com"
        ]

    def test_python_hash_comment(self) -> None:
        assert find("x = 1  # one", TokenType.COMMENT, PYTHON_PROFILE) == ["# one"]

    def test_lua_line_and_block_comments(self) -> None:
        assert find("x = 1 -- note", TokenType.COMMENT, LUA_PROFILE) == ["-- note"]
        assert find("--[[ block ]] y = 2", TokenType.COMMENT, LUA_PROFILE) == ["--[[ block ]]"]

    def test_shell_comment(self) -> None:
        assert find("NAME=value # note", TokenType.COMMENT, SHELL_PROFILE) == ["# note"]


class TestStrings:
    """String literals and escapes."""

    def test_string_is_opaque(self) -> None:
        info = tokenize_line('a = "x = 1"')
        assert info.tokens[-1] == Token(TokenType.STRING, '"x = 1"')
        assert info.significant_types == (TokenType.ASSIGNMENT,)

    @pytest.mark.parametrize("quote", ['"', "'", "`"])
    def test_generic_delimiters(self, quote: str) -> None:
        assert find(f"a = {quote}b: c{quote}", TokenType.STRING) == [f"{quote}b: c{quote}"]

    def test_escaped_quote_does_not_close(self) -> None:
        assert find('a = "say \\"hi\\"" // c', TokenType.STRING) == ['"say \\"hi\\""']

    def test_escaped_backslash_then_quote_closes(self) -> None:
        info = tokenize_line('"a\\\\" = 1')
        assert info.tokens[0] == Token(TokenType.STRING, '"a\\\\"')
        assert TokenType.ASSIGNMENT in info.significant_types

    def test_other_quote_inside_string(self) -> None:
        assert find("a = \"it's\"", TokenType.STRING) == ["\"it's\""]

    def test_unclosed_string_is_partial(self) -> None:
        info = tokenize_line('x = "abc = 1')
        assert info.tokens[-1] == Token(TokenType.PARTIAL_STRING, '"abc = 1')
        assert info.is_partial


class TestBrackets:
    """Bracketed blocks and unbalanced brackets."""

    def test_block_is_opaque(self) -> None:
        assert types("f(a = 1) = 2") == [
            TokenType.WORD,
            TokenType.BLOCK,
            TokenType.WHITESPACE,
            TokenType.ASSIGNMENT,
            TokenType.WHITESPACE,
            TokenType.WORD,
        ]

    def test_nested_block(self) -> None:
        assert find("[[1], [2]] = x", TokenType.BLOCK) == ["[[1], [2]]"]

    def test_commas_inside_block_are_hidden(self) -> None:
        assert find("call(a, b, c);", TokenType.COMMA) == []

    def test_unclosed_bracket_is_partial(self) -> None:
        info = tokenize_line("foo(a,")
        assert info.tokens == (
            Token(TokenType.WORD, "foo"),
            Token(TokenType.PARTIAL_BLOCK, "(a,"),
        )
        assert info.is_partial

    def test_unopened_bracket_is_end_of_block(self) -> None:
        info = tokenize_line("}, b = 1")
        assert info.tokens[0] == Token(TokenType.END_OF_BLOCK, "}")
        assert info.is_partial

    def test_escaped_closer_is_ignored(self) -> None:
        assert find("a = [\\]] x", TokenType.BLOCK) == ["[\\]]"]


class TestCommas:
    """Inner commas and comma-first lines."""

    def test_inner_comma(self) -> None:
        assert find("a = 1, b", TokenType.COMMA) == [","]

    def test_leading_comma_is_word(self) -> None:
        info = tokenize_line("  , tokens: []")
        assert info.tokens[1] == Token(TokenType.COMMA_AS_WORD, ",")

    def test_comma_first_disabled(self) -> None:
        info = tokenize_line("  , tokens = []", PYTHON_PROFILE)
        assert info.tokens[1] == Token(TokenType.COMMA, ",")

    def test_comma_after_closer_is_inner(self) -> None:
        assert types("}, b")[1] is TokenType.COMMA


class TestLineLexer:
    """The LineLexer class itself."""

    def test_tokenize_matches_function(self) -> None:
        text = "var x = {a: 1}, 'b' // c"
        assert LineLexer(text).tokenize() == tokenize_line(text)

    def test_default_profile_is_generic(self) -> None:
        assert find("a // b", TokenType.COMMENT) == ["// b"]
        assert find("a # b", TokenType.COMMENT) == []

    def test_token_repr_is_compact(self) -> None:
        token = Token(TokenType.STRING, '"a very long string literal"')
        assert repr(token) == "Token(STRING, '\"a very long stri...')"
