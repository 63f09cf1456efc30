"""Language profiles for the linealign lexer.

A LanguageProfile declares the lexical patterns of one language family:
how comments start and end, which characters open strings, and which
operator lexemes are alignment anchors. Profiles carry no behavior; the
lexer reads them.

Built-in profiles live in a read-only table. Custom profiles are plain
frozen dataclasses, so callers can build one per document without touching
any shared state.

Thread Safety:
LanguageProfile is frozen (immutable) and safe to share across threads.
Compiled patterns are created once in ``__post_init__``.

Usage:
    >>> from linealign.profiles import get_profile
    >>> get_profile("typescript").name
    'generic'
    >>> get_profile("python").line_comment
    '#'

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType

from linealign.errors import ProfileError
from linealign.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    """Immutable lexical description of a language.

    Pattern fields hold regular expression sources matched at the scan
    position; an empty string disables the construct. Patterns must not use
    ``^`` since they are matched in the middle of a line.

    Attributes:
        name: Profile name used in log and error messages
        line_comment: Pattern starting a comment that runs to end of line
        block_comment_start: Pattern opening a block comment
        block_comment_end: Pattern closing a block comment
        string_delimiters: Characters that open and close string literals
        assignment_operators: Lexemes tokenized as ASSIGNMENT
        other_operators: Lexemes tokenized as OTHER_OPERATOR
        colon_operators: Lexemes tokenized as COLON
        url_guard: Ignore a line-comment start directly after ``:`` (``http://``)
        comma_first: Treat a comma opening the line as a word

    """

    name: str = "custom"
    line_comment: str = ""
    block_comment_start: str = ""
    block_comment_end: str = ""
    string_delimiters: frozenset[str] = frozenset()
    assignment_operators: frozenset[str] = frozenset()
    other_operators: frozenset[str] = frozenset()
    colon_operators: frozenset[str] = frozenset({":"})
    url_guard: bool = True
    comma_first: bool = True
    _line_comment_re: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False, hash=False
    )
    _block_start_re: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False, hash=False
    )
    _block_end_re: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        # Accept any iterable of lexemes but store frozensets
        for name in (
            "string_delimiters",
            "assignment_operators",
            "other_operators",
            "colon_operators",
        ):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

        if self.block_comment_start and not self.block_comment_end:
            raise ProfileError(self.name, "block_comment_start requires block_comment_end")

        object.__setattr__(self, "_line_comment_re", self._compile(self.line_comment))
        object.__setattr__(self, "_block_start_re", self._compile(self.block_comment_start))
        object.__setattr__(self, "_block_end_re", self._compile(self.block_comment_end))

    def _compile(self, pattern: str) -> re.Pattern[str] | None:
        if not pattern:
            return None
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ProfileError(self.name, f"invalid pattern {pattern!r}: {e}") from e

    @property
    def line_comment_re(self) -> re.Pattern[str] | None:
        """Compiled line-comment pattern, or None if the language has none."""
        return self._line_comment_re

    @property
    def block_comment_start_re(self) -> re.Pattern[str] | None:
        """Compiled block-comment opening pattern."""
        return self._block_start_re

    @property
    def block_comment_end_re(self) -> re.Pattern[str] | None:
        """Compiled block-comment closing pattern."""
        return self._block_end_re

    @classmethod
    def from_dict(cls, profile_dict: Mapping[str, object]) -> LanguageProfile:
        """Create LanguageProfile from dictionary.

        Only includes keys that are valid LanguageProfile fields; unknown keys
        are silently ignored. Set-valued fields accept any iterable.

        Args:
            profile_dict: Dictionary with profile values.

        Returns:
            New LanguageProfile instance.

        Raises:
            ProfileError: If a pattern is not a valid regular expression.

        Example:
            >>> profile = LanguageProfile.from_dict({
            ...     "name": "ini",
            ...     "line_comment": ";",
            ...     "assignment_operators": ["="],
            ... })
            >>> profile.assignment_operators
            frozenset({'='})

        """
        valid_fields = {f.name for f in fields(cls) if f.init}
        filtered = {k: v for k, v in profile_dict.items() if k in valid_fields}
        return cls(**filtered)

    def with_operators(
        self,
        *,
        assignment: Iterable[str] | None = None,
        other: Iterable[str] | None = None,
    ) -> LanguageProfile:
        """Return a copy of this profile with extra operator lexemes.

        Args:
            assignment: Lexemes to add to assignment_operators
            other: Lexemes to add to other_operators

        Returns:
            New LanguageProfile; this one is unchanged.
        """
        return replace(
            self,
            assignment_operators=self.assignment_operators | frozenset(assignment or ()),
            other_operators=self.other_operators | frozenset(other or ()),
        )


# =========================================================================
# Built-in profiles
# =========================================================================

GENERIC_PROFILE = LanguageProfile(
    name="generic",
    line_comment=r"//",
    block_comment_start=r"/\*",
    block_comment_end=r"\*/",
    string_delimiters=frozenset({'"', "'", "`"}),
    assignment_operators=frozenset(
        {
            "=",
            "+=",
            "-=",
            "*=",
            "/=",
            "%=",
            "~=",
            "|=",
            "^=",
            ".=",
            ":=",
            "&=",
            "!=",
            "==",
            "===",
            "!==",
            "**=",
            "<<=",
            ">>=",
            "??=",
        }
    ),
    colon_operators=frozenset({":", "?:"}),
)

PYTHON_PROFILE = LanguageProfile(
    name="python",
    line_comment=r"#",
    string_delimiters=frozenset({'"', "'"}),
    assignment_operators=frozenset(
        {
            "=",
            ":=",
            "+=",
            "-=",
            "*=",
            "/=",
            "//=",
            "%=",
            "**=",
            "@=",
            "&=",
            "|=",
            "^=",
            "<<=",
            ">>=",
        }
    ),
    other_operators=frozenset({"==", "!=", "<=", ">="}),
    comma_first=False,
)

LUA_PROFILE = LanguageProfile(
    name="lua",
    line_comment=r"--(?!\[\[)",
    block_comment_start=r"--\[\[",
    block_comment_end=r"\]\]",
    string_delimiters=frozenset({'"', "'"}),
    assignment_operators=frozenset({"="}),
    other_operators=frozenset({"==", "~=", "<=", ">="}),
    # obj:method() is a call, not a key/value separator
    colon_operators=frozenset(),
)

SHELL_PROFILE = LanguageProfile(
    name="shell",
    line_comment=r"#",
    string_delimiters=frozenset({'"', "'", "`"}),
    assignment_operators=frozenset({"=", "+="}),
    colon_operators=frozenset(),
    url_guard=False,
)

_PROFILES: Mapping[str, LanguageProfile] = MappingProxyType(
    {
        "generic": GENERIC_PROFILE,
        "python": PYTHON_PROFILE,
        "lua": LUA_PROFILE,
        "shell": SHELL_PROFILE,
    }
)

# Editor language ids that map to a non-generic profile
_LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "python": "python",
        "py": "python",
        "lua": "lua",
        "shellscript": "shell",
        "shell": "shell",
        "bash": "shell",
        "sh": "shell",
        "zsh": "shell",
    }
)


def get_profile(language_id: str | None = None) -> LanguageProfile:
    """Look up the built-in profile for an editor language id.

    Args:
        language_id: Language id such as "typescript" or "python".
            None selects the generic C-like profile.

    Returns:
        Matching LanguageProfile; unknown ids fall back to the generic one.
    """
    if language_id is None:
        return GENERIC_PROFILE
    key = language_id.lower()
    name = _LANGUAGE_ALIASES.get(key, key)
    profile = _PROFILES.get(name)
    if profile is None:
        logger.debug("No profile for language %r, using generic", language_id)
        return GENERIC_PROFILE
    return profile


def builtin_profiles() -> Mapping[str, LanguageProfile]:
    """Read-only view of the built-in profiles keyed by name."""
    return _PROFILES


__all__ = [
    "GENERIC_PROFILE",
    "LUA_PROFILE",
    "LanguageProfile",
    "PYTHON_PROFILE",
    "SHELL_PROFILE",
    "builtin_profiles",
    "get_profile",
]
