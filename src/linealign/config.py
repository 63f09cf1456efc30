"""Alignment configuration for linealign.

Configuration is an immutable value passed explicitly into every call.
There is no module-level "current config": two callers with different
settings can align concurrently without coordinating.

Usage:
    from linealign import align
    from linealign.config import AlignConfig

    config = AlignConfig(operator_padding="left")
    replacements = align(lines, selections, config)

    # From editor settings (camelCase keys are accepted)
    config = AlignConfig.from_dict({
        "indentBase": "activeline",
        "surroundSpace": {"colon": [1, 1], "comment": 4},
    })

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Literal

from linealign.errors import ConfigError
from linealign.tokens import TokenType

IndentBase = Literal["firstline", "activeline", "dontchange"]
OperatorPadding = Literal["left", "right"]

INDENT_BASES = frozenset({"firstline", "activeline", "dontchange"})
OPERATOR_PADDINGS = frozenset({"left", "right"})

# Editor setting names accepted by from_dict
_CAMEL_CASE_KEYS = {
    "indentBase": "indent_base",
    "operatorPadding": "operator_padding",
    "surroundSpace": "surround_space",
}

_SPACING_KEYS = {
    "assignment": "assignment",
    "arrow": "arrow",
    "colon": "colon",
    "other_operator": "other_operator",
    "otherOperator": "other_operator",
}


def _spacing_pair(key: str, value: object) -> tuple[int, int]:
    if (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        return int(value[0]), int(value[1])
    raise ConfigError(f"surround_space.{key}", value, "expected a [before, after] pair of integers")


@dataclass(frozen=True, slots=True)
class SurroundSpace:
    """Spacing around each kind of alignment anchor.

    Each operator entry is ``(before, after)``. A negative ``before`` makes
    the operator stick to the word on its left; when ``after`` is negative
    as well, the left word is pushed right so it touches the operator.

    Attributes:
        assignment: Spacing around assignment operators
        arrow: Spacing around ``=>``
        colon: Spacing around colons
        other_operator: Spacing around profile-defined other operators
        comment: Gap between code and a trailing comment; negative disables
            trailing comment alignment

    """

    assignment: tuple[int, int] = (1, 1)
    arrow: tuple[int, int] = (1, 1)
    colon: tuple[int, int] = (0, 1)
    other_operator: tuple[int, int] = (1, 1)
    comment: int = 2

    def for_type(self, token_type: TokenType | None) -> tuple[int, int]:
        """Return ``(before, after)`` spacing for an anchor type.

        Comment anchors and unknown types get ``(0, 0)``; comments are placed
        by the trailing comment step instead.
        """
        if token_type is TokenType.ASSIGNMENT:
            return self.assignment
        if token_type is TokenType.ARROW:
            return self.arrow
        if token_type is TokenType.COLON:
            return self.colon
        if token_type is TokenType.OTHER_OPERATOR:
            return self.other_operator
        return (0, 0)

    @classmethod
    def from_dict(cls, spacing: Mapping[str, object]) -> SurroundSpace:
        """Create SurroundSpace from a mapping, keeping defaults for missing keys.

        Raises:
            ConfigError: If a value has the wrong shape.
        """
        values: dict[str, object] = {}
        for key, value in spacing.items():
            if key == "comment":
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ConfigError("surround_space.comment", value, "expected an integer")
                values["comment"] = value
            elif key in _SPACING_KEYS:
                values[_SPACING_KEYS[key]] = _spacing_pair(key, value)
        return cls(**values)


@dataclass(frozen=True, slots=True)
class AlignConfig:
    """Immutable alignment configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        indent_base: Which line decides whether a range is rendered, and
            whether ranges may cross indentation changes. The shared
            indentation is always the shallowest line of the range.
            "firstline" checks the first line of the range,
            "activeline" checks the line the cursor is on,
            "dontchange" also stops ranges at lines with different indentation
            and never re-indents one-word lines.
        operator_padding: Justification of operators narrower than the widest
            one in their column ("right" gives `` =`` next to ``+=``)
        surround_space: Spacing around anchors and before trailing comments

    """

    indent_base: IndentBase = "firstline"
    operator_padding: OperatorPadding = "right"
    surround_space: SurroundSpace = SurroundSpace()

    def __post_init__(self) -> None:
        if self.indent_base not in INDENT_BASES:
            raise ConfigError(
                "indent_base", self.indent_base, f"expected one of {sorted(INDENT_BASES)}"
            )
        if self.operator_padding not in OPERATOR_PADDINGS:
            raise ConfigError(
                "operator_padding",
                self.operator_padding,
                f"expected one of {sorted(OPERATOR_PADDINGS)}",
            )
        if isinstance(self.surround_space, Mapping):
            object.__setattr__(self, "surround_space", SurroundSpace.from_dict(self.surround_space))

    @property
    def pin_indent(self) -> bool:
        """True if ranges must not cross a change of indentation."""
        return self.indent_base == "dontchange"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, object]) -> AlignConfig:
        """Create AlignConfig from dictionary.

        Useful for editor integration where settings arrive as JSON. Both
        snake_case field names and the editor's camelCase names are accepted;
        unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New AlignConfig instance with values from dict.

        Raises:
            ConfigError: If a value is outside its allowed set.

        Example:
            >>> config = AlignConfig.from_dict({
            ...     "operatorPadding": "left",
            ...     "surroundSpace": {"colon": [1, 1]},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.operator_padding
            'left'
            >>> config.surround_space.colon
            (1, 1)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, object] = {}
        for key, value in config_dict.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in valid_fields:
                filtered[name] = value

        spacing = filtered.get("surround_space")
        if spacing is not None and not isinstance(spacing, SurroundSpace):
            if not isinstance(spacing, Mapping):
                raise ConfigError("surround_space", spacing, "expected a mapping")
            filtered["surround_space"] = SurroundSpace.from_dict(spacing)

        return cls(**filtered)


DEFAULT_CONFIG = AlignConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "AlignConfig",
    "IndentBase",
    "OperatorPadding",
    "SurroundSpace",
]
