"""Exception classes for linealign.

Provides standardized exceptions for error handling throughout linealign.
Alignment itself never raises on odd input; these cover invalid
configuration, invalid language profiles and out-of-range selections.
"""

from __future__ import annotations


class LineAlignError(Exception):
    """Base exception for all linealign errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(LineAlignError):
    """Invalid alignment configuration value.

    Raised when a configuration key holds a value outside its allowed set.
    """

    def __init__(self, key: str, value: object, message: str) -> None:
        """Initialize configuration error.

        Args:
            key: Configuration key (e.g., "indent_base")
            value: The rejected value
            message: Description of what was expected
        """
        self.key = key
        self.value = value
        super().__init__(f"Invalid value {value!r} for '{key}': {message}")


class ProfileError(LineAlignError):
    """Invalid language profile.

    Raised when a profile pattern cannot be compiled.
    """

    def __init__(self, profile_name: str, message: str) -> None:
        """Initialize profile error.

        Args:
            profile_name: Name of the failing profile
            message: Description of the error
        """
        self.profile_name = profile_name
        super().__init__(f"Profile '{profile_name}': {message}")


class SelectionError(LineAlignError):
    """Selection does not fit the document.

    Raised when a selection starts after it ends or points past the last line.
    """

    def __init__(
        self,
        message: str,
        start: int | None = None,
        end: int | None = None,
    ) -> None:
        """Initialize selection error with optional line bounds.

        Args:
            message: Error description
            start: First selected line (0-indexed)
            end: Last selected line (0-indexed)
        """
        self.message = message
        self.start = start
        self.end = end

        location = ""
        if start is not None:
            location = f"lines {start}-{end if end is not None else start}: "

        super().__init__(f"{location}{message}")
