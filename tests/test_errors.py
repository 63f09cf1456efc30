"""Tests for the linealign exception hierarchy."""

import pytest

from linealign.errors import ConfigError, LineAlignError, ProfileError, SelectionError


class TestHierarchy:
    """Every error derives from LineAlignError."""

    @pytest.mark.parametrize("error_class", [ConfigError, ProfileError, SelectionError])
    def test_subclass(self, error_class) -> None:
        assert issubclass(error_class, LineAlignError)


class TestMessages:
    """Formatted error messages."""

    def test_config_error(self) -> None:
        error = ConfigError("indent_base", "nope", "expected one of ['firstline']")
        assert str(error) == "Invalid value 'nope' for 'indent_base': expected one of ['firstline']"

    def test_profile_error(self) -> None:
        error = ProfileError("lua", "broken")
        assert str(error) == "Profile 'lua': broken"

    def test_selection_error_with_bounds(self) -> None:
        error = SelectionError("selection starts after it ends", 3, 1)
        assert str(error) == "lines 3-1: selection starts after it ends"
        assert (error.start, error.end) == (3, 1)

    def test_selection_error_single_line(self) -> None:
        assert str(SelectionError("bad", 4)) == "lines 4-4: bad"

    def test_selection_error_without_bounds(self) -> None:
        error = SelectionError("bad")
        assert str(error) == "bad"
        assert error.message == "bad"
