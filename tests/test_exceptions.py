"""
Tests for the exceptions module.
"""

import pytest
from canvas_reader.exceptions import (
    CanvasReaderError,
    ConfigurationError,
    AuthenticationError,
    ValidationError,
    APIError,
    NavigationError,
    PandocError,
)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_all_exceptions_inherit_from_base(self):
        """All custom exceptions should inherit from CanvasReaderError."""
        exceptions = [
            ConfigurationError("test"),
            AuthenticationError("test"),
            ValidationError("test"),
            APIError("test"),
            NavigationError("reload page"),
            PandocError("test"),
        ]

        for exc in exceptions:
            assert isinstance(exc, CanvasReaderError)
            assert isinstance(exc, Exception)


class TestAPIError:
    """Tests for APIError."""

    def test_with_status_code(self):
        error = APIError("Not found", status_code=404, response="{}")

        assert error.status_code == 404
        assert error.response == "{}"
        assert str(error) == "Not found"


class TestNavigationError:
    """Tests for NavigationError."""

    def test_default_message(self):
        error = NavigationError("reload page")

        assert error.command == "reload page"
        assert str(error) == "Cannot reload page: no course is open"

    def test_custom_message(self):
        error = NavigationError("jump", "Nothing to jump to")

        assert str(error) == "Nothing to jump to"


class TestPandocError:
    """Tests for PandocError."""

    def test_keeps_stderr(self):
        error = PandocError("failed", stderr="bad input")

        assert error.stderr == "bad input"

    def test_can_be_caught_as_base(self):
        with pytest.raises(CanvasReaderError):
            raise PandocError("failed")
