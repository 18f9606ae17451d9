"""
Custom Exceptions for Canvas Reader

Provides specific exception types for different error conditions.
"""


class CanvasReaderError(Exception):
    """Base exception for all Canvas Reader errors."""
    pass


class ConfigurationError(CanvasReaderError):
    """Raised when configuration is missing or invalid."""
    pass


class AuthenticationError(CanvasReaderError):
    """Raised when no usable Canvas API token is configured."""
    pass


class ValidationError(CanvasReaderError):
    """Raised when input validation fails."""
    pass


class APIError(CanvasReaderError):
    """Raised when Canvas API returns an error."""

    def __init__(self, message: str, status_code: int = None, response: str = None):
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class NavigationError(CanvasReaderError):
    """Raised when a navigation command has nothing to act on."""

    def __init__(self, command: str, message: str = None):
        self.command = command
        self.message = message or f"Cannot {command}: no course is open"
        super().__init__(self.message)


class PandocError(CanvasReaderError):
    """Raised when pandoc conversion fails."""

    def __init__(self, message: str, stderr: str = None):
        self.stderr = stderr
        super().__init__(message)
