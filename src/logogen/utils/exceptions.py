"""
Custom exceptions for logogen.

This module defines all custom exceptions used throughout the application.
Client operations only ever raise UpstreamError or NoImageDataError; raw
transport exceptions never escape the client.
"""


class LogogenError(Exception):
    """Base exception for all logogen errors."""

    pass


class ValidationError(LogogenError):
    """Raised when caller-side input validation fails."""

    def __init__(self, message: str, field: str = "") -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Name of the field that failed validation (optional)
        """
        self.field = field
        super().__init__(message)


class ConfigurationError(LogogenError):
    """Raised when there is a configuration problem (e.g. missing API key)."""

    pass


class UpstreamError(LogogenError):
    """Raised when the call to the remote model fails."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        status_code: int = 0,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Generic, operation-specific error message
            original_error: The underlying exception, kept for diagnostics only
            status_code: HTTP status code (if applicable)
        """
        self.original_error = original_error
        self.status_code = status_code
        super().__init__(message)


class NoImageDataError(LogogenError):
    """Raised when the remote call succeeded but returned no usable image."""

    def __init__(self, message: str, response: str = "") -> None:
        """
        Initialize no-image-data error.

        Args:
            message: Operation-specific error message
            response: Raw (truncated) response body, for diagnostics
        """
        self.response = response
        super().__init__(message)
