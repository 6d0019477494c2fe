"""
Custom exceptions for asset service operations.

This module defines exception classes raised by the cldpy client.
"""
from typing import Optional


class CloudException(Exception):
    """Base exception for all cldpy errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class ParseError(CloudException):
    """Exception raised when a connection string or pattern cannot be parsed."""
    pass


class InvalidScheme(ParseError):
    """Exception raised when the connection string has the wrong scheme."""
    pass


class MissingSecret(ParseError):
    """Exception raised when the connection string carries no API secret."""
    pass


class PathError(CloudException):
    """Exception raised for local file or directory access errors."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            path: Local path that could not be accessed
        """
        self.path = path
        super().__init__(message)


class EncodingError(CloudException):
    """Exception raised when a request body cannot be built."""
    pass


class TransportError(CloudException):
    """Exception raised when the HTTP request itself fails."""
    pass


class RemoteError(TransportError):
    """Exception raised when the service answers with a non-2xx status."""

    def __init__(
        self,
        status: int,
        status_text: str,
        cld_error: Optional[str] = None,
        message: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            status: HTTP status code
            status_text: HTTP status line, e.g. "400 Bad Request"
            cld_error: Value of the X-Cld-Error response header
            message: Error message from the JSON error envelope
        """
        self.status = status
        self.status_text = status_text
        self.cld_error = cld_error
        self.remote_message = message

        text = f"Request error: {status_text}"
        detail = message or cld_error
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text, error_code=status)


class DecodeError(CloudException):
    """Exception raised when a response body is not the expected JSON."""
    pass
