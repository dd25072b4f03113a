"""Exception hierarchy for the LinkedIn client.

Each stage of a request pipeline fails with its own exception type so callers
can tell a failed request apart from a successful request whose payload does
not match the API contract.
"""

from typing import Optional, Dict, Any


class LinkedInError(Exception):
    """Base exception for all LinkedIn client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AuthenticationError(LinkedInError):
    """Raised when no usable access token is available.

    Examples:
        - Token missing from configuration
        - Credentials file missing or unreadable
    """

    pass


class ConfigurationError(LinkedInError):
    """Raised when configuration is invalid or missing."""

    pass


class TransportError(LinkedInError):
    """Raised when an HTTP request fails.

    Examples:
        - Connection refused, DNS failure, timeout
        - HTTP 4xx/5xx status
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize transport error with HTTP details.

        Args:
            message: Human-readable error message
            status_code: HTTP status code, None for network failures
            response_body: Raw response body
            details: Optional additional context
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        """Return string representation including HTTP status."""
        base = self.message
        if self.status_code:
            base = f"[HTTP {self.status_code}] {base}"
        if self.response_body:
            base = f"{base}\nResponse: {self.response_body[:500]}"
        if self.details:
            base = f"{base}\nDetails: {self.details}"
        return base

    @classmethod
    def wrap(cls, message: str, error: "TransportError") -> "TransportError":
        """Re-raise a transport failure as a more specific stage error.

        Args:
            message: Message describing the failed stage
            error: Original transport error

        Returns:
            New error of type ``cls`` carrying the original HTTP details
        """
        return cls(
            f"{message}: {error.message}",
            status_code=error.status_code,
            response_body=error.response_body,
            details=dict(error.details),
        )


class RegistrationFailed(TransportError):
    """Raised when registering an asset upload fails at the HTTP level."""

    pass


class UploadFailed(TransportError):
    """Raised when streaming media to the upload URL fails."""

    pass


class MalformedResponse(LinkedInError):
    """Raised when a successful response lacks fields the API promises.

    Examples:
        - registerUpload response without ``uploadMechanism``
        - empty mechanism mapping, missing ``uploadUrl`` or ``asset``
        - body that is not JSON
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize malformed response error.

        Args:
            message: Human-readable error message
            field: Name of the missing or invalid field
            details: Optional additional context
        """
        super().__init__(message, details)
        self.field = field

    def __str__(self) -> str:
        """Return string representation with the offending field."""
        base = self.message
        if self.field:
            base = f"{base} (field: {self.field})"
        if self.details:
            base = f"{base}\nDetails: {self.details}"
        return base


class ResourceError(LinkedInError):
    """Raised when a media source cannot be opened, downloaded or measured."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.source = source

    def __str__(self) -> str:
        base = self.message
        if self.source:
            base = f"{base} (source: {self.source})"
        if self.details:
            base = f"{base}\nDetails: {self.details}"
        return base
