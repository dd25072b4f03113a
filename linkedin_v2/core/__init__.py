"""Core abstractions, configuration and errors for the LinkedIn client."""

from linkedin_v2.core.protocols import TokenProvider, HTTPConnection, HTTPResponse
from linkedin_v2.core.exceptions import (
    LinkedInError,
    AuthenticationError,
    ConfigurationError,
    TransportError,
    RegistrationFailed,
    UploadFailed,
    MalformedResponse,
    ResourceError,
)
from linkedin_v2.core.config import LinkedInConfig

__all__ = [
    # Protocols
    "TokenProvider",
    "HTTPConnection",
    "HTTPResponse",
    # Exceptions
    "LinkedInError",
    "AuthenticationError",
    "ConfigurationError",
    "TransportError",
    "RegistrationFailed",
    "UploadFailed",
    "MalformedResponse",
    "ResourceError",
    # Configuration
    "LinkedInConfig",
]
