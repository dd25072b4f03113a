"""
Client for LinkedIn's v2 Integrations (share on LinkedIn) API.
Creates UGC posts and uploads media assets.
"""

from dotenv import load_dotenv

# Load .env file if it exists (important for local development)
load_dotenv()

from linkedin_v2.client import LinkedInClient
from linkedin_v2.core.config import LinkedInConfig
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
from linkedin_v2.domain.models import Mash, ShareRequest

__all__ = [
    "LinkedInClient",
    "LinkedInConfig",
    "LinkedInError",
    "AuthenticationError",
    "ConfigurationError",
    "TransportError",
    "RegistrationFailed",
    "UploadFailed",
    "MalformedResponse",
    "ResourceError",
    "Mash",
    "ShareRequest",
]
