"""HTTP connection and token providers."""

from linkedin_v2.infrastructure.http_client import LinkedInConnection
from linkedin_v2.infrastructure.token_provider import StaticTokenProvider, FileBasedTokenProvider

__all__ = [
    "LinkedInConnection",
    "StaticTokenProvider",
    "FileBasedTokenProvider",
]
