"""Token providers for OAuth bearer authentication.

Tokens are obtained outside this package (LinkedIn's OAuth flow); providers
only hand an existing token to the connection. Refreshing is not supported.
"""

from pathlib import Path
from typing import Dict, Any, Union

import yaml
from loguru import logger

from linkedin_v2.core.exceptions import AuthenticationError


class StaticTokenProvider:
    """Token provider returning a token fixed at construction time."""

    def __init__(self, access_token: str):
        self._access_token = access_token

    def get_access_token(self) -> str:
        """Get the configured access token.

        Raises:
            AuthenticationError: If the token is empty
        """
        if not self._access_token:
            raise AuthenticationError("No LinkedIn access token configured")
        return self._access_token


class FileBasedTokenProvider:
    """Token provider that reads credentials from a YAML file.

    Expected layout::

        linkedin:
          access_token: AQV...
    """

    def __init__(self, credentials_file: Union[str, Path], platform: str = "linkedin"):
        """Initialize file-based token provider.

        Args:
            credentials_file: Path to credentials YAML file
            platform: Section of the file holding the credentials

        Raises:
            AuthenticationError: If the file or section cannot be loaded
        """
        self.platform = platform.lower()
        self.credentials_file = Path(credentials_file)
        self._credentials = self._load_credentials()

        logger.info(f"FileBasedTokenProvider initialized for {self.platform}")

    def _load_credentials(self) -> Dict[str, Any]:
        """Load the platform section from the credentials file.

        Raises:
            AuthenticationError: If credentials file not found or invalid
        """
        details = {"platform": self.platform, "file": str(self.credentials_file)}

        if not self.credentials_file.exists():
            raise AuthenticationError(
                f"Credentials file not found: {self.credentials_file}",
                details=details
            )

        try:
            with open(self.credentials_file, "r", encoding="utf-8") as f:
                all_credentials = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise AuthenticationError(
                f"Failed to load credentials file: {e}",
                details=details
            ) from e

        credentials = all_credentials.get(self.platform) if isinstance(all_credentials, dict) else None
        if not isinstance(credentials, dict):
            raise AuthenticationError(
                f"Platform '{self.platform}' not found in credentials file",
                details=details
            )

        return credentials

    def get_access_token(self) -> str:
        """Get access token for the platform.

        Raises:
            AuthenticationError: If token not found
        """
        token = self._credentials.get("access_token")

        if not token:
            raise AuthenticationError(
                f"No access_token found for platform: {self.platform}",
                details={"platform": self.platform}
            )

        return str(token)
