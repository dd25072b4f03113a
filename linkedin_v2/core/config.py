"""Configuration for the LinkedIn client.

Precedence (highest to lowest):
1. Environment variables (and a local .env file)
2. The ``linkedin`` section of a YAML file
3. Defaults from ``core.constants``
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml
from loguru import logger

from shared.utils.env import get_env, get_env_float
from linkedin_v2.core.exceptions import ConfigurationError
from linkedin_v2.core.constants import (
    LINKEDIN_API_BASE_URL,
    REQUEST_TIMEOUT_SECONDS,
    DEFAULT_UPLOAD_TIMEOUT_SECONDS,
    ENV_ACCESS_TOKEN,
    ENV_API_BASE_URL,
    ENV_TIMEOUT,
    ENV_UPLOAD_TIMEOUT,
    ENV_PERSON_URN,
)
from linkedin_v2.utils.urn_utils import normalize_person_urn


@dataclass
class LinkedInConfig:
    """Connection settings for the LinkedIn API."""

    access_token: str
    api_base_url: str = LINKEDIN_API_BASE_URL
    timeout: float = REQUEST_TIMEOUT_SECONDS
    upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT_SECONDS
    person_urn: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.access_token:
            raise ConfigurationError(f"LinkedIn access token is required ({ENV_ACCESS_TOKEN})")
        if not isinstance(self.api_base_url, str) or not self.api_base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid API base URL: {self.api_base_url}",
                details={"api_base_url": self.api_base_url},
            )
        try:
            self.timeout = float(self.timeout)
            self.upload_timeout = float(self.upload_timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(
                "Timeouts must be numbers",
                details={"timeout": self.timeout, "upload_timeout": self.upload_timeout},
            )
        if self.timeout <= 0 or self.upload_timeout <= 0:
            raise ConfigurationError(
                "Timeouts must be positive",
                details={"timeout": self.timeout, "upload_timeout": self.upload_timeout},
            )
        self.api_base_url = self.api_base_url.rstrip("/")
        if self.person_urn is not None:
            self.person_urn = normalize_person_urn(str(self.person_urn))

    @classmethod
    def from_env(cls, defaults: Optional[Dict[str, Any]] = None) -> "LinkedInConfig":
        """Create configuration from environment variables.

        Args:
            defaults: Values used when the matching variable is unset

        Returns:
            LinkedInConfig instance

        Raises:
            ConfigurationError: If the access token is missing or a value is invalid
        """
        values = dict(defaults or {})

        try:
            env_values = {
                "access_token": get_env(ENV_ACCESS_TOKEN),
                "api_base_url": get_env(ENV_API_BASE_URL),
                "timeout": get_env_float(ENV_TIMEOUT),
                "upload_timeout": get_env_float(ENV_UPLOAD_TIMEOUT),
                "person_urn": get_env(ENV_PERSON_URN),
            }
        except ValueError as e:
            raise ConfigurationError(str(e))

        values.update({k: v for k, v in env_values.items() if v is not None})

        if not values.get("access_token"):
            raise ConfigurationError(f"Missing required environment variable: {ENV_ACCESS_TOKEN}")

        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "LinkedInConfig":
        """Create configuration from the ``linkedin`` section of a YAML file.

        Environment variables override values from the file.

        Args:
            path: YAML file path

        Returns:
            LinkedInConfig instance

        Raises:
            ConfigurationError: If the file is missing, invalid or incomplete
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML configuration: {config_path}",
                details={"error": str(e)}
            )

        section = yaml_config.get("linkedin")
        if not isinstance(section, dict):
            raise ConfigurationError(f"No 'linkedin' section in {config_path}")

        known = {"access_token", "api_base_url", "timeout", "upload_timeout", "person_urn"}
        unknown = set(section) - known
        if unknown:
            logger.warning(f"Ignoring unknown LinkedIn settings: {', '.join(sorted(unknown))}")

        return cls.from_env(defaults={k: v for k, v in section.items() if k in known})
