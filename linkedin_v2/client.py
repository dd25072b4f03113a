"""Facade over the LinkedIn v2 Integrations API.

LinkedIn's v2 API adherence to its documentation is shaky. Some calls only
work with fields in the body, others only with URL parameters, and the
registered upload endpoint rejects headers every other endpoint accepts.
The request shapes used by the services are the combinations that work.
"""

from typing import Any, Mapping, Optional, Union

from loguru import logger

from linkedin_v2.core.config import LinkedInConfig
from linkedin_v2.core.constants import DEFAULT_UPLOAD_TIMEOUT_SECONDS
from linkedin_v2.core.exceptions import ConfigurationError
from linkedin_v2.core.protocols import HTTPConnection, TokenProvider
from linkedin_v2.domain.models import Mash, ShareRequest
from linkedin_v2.infrastructure.http_client import LinkedInConnection
from linkedin_v2.infrastructure.token_provider import StaticTokenProvider
from linkedin_v2.services.asset_uploader import AssetUploader
from linkedin_v2.services.media_source import Source
from linkedin_v2.services.share_composer import ShareComposer


class LinkedInClient:
    """Entry point bundling the share and asset services over one connection."""

    def __init__(
        self,
        connection: HTTPConnection,
        upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT_SECONDS,
        default_author: Optional[str] = None,
    ):
        """Initialize the client.

        Args:
            connection: Authenticated connection used by every call
            upload_timeout: Default timeout for media uploads, in seconds
            default_author: URN used as share ``author`` and asset ``owner``
                when the caller does not give one
        """
        self.connection = connection
        self.upload_timeout = upload_timeout
        self.default_author = default_author
        self.shares = ShareComposer(connection)
        self.assets = AssetUploader(connection)

    @classmethod
    def from_config(
        cls,
        config: LinkedInConfig,
        token_provider: Optional[TokenProvider] = None,
    ) -> "LinkedInClient":
        """Build a client from configuration.

        Args:
            config: Connection settings; ``person_urn`` becomes the default author
            token_provider: Token source; defaults to the configured access token

        Returns:
            LinkedInClient instance
        """
        connection = LinkedInConnection(
            token_provider=token_provider or StaticTokenProvider(config.access_token),
            api_base_url=config.api_base_url,
            timeout=config.timeout,
        )
        logger.info(f"LinkedIn client ready for {config.api_base_url}")
        return cls(connection, upload_timeout=config.upload_timeout, default_author=config.person_urn)

    def create_share(self, options: Optional[Union[Mapping[str, Any], ShareRequest]] = None) -> Mash:
        """Create one UGC post. See ``ShareComposer.create_share``.

        The default author is filled in only when the options carry none.
        """
        if isinstance(options, ShareRequest):
            options = options.to_options()
        options = dict(options or {})
        if self.default_author and "author" not in options:
            options["author"] = self.default_author
        return self.shares.create_share(options)

    def upload_asset(
        self,
        source_url: Source,
        owner: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """Upload a media asset and return its URN. See ``AssetUploader.upload_asset``.

        Raises:
            ConfigurationError: If no owner is given and no default author is configured
        """
        owner = owner or self.default_author
        if not owner:
            raise ConfigurationError("Asset owner is required (pass owner or set LINKEDIN_PERSON_URN)")
        return self.assets.upload_asset(
            source_url,
            owner,
            timeout=self.upload_timeout if timeout is None else timeout,
        )
