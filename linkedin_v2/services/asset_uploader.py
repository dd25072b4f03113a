"""Upload media assets for use in shares.

An upload is three strictly sequential stages, none of them retried:

1. register the upload and receive a signed upload URL plus the asset URN
2. extract both from the registration response
3. stream the media bytes to the upload URL

See https://docs.microsoft.com/en-us/linkedin/consumer/integrations/self-serve/share-on-linkedin#create-an-image-share
"""

import json

from loguru import logger

from linkedin_v2.core.constants import (
    REGISTER_UPLOAD_PATH,
    DEFAULT_UPLOAD_TIMEOUT_SECONDS,
    HEADER_CONTENT_TYPE,
    HEADER_LI_FORMAT,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_OCTET_STREAM,
)
from linkedin_v2.core.exceptions import (
    TransportError,
    RegistrationFailed,
    UploadFailed,
    MalformedResponse,
)
from linkedin_v2.core.protocols import HTTPConnection
from linkedin_v2.domain.models import Mash, AssetUploadRequest, AssetRegistration
from linkedin_v2.services.media_source import Source, open_media


class AssetUploader:
    """Registers and uploads feed image assets."""

    def __init__(self, connection: HTTPConnection):
        self.connection = connection

    def upload_asset(
        self,
        source_url: Source,
        owner: str,
        timeout: float = DEFAULT_UPLOAD_TIMEOUT_SECONDS,
    ) -> str:
        """Upload an image and return its asset URN.

        Args:
            source_url: Local path, ``file://`` or ``http(s)://`` URL, or open
                binary stream with the media content
            owner: URN of the entity that will own the asset
            timeout: Connect and read timeout for the upload, in seconds

        Returns:
            Asset URN, e.g. ``urn:li:digitalmediaAsset:C5522AQ...``

        Raises:
            RegistrationFailed: If registering the upload fails
            MalformedResponse: If the registration response lacks the upload URL or asset
            ResourceError: If the media source cannot be read
            UploadFailed: If streaming the media fails
        """
        registration = self.register_upload(owner)
        self._upload_media(registration.upload_url, source_url, timeout)

        logger.info(f"Uploaded asset {registration.asset}")
        return registration.asset

    def register_upload(self, owner: str) -> AssetRegistration:
        """Register an upload intent for ``owner``.

        Raises:
            RegistrationFailed: If the request fails
            MalformedResponse: If the response cannot be used
        """
        body = AssetUploadRequest(owner=owner).to_body()
        logger.debug(f"Registering asset upload for owner {owner}")

        try:
            response = self.connection.post(
                REGISTER_UPLOAD_PATH,
                json.dumps(body),
                headers={HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON},
            )
        except TransportError as e:
            raise RegistrationFailed.wrap("Asset upload registration failed", e) from e

        try:
            payload = Mash.from_json(response.text)
        except ValueError as e:
            raise MalformedResponse(
                "Registration response is not a JSON object",
                details={"body": (response.text or "")[:500]},
            ) from e

        return AssetRegistration.from_response(payload)

    def _upload_media(self, upload_url: str, source_url: Source, timeout: float) -> None:
        with open_media(source_url, timeout=timeout) as media:
            logger.debug(f"Uploading {media.length} bytes from {media.name}")
            headers = {
                "Accept": "*/*",
                "Content-Length": str(media.length),
                HEADER_CONTENT_TYPE: CONTENT_TYPE_OCTET_STREAM,
                HEADER_LI_FORMAT: None,
            }
            try:
                self.connection.post(
                    upload_url,
                    data=media.stream,
                    headers=headers,
                    timeout=(timeout, timeout),
                )
            except TransportError as e:
                raise UploadFailed.wrap("Media upload failed", e) from e
