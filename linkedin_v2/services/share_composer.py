"""Create UGC posts (shares).

See https://docs.microsoft.com/en-us/linkedin/consumer/integrations/self-serve/share-on-linkedin
"""

import json
from typing import Any, Mapping, Optional, Union

from loguru import logger

from linkedin_v2.core.constants import (
    UGC_POSTS_PATH,
    HEADER_CONTENT_TYPE,
    HEADER_RESTLI_ID,
    CONTENT_TYPE_JSON,
)
from linkedin_v2.core.exceptions import MalformedResponse
from linkedin_v2.core.protocols import HTTPConnection, HTTPResponse
from linkedin_v2.domain.models import Mash, ShareRequest, merge_share_options


class ShareComposer:
    """Builds and submits ``POST /ugcPosts`` requests.

    Personal shares may only be posted as the authorized member, so
    ``author`` must match the token owner. It is not checked here; LinkedIn
    rejects the request instead.
    """

    def __init__(self, connection: HTTPConnection):
        self.connection = connection

    def create_share(self, options: Optional[Union[Mapping[str, Any], ShareRequest]] = None) -> Mash:
        """Create one UGC post.

        Args:
            options: Share fields, e.g. ``author`` (URN of the posting
                entity) and ``specificContent``. Top-level keys replace the
                defaults (``lifecycleState``, ``visibility``) wholesale.

        Returns:
            The response body as a Mash; when LinkedIn answers with an empty
            body, a Mash holding the ``id`` from the ``x-restli-id`` header

        Raises:
            TransportError: If the request fails, unmodified from the connection
            MalformedResponse: If a non-empty body is not a JSON object
        """
        if isinstance(options, ShareRequest):
            options = options.to_options()

        body = merge_share_options(options or {})
        logger.debug(f"Creating UGC post for author {body.get('author')}")

        response = self.connection.post(
            UGC_POSTS_PATH,
            json.dumps(body),
            headers={HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON},
        )

        result = self._parse_response(response)
        logger.info(f"Created UGC post {result.get('id')}")
        return result

    @staticmethod
    def _parse_response(response: HTTPResponse) -> Mash:
        result = Mash()
        if response.text and response.text.strip():
            try:
                result = Mash.from_json(response.text)
            except ValueError as e:
                raise MalformedResponse(
                    "UGC post response is not a JSON object",
                    details={"body": response.text[:500]},
                ) from e

        post_id = response.headers.get(HEADER_RESTLI_ID)
        if post_id and "id" not in result:
            result["id"] = post_id
        return result
