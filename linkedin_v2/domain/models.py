"""Domain models for the LinkedIn Integrations API.

Request models know the exact body shape each endpoint accepts; response
models know how to pull the useful fields out of what LinkedIn returns.
"""

import json
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping

from loguru import logger

from linkedin_v2.core.constants import (
    SHARE_DEFAULTS,
    SHARE_CONTENT_KEY,
    FEEDSHARE_IMAGE_RECIPE,
    OWNER_RELATIONSHIP_TYPE,
    UGC_RELATIONSHIP_IDENTIFIER,
)
from linkedin_v2.core.exceptions import MalformedResponse


class Mash(dict):
    """Dictionary with attribute access to its keys.

    Nested dictionaries (also inside lists) are converted on construction,
    so ``post.specificContent`` and ``post["specificContent"]`` are the same
    object.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for key, value in self.items():
            super().__setitem__(key, self._convert(value))

    @classmethod
    def _convert(cls, value: Any) -> Any:
        if isinstance(value, dict) and not isinstance(value, Mash):
            return cls(value)
        if isinstance(value, list):
            return [cls._convert(item) for item in value]
        return value

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'Mash' object has no attribute '{name}'")

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(key, self._convert(value))

    __setattr__ = __setitem__

    @classmethod
    def from_json(cls, text: str) -> "Mash":
        """Parse a JSON object into a Mash.

        Raises:
            ValueError: If the text is not JSON or not a JSON object
        """
        payload = json.loads(text)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        return cls(payload)


def merge_share_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Lay caller options over the share defaults.

    The merge is shallow: a caller ``visibility`` replaces the default one
    entirely. The module-level defaults are copied, never mutated.
    """
    merged = deepcopy(SHARE_DEFAULTS)
    merged.update(options)
    return merged


@dataclass
class ShareRequest:
    """Typed view of the fields accepted by ``POST /ugcPosts``.

    Only fields that are set end up in the request; everything else falls
    back to the share defaults. ``extra`` carries fields this class does not
    model yet and wins over the typed fields on key collision.
    """

    author: Optional[str] = None
    lifecycle_state: Optional[str] = None
    visibility: Optional[Dict[str, Any]] = None
    specific_content: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_options(self) -> Dict[str, Any]:
        """Return the set fields under their API names."""
        options = {
            "author": self.author,
            "lifecycleState": self.lifecycle_state,
            "specificContent": self.specific_content,
            "visibility": self.visibility,
        }
        options = {k: v for k, v in options.items() if v is not None}
        options.update(self.extra)
        return options

    @classmethod
    def text(cls, author: str, text: str, **kwargs) -> "ShareRequest":
        """Build a text-only share."""
        return cls(
            author=author,
            specific_content={
                SHARE_CONTENT_KEY: {
                    "shareCommentary": {"text": text},
                    "shareMediaCategory": "NONE",
                }
            },
            **kwargs,
        )

    @classmethod
    def image(cls, author: str, text: str, asset: str, **kwargs) -> "ShareRequest":
        """Build a share with one uploaded image asset attached."""
        return cls(
            author=author,
            specific_content={
                SHARE_CONTENT_KEY: {
                    "shareCommentary": {"text": text},
                    "shareMediaCategory": "IMAGE",
                    "media": [{"status": "READY", "media": asset}],
                }
            },
            **kwargs,
        )


@dataclass(frozen=True)
class AssetUploadRequest:
    """Body of ``POST /v2/assets?action=registerUpload`` for a feed image."""

    owner: str

    def to_body(self) -> Dict[str, Any]:
        return {
            "registerUploadRequest": {
                "recipes": [FEEDSHARE_IMAGE_RECIPE],
                "owner": self.owner,
                "serviceRelationships": [
                    {
                        "relationshipType": OWNER_RELATIONSHIP_TYPE,
                        "identifier": UGC_RELATIONSHIP_IDENTIFIER,
                    }
                ],
            }
        }


@dataclass(frozen=True)
class AssetRegistration:
    """Upload target and asset URN returned by ``registerUpload``."""

    upload_url: str
    asset: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "AssetRegistration":
        """Extract the upload URL and asset URN from a registration response.

        LinkedIn nests the result under ``value``; a payload without it is read
        from the top level. The mechanism key is itself a URN-like string
        that is not relied on: exactly one mechanism is expected, and when
        several are present the first one in response order is used.

        Args:
            payload: Parsed JSON body

        Returns:
            AssetRegistration instance

        Raises:
            MalformedResponse: If any expected field is missing or empty
        """
        value = payload.get("value", payload)
        if not isinstance(value, Mapping):
            raise MalformedResponse("Registration response 'value' is not an object", field="value")

        mechanisms = value.get("uploadMechanism")
        if not isinstance(mechanisms, Mapping) or not mechanisms:
            raise MalformedResponse(
                "Registration response has no upload mechanism",
                field="uploadMechanism",
                details={"keys": sorted(value.keys())},
            )

        if len(mechanisms) > 1:
            logger.warning(
                f"Registration returned {len(mechanisms)} upload mechanisms, using the first: "
                f"{next(iter(mechanisms))}"
            )

        mechanism = next(iter(mechanisms.values()))
        upload_url = mechanism.get("uploadUrl") if isinstance(mechanism, Mapping) else None
        if not upload_url:
            raise MalformedResponse(
                "Upload mechanism has no uploadUrl",
                field="uploadUrl",
                details={"mechanism": next(iter(mechanisms))},
            )

        asset = value.get("asset")
        if not asset:
            raise MalformedResponse("Registration response has no asset URN", field="asset")

        return cls(upload_url=upload_url, asset=asset)
