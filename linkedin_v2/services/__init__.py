"""Share and asset services."""

from linkedin_v2.services.share_composer import ShareComposer
from linkedin_v2.services.asset_uploader import AssetUploader
from linkedin_v2.services.media_source import MediaSource, open_media

__all__ = [
    "ShareComposer",
    "AssetUploader",
    "MediaSource",
    "open_media",
]
