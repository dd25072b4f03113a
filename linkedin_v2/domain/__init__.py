"""Request and response models for the LinkedIn client."""

from linkedin_v2.domain.models import (
    Mash,
    ShareRequest,
    AssetUploadRequest,
    AssetRegistration,
    merge_share_options,
)

__all__ = [
    "Mash",
    "ShareRequest",
    "AssetUploadRequest",
    "AssetRegistration",
    "merge_share_options",
]
