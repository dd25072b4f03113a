"""Constants for the LinkedIn v2 Integrations client.

LinkedIn's v2 API is inconsistent about where fields go (body vs. URL) and
which paths carry the version prefix. The values below are the combinations
known to work; change them only against a live account.
"""

from typing import Final, Dict, Any


# API constants
LINKEDIN_API_BASE_URL: Final[str] = "https://api.linkedin.com/v2"
RESTLI_PROTOCOL_VERSION: Final[str] = "2.0.0"
REQUEST_TIMEOUT_SECONDS: Final[int] = 30
DEFAULT_UPLOAD_TIMEOUT_SECONDS: Final[int] = 300
DOWNLOAD_CHUNK_SIZE: Final[int] = 64 * 1024

# Endpoint paths
UGC_POSTS_PATH: Final[str] = "/ugcPosts"
REGISTER_UPLOAD_PATH: Final[str] = "/v2/assets?action=registerUpload"

# Headers
HEADER_CONTENT_TYPE: Final[str] = "Content-Type"
HEADER_LI_FORMAT: Final[str] = "x-li-format"
HEADER_RESTLI_ID: Final[str] = "x-restli-id"
CONTENT_TYPE_JSON: Final[str] = "application/json"
CONTENT_TYPE_OCTET_STREAM: Final[str] = "application/octet-stream"

DEFAULT_HEADERS: Final[Dict[str, str]] = {
    HEADER_LI_FORMAT: "json",
    "X-Restli-Protocol-Version": RESTLI_PROTOCOL_VERSION,
    "Accept": CONTENT_TYPE_JSON,
}

# UGC share defaults, merged under caller options
SHARE_DEFAULTS: Final[Dict[str, Any]] = {
    "lifecycleState": "PUBLISHED",
    "visibility": {
        "com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC",
    },
}
SHARE_CONTENT_KEY: Final[str] = "com.linkedin.ugc.ShareContent"

# Asset registration
FEEDSHARE_IMAGE_RECIPE: Final[str] = "urn:li:digitalmediaRecipe:feedshare-image"
OWNER_RELATIONSHIP_TYPE: Final[str] = "OWNER"
UGC_RELATIONSHIP_IDENTIFIER: Final[str] = "urn:li:userGeneratedContent"

# Environment variable names
ENV_ACCESS_TOKEN: Final[str] = "LINKEDIN_ACCESS_TOKEN"
ENV_API_BASE_URL: Final[str] = "LINKEDIN_API_BASE_URL"
ENV_TIMEOUT: Final[str] = "LINKEDIN_TIMEOUT"
ENV_UPLOAD_TIMEOUT: Final[str] = "LINKEDIN_UPLOAD_TIMEOUT"
ENV_PERSON_URN: Final[str] = "LINKEDIN_PERSON_URN"
