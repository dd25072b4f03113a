"""Authenticated HTTP connection to the LinkedIn v2 API.

This module keeps HTTP plumbing out of the services: URL resolution against
the API base, default LinkedIn headers, bearer token injection and turning
network failures or non-2xx statuses into ``TransportError``.

LinkedIn API specifics:
- Every API call is sent with ``x-li-format: json`` and the Rest.li protocol
  header. Callers remove a default header by passing it with a ``None`` value
  (the media upload endpoint rejects ``x-li-format``).
- Some documented paths already carry the ``/v2`` prefix and some do not;
  both resolve to the same versioned base.
"""

from typing import Dict, Any, Optional
from urllib.parse import urlsplit

import requests
from loguru import logger

from linkedin_v2.core.constants import (
    LINKEDIN_API_BASE_URL,
    REQUEST_TIMEOUT_SECONDS,
    DEFAULT_HEADERS,
)
from linkedin_v2.core.exceptions import TransportError
from linkedin_v2.core.protocols import TokenProvider, Timeout


class LinkedInConnection:
    """HTTP connection for the LinkedIn v2 API.

    The connection holds no per-call state besides the underlying
    ``requests.Session``; whether one instance may be shared across threads
    is up to ``requests``. No retry adapter is mounted, a failed request
    fails once.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        api_base_url: str = LINKEDIN_API_BASE_URL,
        timeout: Timeout = REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the connection.

        Args:
            token_provider: Provider for the OAuth2 access token
            api_base_url: Base URL that relative paths are resolved against
            timeout: Default timeout for API calls, in seconds
            session: Optional pre-built session (defaults to a new one)
        """
        self.token_provider = token_provider
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)

        logger.debug(f"LinkedInConnection initialized for {self.api_base_url}")

    def resolve_url(self, path: str) -> str:
        """Resolve an API path or absolute URL to a full URL.

        Args:
            path: Absolute ``http(s)`` URL, or a path such as ``/ugcPosts``
                or ``/v2/assets?action=registerUpload``

        Returns:
            Full request URL
        """
        if path.startswith(("http://", "https://")):
            return path

        base = urlsplit(self.api_base_url)
        prefix = base.path.rstrip("/")
        if prefix and (path == prefix or path.startswith(f"{prefix}/")):
            return f"{base.scheme}://{base.netloc}{path}"

        return f"{self.api_base_url}/{path.lstrip('/')}"

    def _build_headers(self, additional_headers: Optional[Dict[str, Optional[str]]] = None) -> Dict[str, Optional[str]]:
        """Build per-request headers including authentication.

        Args:
            additional_headers: Optional headers to merge; ``None`` values
                remove the session default of the same name

        Returns:
            Headers dictionary
        """
        headers: Dict[str, Optional[str]] = {
            "Authorization": f"Bearer {self.token_provider.get_access_token()}",
        }

        if additional_headers:
            headers.update(additional_headers)

        return headers

    def post(
        self,
        path: str,
        data: Any = None,
        headers: Optional[Dict[str, Optional[str]]] = None,
        timeout: Optional[Timeout] = None,
    ) -> requests.Response:
        """Execute a POST request.

        Args:
            path: API path or absolute URL
            data: Serialized body, or a binary file object to stream
            headers: Additional headers
            timeout: Seconds or ``(connect, read)`` tuple; defaults to the
                connection timeout

        Returns:
            Response with a 2xx status

        Raises:
            TransportError: On network failure or non-2xx status
        """
        return self._request("POST", path, data=data, headers=headers, timeout=timeout)

    def _request(
        self,
        method: str,
        path: str,
        data: Any = None,
        headers: Optional[Dict[str, Optional[str]]] = None,
        timeout: Optional[Timeout] = None,
    ) -> requests.Response:
        """Execute an HTTP request and check its status.

        Raises:
            TransportError: On network failure or non-2xx status
        """
        url = self.resolve_url(path)
        effective_timeout = timeout if timeout is not None else self.timeout

        complete_headers = self._build_headers(headers)

        logger.debug(f"{method} {url} (timeout={effective_timeout})")

        try:
            response = self._session.request(
                method=method,
                url=url,
                data=data,
                headers=complete_headers,
                timeout=effective_timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"{method} {url} timed out after {effective_timeout}s")
            raise TransportError(
                f"Request timeout after {effective_timeout}s",
                details={"url": url, "method": method, "error": str(e)}
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(
                "Connection error",
                details={"url": url, "method": method, "error": str(e)}
            ) from e

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.error(f"{method} {url} returned HTTP {response.status_code}: {message}")
            raise TransportError(
                message,
                status_code=response.status_code,
                response_body=response.text,
                details={"url": url, "method": method},
            )

        logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pick LinkedIn's error message out of an error response, if any."""
        try:
            error_data = response.json()
        except ValueError:
            return "HTTP error"
        if isinstance(error_data, dict) and error_data.get("message"):
            return str(error_data["message"])
        return "HTTP error"
