"""Protocol definitions (interfaces) for the LinkedIn client.

Services depend on these interfaces rather than on ``requests`` directly,
so tests can drive them with fakes.
"""

from typing import Protocol, Dict, Any, Mapping, Optional, Union, Tuple

Timeout = Union[float, Tuple[float, float]]


class TokenProvider(Protocol):
    """Interface for providing authentication tokens."""

    def get_access_token(self) -> str:
        """Retrieve the current access token.

        Returns:
            str: Valid access token

        Raises:
            AuthenticationError: If token retrieval fails
        """
        ...


class HTTPResponse(Protocol):
    """The parts of an HTTP response the services read."""

    status_code: int
    headers: Mapping[str, str]
    text: str
    content: bytes


class HTTPConnection(Protocol):
    """Interface for an authenticated connection to the LinkedIn API."""

    def post(
        self,
        path: str,
        data: Any = None,
        headers: Optional[Dict[str, Optional[str]]] = None,
        timeout: Optional[Timeout] = None,
    ) -> HTTPResponse:
        """Execute a POST request.

        Args:
            path: API path relative to the base URL, or an absolute URL
            data: Request body (serialized string/bytes or a binary stream)
            headers: Extra headers; a None value removes a default header
            timeout: Seconds, or a (connect, read) tuple

        Returns:
            Response with a 2xx status

        Raises:
            TransportError: On network failure or non-2xx status
        """
        ...
