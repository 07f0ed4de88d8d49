"""Port interfaces (abstractions) the resource clients depend on."""

from abc import ABC, abstractmethod
from typing import Any


class IHttpClient(ABC):
    """Interface for the HTTP util that talks to the Spotify Web API."""

    @abstractmethod
    async def fetch(
        self,
        path: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Args:
            path: Endpoint path relative to the API base URL
            method: HTTP method (defaults to GET)
            params: Query parameters
            body: JSON request body
            headers: Extra request headers

        Returns:
            Decoded JSON, or None for empty responses

        Raises:
            TransportError: On non-2xx responses or network failures
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass
