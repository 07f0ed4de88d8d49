"""HTTP util every resource client sends its requests through."""

import logging
from typing import Any

import httpx

from spoticlient.config.settings import Settings
from spoticlient.domain.exceptions import ConfigurationError, TransportError
from spoticlient.domain.ports import IHttpClient

logger = logging.getLogger(__name__)


class HttpUtil(IHttpClient):
    """Thin wrapper around httpx for the Spotify Web API.

    Joins request paths onto ``settings.api_base_url``, injects the bearer token,
    serializes JSON bodies and decodes JSON responses. Non-2xx responses and
    transport failures are raised as TransportError - deciding what to do about
    them is the resource clients' job, not ours.
    """

    # Hey future me, we DON'T create the httpx.AsyncClient in __init__ - creating it outside a
    # running event loop gives weird asyncio issues. It's lazy-loaded in _get_client() instead.
    def __init__(self, token: str, settings: Settings) -> None:
        """
        Initialize the HTTP util.

        Args:
            token: Spotify OAuth access token
            settings: Client settings (base URL, timeout)

        Raises:
            ConfigurationError: If the token is empty
        """
        if not token or not token.strip():
            raise ConfigurationError("Spotify access token must not be empty")
        self._token = token.strip()
        self.settings = settings
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.api_base_url,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                },
                timeout=self.settings.timeout,
            )
        return self._client

    # Hey, call this when you're done (or use the Client as an async context manager). An
    # unclosed AsyncClient leaks connections.
    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(
        self,
        path: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            path: Endpoint path relative to the API base URL (e.g. "/me/albums")
            method: HTTP method
            params: Query parameters, None values are dropped
            body: JSON serializable request body
            headers: Extra request headers

        Returns:
            Decoded JSON, or None when the response has no body

        Raises:
            TransportError: On non-2xx responses or network failures
        """
        client = await self._get_client()
        query = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug("Spotify %s %s params=%s", method, path, query)

        try:
            response = await client.request(
                method=method,
                url=path,
                params=query or None,
                json=body,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise TransportError(
                f"Spotify {method} {path} failed: {e}",
                url=path,
                detail=str(e),
            ) from e

        if response.is_error:
            detail = self._error_detail(response)
            raise TransportError(
                f"Spotify {method} {path} returned {response.status_code}: {detail}",
                status_code=response.status_code,
                url=str(response.request.url),
                detail=detail,
            )

        # PUT/DELETE on library endpoints answer with an empty 200/204
        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Spotify {method} {path} returned invalid JSON",
                status_code=response.status_code,
                url=str(response.request.url),
                detail=str(e),
            ) from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Pull the message out of Spotify's ``{"error": {"status", "message"}}`` body."""
        try:
            data = response.json()
        except ValueError:
            return response.text or response.reason_phrase

        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict):
            return str(error.get("message") or response.reason_phrase)
        # Token endpoint style: {"error": "invalid_client", "error_description": "..."}
        if isinstance(error, str):
            return str(data.get("error_description") or error)
        return response.reason_phrase
