"""Entry point: one authenticated Client exposing every resource."""

from __future__ import annotations

import logging
from types import TracebackType

from spoticlient.application.clients.albums import AlbumsClient
from spoticlient.application.clients.artists import ArtistsClient
from spoticlient.application.clients.playlists import PlaylistsClient
from spoticlient.application.clients.tracks import TracksClient
from spoticlient.application.clients.user_client import UserClient
from spoticlient.application.clients.users import UsersClient
from spoticlient.config.settings import Settings, get_settings
from spoticlient.infrastructure.error_handling import ErrorTranslator
from spoticlient.infrastructure.integrations.http_client import HttpUtil

logger = logging.getLogger(__name__)


class Client:
    """Authenticated access to the Spotify Web API.

    Owns the HTTP util and the error translator every resource client shares.
    Entities returned by this Client only keep a weak reference to it, so keep
    the Client alive while you use them.

    Usage:
        async with Client("token") as client:
            artist = await client.artists.get("0OdUWJ0sBjDrqHygGUXeCF")
            await client.user.info()
    """

    def __init__(self, token: str, settings: Settings | None = None) -> None:
        """
        Initialize the client.

        Args:
            token: Spotify OAuth access token
            settings: Client settings, defaults to ``get_settings()`` (environment)

        Raises:
            ConfigurationError: If the token is empty
        """
        self.settings = settings or get_settings()
        self.util = HttpUtil(token, self.settings)
        self.errors = ErrorTranslator(self.settings.throw_errors)

        self.artists = ArtistsClient(self)
        self.albums = AlbumsClient(self)
        self.tracks = TracksClient(self)
        self.playlists = PlaylistsClient(self)
        self.users = UsersClient(self)
        self.user = UserClient(self)

        logger.debug(
            "Created Spotify client (base_url=%s, throw_errors=%s)",
            self.settings.api_base_url,
            self.settings.throw_errors,
        )

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self.util.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
