"""Tests for the top-level Client."""

import pytest
from pytest_httpx import HTTPXMock

from spoticlient.application.clients import (
    AlbumsClient,
    ArtistsClient,
    Client,
    PlaylistsClient,
    TracksClient,
    UserClient,
    UsersClient,
)
from spoticlient.config.settings import Settings
from spoticlient.domain.exceptions import ConfigurationError

from records import API, artist_record


class TestClient:
    """Test Client wiring."""

    def test_resource_clients(self, client: Client) -> None:
        assert isinstance(client.artists, ArtistsClient)
        assert isinstance(client.albums, AlbumsClient)
        assert isinstance(client.tracks, TracksClient)
        assert isinstance(client.playlists, PlaylistsClient)
        assert isinstance(client.users, UsersClient)
        assert isinstance(client.user, UserClient)
        assert client.user.client is client

    def test_throw_errors_comes_from_settings(
        self, client: Client, throwing_client: Client
    ) -> None:
        assert client.errors.throw_errors is False
        assert throwing_client.errors.throw_errors is True

    def test_empty_token(self, settings: Settings) -> None:
        with pytest.raises(ConfigurationError):
            Client("", settings)

    @pytest.mark.asyncio
    async def test_context_manager_closes(
        self, settings: Settings, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(url=f"{API}/artists/a1", json=artist_record("a1", full=True))

        async with Client("test-token", settings) as client:
            artist = await client.artists.get("a1")
            assert artist.popularity == 61
            assert client.util._client is not None

        assert client.util._client is None
