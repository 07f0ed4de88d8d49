"""Tests for the tracks client."""

from unittest.mock import AsyncMock

from spoticlient.application.clients.client import Client
from spoticlient.domain.exceptions import TransportError

from records import track_record


class TestTracksClient:
    """Test TracksClient."""

    async def test_get(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(
            client.util, "fetch", new=AsyncMock(return_value=track_record("t1", full=True))
        )

        track = await client.tracks.get("t1")

        fetch.assert_awaited_once_with("/tracks/t1", params={})
        assert track.id == "t1"
        assert track.simplified is False

    async def test_get_several_with_market(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(
            client.util,
            "fetch",
            new=AsyncMock(return_value={"tracks": [track_record("t1", full=True)]}),
        )

        tracks = await client.tracks.get_several("t1", market="US")

        fetch.assert_awaited_once_with("/tracks", params={"ids": "t1", "market": "US"})
        assert len(tracks) == 1

    async def test_get_several_failure(self, client: Client, mocker) -> None:
        mocker.patch.object(client.util, "fetch", new=AsyncMock(side_effect=TransportError("x")))

        assert await client.tracks.get_several("t1") == []

    async def test_get_several_unexpected_envelope(self, client: Client, mocker) -> None:
        mocker.patch.object(client.util, "fetch", new=AsyncMock(return_value=["t1"]))

        assert await client.tracks.get_several("t1") == []
