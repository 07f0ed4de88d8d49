"""Tests for the artists client."""

from unittest.mock import AsyncMock

import pytest

from spoticlient.application.clients.client import Client
from spoticlient.domain.entities import Album, Artist, Paging
from spoticlient.domain.exceptions import RecordDecodeError, TransportError, UnexpectedError

from records import album_record, artist_record, paging_record, track_record


class TestArtistsClient:
    """Test ArtistsClient."""

    async def test_get(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(
            client.util, "fetch", new=AsyncMock(return_value=artist_record("a1", full=True))
        )

        artist = await client.artists.get("a1")

        fetch.assert_awaited_once_with("/artists/a1")
        assert isinstance(artist, Artist)
        assert artist.simplified is False

    async def test_get_failure_returns_none(self, client: Client, mocker) -> None:
        mocker.patch.object(
            client.util, "fetch", new=AsyncMock(side_effect=TransportError("x", status_code=404))
        )

        assert await client.artists.get("missing") is None

    async def test_get_failure_raises(self, throwing_client: Client, mocker) -> None:
        mocker.patch.object(
            throwing_client.util,
            "fetch",
            new=AsyncMock(side_effect=TransportError("x", status_code=404)),
        )

        with pytest.raises(UnexpectedError):
            await throwing_client.artists.get("missing")

    async def test_get_several_skips_unknown_ids(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(
            client.util,
            "fetch",
            new=AsyncMock(
                return_value={"artists": [artist_record("a1", full=True), None]}
            ),
        )

        artists = await client.artists.get_several("a1", "nope")

        fetch.assert_awaited_once_with("/artists", params={"ids": "a1,nope"})
        assert [a.id for a in artists] == ["a1"]

    async def test_get_several_without_ids(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(client.util, "fetch", new=AsyncMock())

        assert await client.artists.get_several() == []
        fetch.assert_not_awaited()

    async def test_get_albums(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(
            client.util,
            "fetch",
            new=AsyncMock(return_value=paging_record([album_record("al1")], limit=1, total=9)),
        )

        page = await client.artists.get_albums("a1", limit=1, include_groups="album,single")

        fetch.assert_awaited_once_with(
            "/artists/a1/albums", params={"limit": 1, "include_groups": "album,single"}
        )
        assert page.total == 9
        assert isinstance(page.items[0], Album)

    async def test_get_albums_failure(self, client: Client, mocker) -> None:
        mocker.patch.object(
            client.util, "fetch", new=AsyncMock(side_effect=TransportError("x", status_code=500))
        )

        assert await client.artists.get_albums("a1") == Paging.empty()

    async def test_get_top_tracks_default_market(self, client: Client, mocker) -> None:
        fetch = mocker.patch.object(
            client.util,
            "fetch",
            new=AsyncMock(return_value={"tracks": [track_record("t1", full=True)]}),
        )

        tracks = await client.artists.get_top_tracks("a1")

        fetch.assert_awaited_once_with("/artists/a1/top-tracks", params={"market": "US"})
        assert tracks[0].album.id == "al1"

    async def test_get_related_artists(self, client: Client, mocker) -> None:
        mocker.patch.object(
            client.util,
            "fetch",
            new=AsyncMock(
                return_value={"artists": [artist_record("a2", full=True), artist_record("a3", full=True)]}
            ),
        )

        related = await client.artists.get_related_artists("a1")

        assert [a.id for a in related] == ["a2", "a3"]

    async def test_get_related_artists_failure(self, client: Client, mocker) -> None:
        mocker.patch.object(client.util, "fetch", new=AsyncMock(side_effect=TransportError("x")))

        assert await client.artists.get_related_artists("a1") == []

    @pytest.mark.parametrize(
        ("method_name", "payload"),
        [
            ("get_several", ["a1"]),
            ("get_several", {"artists": "a1"}),
            ("get_top_tracks", [{"id": "t1"}]),
            ("get_related_artists", {"items": []}),
        ],
    )
    async def test_unexpected_envelope_returns_empty_list(
        self, client: Client, mocker, method_name: str, payload
    ) -> None:
        mocker.patch.object(client.util, "fetch", new=AsyncMock(return_value=payload))

        assert await getattr(client.artists, method_name)("a1") == []

    async def test_unexpected_envelope_raises(self, throwing_client: Client, mocker) -> None:
        mocker.patch.object(throwing_client.util, "fetch", new=AsyncMock(return_value=["a1"]))

        with pytest.raises(UnexpectedError) as exc_info:
            await throwing_client.artists.get_related_artists("a1")

        assert isinstance(exc_info.value.cause, RecordDecodeError)
