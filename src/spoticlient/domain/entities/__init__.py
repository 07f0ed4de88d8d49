"""Domain entities: typed views over one decoded Spotify object each."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from spoticlient.domain.entities.paging import Paging
from spoticlient.domain.exceptions import ClientReleasedError
from spoticlient.domain.value_objects import Image, code_image_url
from spoticlient.infrastructure.integrations.schemas import decode, is_full

if TYPE_CHECKING:
    from spoticlient.application.clients.client import Client

E = TypeVar("E", bound="Entity")


# Hey future me - entities hold a WEAK reference to the Client that made them. The Client owns
# the HTTP connection and outlives the entities in normal use; an entity must never keep a
# dropped Client (and its socket) alive. If the Client is gone, delegating calls raise
# ClientReleasedError. Local accessors (name, images, make_code_image...) keep working.
class Entity:
    """Base class for entities built from a raw Spotify record.

    Subclasses set ``RECORD_TYPE`` and implement ``_apply`` (copy decoded fields
    onto self) and ``_get_fresh`` (fetch the same object again by id).
    """

    RECORD_TYPE: ClassVar[str]

    id: str | None
    uri: str
    simplified: bool

    def __init__(self, data: dict[str, Any], client: Client) -> None:
        """
        Build the entity from a raw record.

        Args:
            data: Raw decoded JSON object from the Spotify Web API
            client: Client that produced the record

        Raises:
            RecordDecodeError: If ``data`` doesn't have the shape of the record type
        """
        self._client_ref = weakref.ref(client)
        self._load(data)

    def _load(self, data: dict[str, Any]) -> None:
        # Every field is (re)assigned here, simplified or not, so a refresh never leaves
        # stale values behind.
        record = decode(self.RECORD_TYPE, data)
        self._data = data
        self.simplified = not is_full(record)
        self._apply(record)

    def _apply(self, record: Any) -> None:
        raise NotImplementedError

    async def _get_fresh(self: E) -> E | None:
        raise NotImplementedError

    @property
    def data(self) -> dict[str, Any]:
        """The raw record this entity was last built from."""
        return self._data

    @property
    def client(self) -> Client:
        """The owning Client.

        Raises:
            ClientReleasedError: If the Client has been garbage collected
        """
        client = self._client_ref()
        if client is None:
            raise ClientReleasedError(type(self).__name__, self.id)
        return client

    async def fetch(self: E) -> E | None:
        """Re-fetch this object by id and replace every field with the fresh values.

        Returns:
            self after the refresh, or None when the request failed and the
            Client is configured to suppress errors (fields stay untouched)

        Raises:
            UnexpectedError: If the request failed and the Client raises errors
        """
        fresh = await self._get_fresh()
        if fresh is None:
            return None
        self._load(fresh.data)
        return self

    def make_code_image(self, color: str = "1DB954") -> str:
        """Return the URL of the Spotify code image for this object (no network call).

        Args:
            color: Background hex color
        """
        return code_image_url(self.uri, color)

    def __repr__(self) -> str:
        name = getattr(self, "name", None)
        return (
            f"<{type(self).__name__} id={self.id!r} name={name!r} "
            f"simplified={self.simplified}>"
        )


def _images(records: list[Any] | None) -> list[Image]:
    return [Image(url=r.url, height=r.height, width=r.width) for r in records or []]


class Artist(Entity):
    """Spotify artist.

    Full-only fields (``total_followers``, ``genres``, ``popularity``) are None
    on simplified artists, e.g. the ones embedded in tracks and albums.
    """

    RECORD_TYPE = "artist"

    def _apply(self, record: Any) -> None:
        self.id = record.id
        self.name: str = record.name
        self.type: str = record.type
        self.uri = record.uri
        self.href: str | None = record.href
        self.external_urls: dict[str, str] = record.external_urls
        self.images: list[Image] = _images(record.images)

        if self.simplified:
            self.total_followers: int | None = None
            self.genres: list[str] | None = None
            self.popularity: int | None = None
        else:
            self.total_followers = record.followers.total
            self.genres = record.genres
            self.popularity = record.popularity

    async def _get_fresh(self) -> Artist | None:
        return await self.client.artists.get(self.id)

    async def get_albums(self, **options: Any) -> Paging[Album]:
        """Albums of this artist. Options are passed to ``ArtistsClient.get_albums``."""
        return await self.client.artists.get_albums(self.id, **options)

    async def get_top_tracks(self, market: str = "US") -> list[Track]:
        """Top tracks of this artist in ``market``."""
        return await self.client.artists.get_top_tracks(self.id, market=market)

    async def get_related_artists(self) -> list[Artist]:
        """Artists similar to this one."""
        return await self.client.artists.get_related_artists(self.id)


class Album(Entity):
    """Spotify album.

    Full-only fields (``genres``, ``label``, ``popularity``, ``copyrights``,
    ``external_ids``, ``tracks``) are None on simplified albums.
    """

    RECORD_TYPE = "album"

    def _apply(self, record: Any) -> None:
        client = self.client

        self.id = record.id
        self.name: str = record.name
        self.type: str = record.type
        self.uri = record.uri
        self.href: str | None = record.href
        self.album_type: str | None = record.album_type
        self.external_urls: dict[str, str] = record.external_urls
        self.artists: list[Artist] = [Artist(a, client) for a in record.artists]
        self.available_markets: list[str] = record.available_markets
        self.images: list[Image] = _images(record.images)
        self.release_date: str | None = record.release_date
        self.release_date_precision: str | None = record.release_date_precision
        self.total_tracks: int = record.total_tracks

        if self.simplified:
            self.copyrights: list[dict[str, str]] | None = None
            self.external_ids: dict[str, str] | None = None
            self.genres: list[str] | None = None
            self.label: str | None = None
            self.popularity: int | None = None
            self.tracks: Paging[Track] | None = None
        else:
            self.copyrights = record.copyrights
            self.external_ids = record.external_ids
            self.genres = record.genres
            self.label = record.label
            self.popularity = record.popularity
            self.tracks = Paging.from_record(record.tracks, lambda x: Track(x, client))

    async def _get_fresh(self) -> Album | None:
        return await self.client.albums.get(self.id)

    async def get_tracks(self, **options: Any) -> Paging[Track]:
        """Tracks of this album. Options are passed to ``AlbumsClient.get_tracks``."""
        return await self.client.albums.get_tracks(self.id, **options)


class Track(Entity):
    """Spotify track.

    Full-only fields (``album``, ``popularity``, ``external_ids``) are None on
    simplified tracks, e.g. the ones listed inside an album.
    """

    RECORD_TYPE = "track"

    def _apply(self, record: Any) -> None:
        client = self.client

        self.id = record.id
        self.name: str = record.name
        self.type: str = record.type
        self.uri = record.uri
        self.href: str | None = record.href
        self.external_urls: dict[str, str] = record.external_urls
        self.artists: list[Artist] = [Artist(a, client) for a in record.artists]
        self.available_markets: list[str] = record.available_markets
        self.disc_number: int = record.disc_number
        self.duration_ms: int = record.duration_ms
        self.explicit: bool = record.explicit
        self.is_local: bool = record.is_local
        self.is_playable: bool | None = record.is_playable
        self.preview_url: str | None = record.preview_url
        self.track_number: int | None = record.track_number

        if self.simplified:
            self.album: Album | None = None
            self.external_ids: dict[str, str] | None = None
            self.popularity: int | None = None
        else:
            self.album = Album(record.album, client)
            self.external_ids = record.external_ids
            self.popularity = record.popularity

    async def _get_fresh(self) -> Track | None:
        return await self.client.tracks.get(self.id)

    @property
    def artist_names(self) -> str:
        return ", ".join(artist.name for artist in self.artists)


class User(Entity):
    """Spotify public user profile.

    ``total_followers`` is None on simplified users (e.g. playlist owners).
    """

    RECORD_TYPE = "user"

    def _apply(self, record: Any) -> None:
        self.id = record.id
        self.name: str = record.display_name or record.id or ""
        self.display_name: str | None = record.display_name
        self.type: str = record.type
        self.uri = record.uri
        self.href: str | None = record.href
        self.external_urls: dict[str, str] = record.external_urls
        self.images: list[Image] = _images(record.images)
        self.total_followers: int | None = None if self.simplified else record.followers.total

    async def _get_fresh(self) -> User | None:
        return await self.client.users.get(self.id)

    async def get_playlists(self, **options: Any) -> Paging[Playlist]:
        """Public playlists of this user. Options are passed to ``UsersClient.get_playlists``."""
        return await self.client.users.get_playlists(self.id, **options)


@dataclass
class PlaylistTrack:
    """One item of a playlist: the track plus who added it and when.

    ``track`` is None for podcast episodes and for tracks Spotify no longer serves.
    """

    added_at: str | None
    added_by: User | None
    is_local: bool
    track: Track | None

    @classmethod
    def from_api(cls, data: dict[str, Any], client: Client) -> PlaylistTrack:
        item = data.get("track")
        added_by = data.get("added_by")
        return cls(
            added_at=data.get("added_at"),
            added_by=User(added_by, client) if added_by else None,
            is_local=bool(data.get("is_local", False)),
            track=Track(item, client) if item and item.get("type", "track") == "track" else None,
        )


class Playlist(Entity):
    """Spotify playlist.

    ``total_tracks`` is always set. Full-only fields (``total_followers``,
    ``tracks``) are None on simplified playlists.
    """

    RECORD_TYPE = "playlist"

    def _apply(self, record: Any) -> None:
        client = self.client

        self.id = record.id
        self.name: str = record.name
        self.type: str = record.type
        self.uri = record.uri
        self.href: str | None = record.href
        self.collaborative: bool = record.collaborative
        self.description: str | None = record.description
        self.external_urls: dict[str, str] = record.external_urls
        self.images: list[Image] = _images(record.images)
        self.owner: User | None = User(record.owner, client) if record.owner else None
        self.public: bool | None = record.public
        self.snapshot_id: str | None = record.snapshot_id

        if self.simplified:
            self.total_tracks: int = int(record.tracks.get("total", 0))
            self.total_followers: int | None = None
            self.tracks: Paging[PlaylistTrack] | None = None
        else:
            self.total_tracks = record.tracks.total
            self.total_followers = record.followers.total
            self.tracks = Paging.from_record(
                record.tracks, lambda x: PlaylistTrack.from_api(x, client)
            )

    async def _get_fresh(self) -> Playlist | None:
        return await self.client.playlists.get(self.id)

    async def get_tracks(self, **options: Any) -> Paging[PlaylistTrack]:
        """Items of this playlist. Options are passed to ``PlaylistsClient.get_tracks``."""
        return await self.client.playlists.get_tracks(self.id, **options)


__all__ = [
    "Album",
    "Artist",
    "Entity",
    "Image",
    "Paging",
    "Playlist",
    "PlaylistTrack",
    "Track",
    "User",
]
