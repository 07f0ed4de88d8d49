"""Pydantic schemas for raw Spotify Web API objects.

Hey future me - Spotify returns two shapes for most objects: a "simplified" one (embedded in
other objects, search results, list endpoints) and a "full" one (direct GET by id). They are
told apart ONLY by which keys are present - there's no flag in the payload. We decode into a
tagged union right here at the boundary so the entities never have to probe keys themselves:

    payload ──► TypeAdapter(ArtistRecord) ──► FullArtistRecord | SimplifiedArtistRecord

Discriminating keys:
- artist:   "popularity"
- album:    "popularity"
- track:    "popularity"
- playlist: "followers"
- user:     "followers"

All models allow extra keys; Spotify adds fields all the time and we keep the raw dict
on the entity anyway.
"""

from collections.abc import Callable
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
)

from spoticlient.domain.exceptions import RecordDecodeError

FULL = "full"
SIMPLIFIED = "simplified"


class SpotifyRecord(BaseModel):
    """Base for every decoded Spotify object."""

    model_config = ConfigDict(extra="allow")


class ImageRecord(SpotifyRecord):
    url: str
    height: int | None = None
    width: int | None = None


class FollowersRecord(SpotifyRecord):
    href: str | None = None
    total: int = 0


class PagingRecord(SpotifyRecord):
    """Envelope of every list endpoint. Items stay raw until mapped by a resource client."""

    items: list[dict[str, Any]] = Field(default_factory=list)
    limit: int = 0
    offset: int = 0
    total: int = 0
    href: str | None = None
    next: str | None = None
    previous: str | None = None
    # Only cursor based pages (e.g. /me/following) carry this
    cursors: dict[str, Any] | None = None


# =============================================================================
# ARTISTS
# =============================================================================


class SimplifiedArtistRecord(SpotifyRecord):
    id: str | None = None
    name: str = ""
    type: str = "artist"
    uri: str = ""
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    images: list[ImageRecord] | None = Field(default_factory=list)


class FullArtistRecord(SimplifiedArtistRecord):
    followers: FollowersRecord = Field(default_factory=FollowersRecord)
    genres: list[str] = Field(default_factory=list)
    popularity: int


# =============================================================================
# TRACKS
# =============================================================================


class SimplifiedTrackRecord(SpotifyRecord):
    id: str | None = None
    name: str = ""
    type: str = "track"
    uri: str = ""
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    artists: list[dict[str, Any]] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    disc_number: int = 1
    duration_ms: int = 0
    explicit: bool = False
    is_local: bool = False
    is_playable: bool | None = None
    preview_url: str | None = None
    track_number: int | None = None


class FullTrackRecord(SimplifiedTrackRecord):
    album: dict[str, Any]
    external_ids: dict[str, str] = Field(default_factory=dict)
    popularity: int


# =============================================================================
# ALBUMS
# =============================================================================


class SimplifiedAlbumRecord(SpotifyRecord):
    id: str | None = None
    name: str = ""
    type: str = "album"
    uri: str = ""
    href: str | None = None
    album_type: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    artists: list[dict[str, Any]] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    images: list[ImageRecord] | None = Field(default_factory=list)
    release_date: str | None = None
    release_date_precision: str | None = None
    total_tracks: int = 0


class FullAlbumRecord(SimplifiedAlbumRecord):
    copyrights: list[dict[str, str]] = Field(default_factory=list)
    external_ids: dict[str, str] = Field(default_factory=dict)
    genres: list[str] = Field(default_factory=list)
    label: str = ""
    popularity: int
    tracks: PagingRecord = Field(default_factory=PagingRecord)


# =============================================================================
# USERS
# =============================================================================


class SimplifiedUserRecord(SpotifyRecord):
    id: str | None = None
    display_name: str | None = None
    type: str = "user"
    uri: str = ""
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    images: list[ImageRecord] | None = Field(default_factory=list)


class FullUserRecord(SimplifiedUserRecord):
    followers: FollowersRecord


class PrivateUserRecord(FullUserRecord):
    """The /me object. Country, email and product need extra scopes and may be missing."""

    followers: FollowersRecord = Field(default_factory=FollowersRecord)
    country: str | None = None
    email: str | None = None
    product: str | None = None
    explicit_content: dict[str, bool] | None = None


# =============================================================================
# PLAYLISTS
# =============================================================================


class SimplifiedPlaylistRecord(SpotifyRecord):
    id: str | None = None
    name: str = ""
    type: str = "playlist"
    uri: str = ""
    href: str | None = None
    collaborative: bool = False
    description: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    images: list[ImageRecord] | None = Field(default_factory=list)
    owner: dict[str, Any] = Field(default_factory=dict)
    public: bool | None = None
    snapshot_id: str | None = None
    # Simplified playlists only carry {"href", "total"} here
    tracks: dict[str, Any] = Field(default_factory=dict)


class FullPlaylistRecord(SimplifiedPlaylistRecord):
    followers: FollowersRecord
    tracks: PagingRecord = Field(default_factory=PagingRecord)  # type: ignore[assignment]


# =============================================================================
# ENVELOPES
# =============================================================================

# Bulk and top-tracks endpoints wrap their list in one key. Unknown ids come back as null.


class ArtistListRecord(SpotifyRecord):
    artists: list[dict[str, Any] | None]


class AlbumListRecord(SpotifyRecord):
    albums: list[dict[str, Any] | None]


class TrackListRecord(SpotifyRecord):
    tracks: list[dict[str, Any] | None]


class FollowedArtistsRecord(SpotifyRecord):
    """/me/following wraps its cursor page in "artists"."""

    artists: PagingRecord


# =============================================================================
# TAGGED UNIONS
# =============================================================================


def presence_of(key: str) -> Callable[[Any], str]:
    """Build a discriminator that tags a record "full" when ``key`` is present."""

    def discriminate(value: Any) -> str:
        if isinstance(value, dict):
            return FULL if key in value else SIMPLIFIED
        return FULL if getattr(value, key, None) is not None else SIMPLIFIED

    return discriminate


ArtistRecord = Annotated[
    Union[
        Annotated[FullArtistRecord, Tag(FULL)],
        Annotated[SimplifiedArtistRecord, Tag(SIMPLIFIED)],
    ],
    Discriminator(presence_of("popularity")),
]

AlbumRecord = Annotated[
    Union[
        Annotated[FullAlbumRecord, Tag(FULL)],
        Annotated[SimplifiedAlbumRecord, Tag(SIMPLIFIED)],
    ],
    Discriminator(presence_of("popularity")),
]

TrackRecord = Annotated[
    Union[
        Annotated[FullTrackRecord, Tag(FULL)],
        Annotated[SimplifiedTrackRecord, Tag(SIMPLIFIED)],
    ],
    Discriminator(presence_of("popularity")),
]

PlaylistRecord = Annotated[
    Union[
        Annotated[FullPlaylistRecord, Tag(FULL)],
        Annotated[SimplifiedPlaylistRecord, Tag(SIMPLIFIED)],
    ],
    Discriminator(presence_of("followers")),
]

UserRecord = Annotated[
    Union[
        Annotated[FullUserRecord, Tag(FULL)],
        Annotated[SimplifiedUserRecord, Tag(SIMPLIFIED)],
    ],
    Discriminator(presence_of("followers")),
]

_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "artist": TypeAdapter(ArtistRecord),
    "album": TypeAdapter(AlbumRecord),
    "track": TypeAdapter(TrackRecord),
    "playlist": TypeAdapter(PlaylistRecord),
    "user": TypeAdapter(UserRecord),
    "private user": TypeAdapter(PrivateUserRecord),
    "paging": TypeAdapter(PagingRecord),
    "artist list": TypeAdapter(ArtistListRecord),
    "album list": TypeAdapter(AlbumListRecord),
    "track list": TypeAdapter(TrackListRecord),
    "followed artists": TypeAdapter(FollowedArtistsRecord),
}


def decode(record_type: str, payload: Any) -> Any:
    """Decode a raw payload into its record model.

    Args:
        record_type: One of "artist", "album", "track", "playlist", "user",
            "private user", "paging", "artist list", "album list", "track list",
            "followed artists"
        payload: Decoded JSON

    Returns:
        The matching record model instance

    Raises:
        RecordDecodeError: If the payload does not match the record shape
    """
    try:
        return _ADAPTERS[record_type].validate_python(payload)
    except ValidationError as e:
        raise RecordDecodeError(record_type, str(e)) from e


def decode_bool_list(payload: Any) -> list[bool]:
    """Decode the JSON array returned by the ``.../contains`` endpoints."""
    if not isinstance(payload, list) or not all(isinstance(x, bool) for x in payload):
        raise RecordDecodeError("contains", f"expected a JSON array of booleans, got {payload!r}")
    return list(payload)


def is_full(record: BaseModel) -> bool:
    """True when ``record`` was decoded from a full (not simplified) object."""
    return isinstance(
        record,
        (FullArtistRecord, FullAlbumRecord, FullTrackRecord, FullPlaylistRecord, FullUserRecord),
    )
