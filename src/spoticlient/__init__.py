"""spoticlient - async client for the Spotify Web API."""

from spoticlient.application.clients import (
    AlbumsClient,
    ArtistsClient,
    Client,
    PlaylistsClient,
    TracksClient,
    UserClient,
    UsersClient,
)
from spoticlient.config import Settings, get_settings
from spoticlient.domain.entities import (
    Album,
    Artist,
    Entity,
    Image,
    Paging,
    Playlist,
    PlaylistTrack,
    Track,
    User,
)
from spoticlient.domain.exceptions import (
    ClientReleasedError,
    ConfigurationError,
    RecordDecodeError,
    SpoticlientException,
    TransportError,
    UnexpectedError,
)

__version__ = "0.1.0"

__all__ = [
    "Album",
    "AlbumsClient",
    "Artist",
    "ArtistsClient",
    "Client",
    "ClientReleasedError",
    "ConfigurationError",
    "Entity",
    "Image",
    "Paging",
    "Playlist",
    "PlaylistTrack",
    "PlaylistsClient",
    "RecordDecodeError",
    "Settings",
    "SpoticlientException",
    "Track",
    "TracksClient",
    "TransportError",
    "UnexpectedError",
    "User",
    "UserClient",
    "UsersClient",
    "get_settings",
]
