"""Spotify Web API clients, one per resource."""

from spoticlient.application.clients.albums import AlbumsClient
from spoticlient.application.clients.artists import ArtistsClient
from spoticlient.application.clients.client import Client
from spoticlient.application.clients.playlists import PlaylistsClient
from spoticlient.application.clients.tracks import TracksClient
from spoticlient.application.clients.user_client import UserClient
from spoticlient.application.clients.users import UsersClient

__all__ = [
    "AlbumsClient",
    "ArtistsClient",
    "Client",
    "PlaylistsClient",
    "TracksClient",
    "UserClient",
    "UsersClient",
]
