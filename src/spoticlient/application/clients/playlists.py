"""Playlist endpoints."""

from __future__ import annotations

from spoticlient.application.clients.base import BaseResourceClient
from spoticlient.domain.entities import Paging, Playlist, PlaylistTrack
from spoticlient.domain.exceptions import RECOVERABLE_ERRORS


class PlaylistsClient(BaseResourceClient):
    """Accesses the /playlists endpoints."""

    # Beware: the embedded "tracks" page of a full playlist holds the first 100 items only.
    # Use get_tracks() with offset for the rest.
    async def get(self, playlist_id: str, market: str | None = None) -> Playlist | None:
        """
        Get a full playlist by id.

        Args:
            playlist_id: Spotify playlist ID
            market: ISO 3166-1 alpha-2 country code

        Returns:
            Playlist, or None if the request failed and errors are suppressed
        """
        try:
            data = await self.client.util.fetch(
                f"/playlists/{playlist_id}", params=self._options(market=market)
            )
            return Playlist(data, self.client)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, None, f"get playlist {playlist_id}")

    async def get_tracks(
        self,
        playlist_id: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Paging[PlaylistTrack]:
        """
        Get the items of a playlist.

        Args:
            playlist_id: Spotify playlist ID
            limit: Page size (1-100)
            offset: Index of the first item
            market: ISO 3166-1 alpha-2 country code

        Returns:
            Paging of playlist items, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                f"/playlists/{playlist_id}/tracks",
                params=self._options(limit=limit, offset=offset, market=market),
            )
            return self._page(data, lambda x: PlaylistTrack.from_api(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(
                e, Paging.empty(), f"get tracks of playlist {playlist_id}"
            )

    async def user_follows(self, playlist_id: str, *user_ids: str) -> list[bool]:
        """
        Check whether users follow a playlist.

        Args:
            playlist_id: Spotify playlist ID
            user_ids: Spotify user IDs (max 5)

        Returns:
            One boolean per user id in the same order, or [] on suppressed failure
        """
        if not user_ids:
            return []
        try:
            return await self._contains(f"/playlists/{playlist_id}/followers/contains", user_ids)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], f"check followers of playlist {playlist_id}")
