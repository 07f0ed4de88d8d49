"""Artist endpoints."""

from __future__ import annotations

from spoticlient.application.clients.base import BaseResourceClient
from spoticlient.domain.entities import Album, Artist, Paging, Track
from spoticlient.domain.exceptions import RECOVERABLE_ERRORS
from spoticlient.infrastructure.integrations.schemas import decode


class ArtistsClient(BaseResourceClient):
    """Accesses the /artists endpoints."""

    async def get(self, artist_id: str) -> Artist | None:
        """
        Get a full artist by id.

        Args:
            artist_id: Spotify artist ID

        Returns:
            Artist, or None if the request failed and errors are suppressed
        """
        try:
            data = await self.client.util.fetch(f"/artists/{artist_id}")
            return Artist(data, self.client)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, None, f"get artist {artist_id}")

    async def get_several(self, *artist_ids: str) -> list[Artist]:
        """
        Get several full artists in one request.

        Unknown ids come back as null from Spotify and are skipped.

        Args:
            artist_ids: Spotify artist IDs (max 50)

        Returns:
            Artists in request order, or [] on suppressed failure
        """
        if not artist_ids:
            return []
        try:
            data = await self.client.util.fetch(
                "/artists", params={"ids": self._join_ids(artist_ids)}
            )
            return [Artist(x, self.client) for x in decode("artist list", data).artists if x]
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], "get several artists")

    async def get_albums(
        self,
        artist_id: str,
        limit: int | None = None,
        offset: int | None = None,
        include_groups: str | None = None,
        market: str | None = None,
    ) -> Paging[Album]:
        """
        Get the albums of an artist.

        Args:
            artist_id: Spotify artist ID
            limit: Page size (1-50)
            offset: Index of the first album
            include_groups: Comma-separated album groups (album,single,appears_on,compilation)
            market: ISO 3166-1 alpha-2 country code

        Returns:
            Paging of simplified albums, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                f"/artists/{artist_id}/albums",
                params=self._options(
                    limit=limit, offset=offset, include_groups=include_groups, market=market
                ),
            )
            return self._page(data, lambda x: Album(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), f"get albums of artist {artist_id}")

    async def get_top_tracks(self, artist_id: str, market: str = "US") -> list[Track]:
        """
        Get the top tracks of an artist.

        Args:
            artist_id: Spotify artist ID
            market: ISO 3166-1 alpha-2 country code (required by Spotify)

        Returns:
            Up to 10 full tracks, or [] on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                f"/artists/{artist_id}/top-tracks", params={"market": market}
            )
            return [Track(x, self.client) for x in decode("track list", data).tracks if x]
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], f"get top tracks of artist {artist_id}")

    async def get_related_artists(self, artist_id: str) -> list[Artist]:
        """
        Get artists similar to an artist.

        Args:
            artist_id: Spotify artist ID

        Returns:
            Up to 20 full artists, or [] on suppressed failure
        """
        try:
            data = await self.client.util.fetch(f"/artists/{artist_id}/related-artists")
            return [Artist(x, self.client) for x in decode("artist list", data).artists if x]
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], f"get artists related to {artist_id}")
