"""Album endpoints."""

from __future__ import annotations

from spoticlient.application.clients.base import BaseResourceClient
from spoticlient.domain.entities import Album, Paging, Track
from spoticlient.domain.exceptions import RECOVERABLE_ERRORS
from spoticlient.infrastructure.integrations.schemas import decode


class AlbumsClient(BaseResourceClient):
    """Accesses the /albums endpoints."""

    async def get(self, album_id: str, market: str | None = None) -> Album | None:
        """
        Get a full album by id.

        Args:
            album_id: Spotify album ID
            market: ISO 3166-1 alpha-2 country code

        Returns:
            Album, or None if the request failed and errors are suppressed
        """
        try:
            data = await self.client.util.fetch(
                f"/albums/{album_id}", params=self._options(market=market)
            )
            return Album(data, self.client)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, None, f"get album {album_id}")

    async def get_several(self, *album_ids: str, market: str | None = None) -> list[Album]:
        """
        Get several full albums in one request (max 20 ids).

        Returns:
            Albums in request order (unknown ids skipped), or [] on suppressed failure
        """
        if not album_ids:
            return []
        try:
            data = await self.client.util.fetch(
                "/albums",
                params=self._options(ids=self._join_ids(album_ids), market=market),
            )
            return [Album(x, self.client) for x in decode("album list", data).albums if x]
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], "get several albums")

    async def get_tracks(
        self,
        album_id: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Paging[Track]:
        """
        Get the tracks of an album.

        Args:
            album_id: Spotify album ID
            limit: Page size (1-50)
            offset: Index of the first track
            market: ISO 3166-1 alpha-2 country code

        Returns:
            Paging of simplified tracks, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                f"/albums/{album_id}/tracks",
                params=self._options(limit=limit, offset=offset, market=market),
            )
            return self._page(data, lambda x: Track(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), f"get tracks of album {album_id}")
