"""Track endpoints."""

from __future__ import annotations

from spoticlient.application.clients.base import BaseResourceClient
from spoticlient.domain.entities import Track
from spoticlient.domain.exceptions import RECOVERABLE_ERRORS
from spoticlient.infrastructure.integrations.schemas import decode


class TracksClient(BaseResourceClient):
    """Accesses the /tracks endpoints."""

    async def get(self, track_id: str, market: str | None = None) -> Track | None:
        """
        Get a full track by id.

        Args:
            track_id: Spotify track ID
            market: ISO 3166-1 alpha-2 country code

        Returns:
            Track, or None if the request failed and errors are suppressed
        """
        try:
            data = await self.client.util.fetch(
                f"/tracks/{track_id}", params=self._options(market=market)
            )
            return Track(data, self.client)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, None, f"get track {track_id}")

    async def get_several(self, *track_ids: str, market: str | None = None) -> list[Track]:
        """Get several full tracks in one request (max 50 ids)."""
        if not track_ids:
            return []
        try:
            data = await self.client.util.fetch(
                "/tracks",
                params=self._options(ids=self._join_ids(track_ids), market=market),
            )
            return [Track(x, self.client) for x in decode("track list", data).tracks if x]
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], "get several tracks")
