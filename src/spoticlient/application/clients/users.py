"""Public user profile endpoints."""

from __future__ import annotations

from spoticlient.application.clients.base import BaseResourceClient
from spoticlient.domain.entities import Paging, Playlist, User
from spoticlient.domain.exceptions import RECOVERABLE_ERRORS


class UsersClient(BaseResourceClient):
    """Accesses the /users endpoints."""

    async def get(self, user_id: str) -> User | None:
        """Get the public profile of a user, or None on suppressed failure."""
        try:
            data = await self.client.util.fetch(f"/users/{user_id}")
            return User(data, self.client)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, None, f"get user {user_id}")

    async def get_playlists(
        self,
        user_id: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paging[Playlist]:
        """
        Get the public playlists of a user.

        Args:
            user_id: Spotify user ID
            limit: Page size (1-50)
            offset: Index of the first playlist

        Returns:
            Paging of simplified playlists, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                f"/users/{user_id}/playlists",
                params=self._options(limit=limit, offset=offset),
            )
            return self._page(data, lambda x: Playlist(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), f"get playlists of user {user_id}")
