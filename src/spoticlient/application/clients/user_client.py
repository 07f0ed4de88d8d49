"""Current user (/me) endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar

from spoticlient.application.clients.base import BaseResourceClient
from spoticlient.config.settings import Settings
from spoticlient.domain.entities import Album, Artist, Paging, Playlist, Track
from spoticlient.domain.exceptions import RECOVERABLE_ERRORS
from spoticlient.domain.value_objects import Image
from spoticlient.infrastructure.integrations.schemas import decode

if TYPE_CHECKING:
    from spoticlient.application.clients.client import Client

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserClient(BaseResourceClient):
    """Accesses the current user endpoints.

    Needs a user token (authorization code flow), not a client-credentials token.
    ``info()`` caches the profile on this object; every other method hits the
    network on each call and leaves this object untouched.

    Usage:
        user = UserClient("token")          # or UserClient(client)
        await user.info()
        print(user.name, user.total_followers)
        top = await user.get_top_tracks(limit=10, time_range="short_term")
    """

    # Hey future me - the profile cache is NOT guarded against concurrent info() calls. Two
    # overlapping info() calls both write every field; last one wins. Serialize them yourself
    # if you care.
    def __init__(self, client: Client | str, settings: Settings | None = None) -> None:
        """
        Initialize the user client.

        Args:
            client: An existing Client, or a user access token to build one from
            settings: Settings for the Client built from a token (ignored otherwise)
        """
        if isinstance(client, str):
            from spoticlient.application.clients.client import Client

            client = Client(client, settings)
        super().__init__(client)

        self.name = ""
        self.country = ""
        self.email = "unknown"
        self.external_urls: dict[str, str] = {}
        self.total_followers = 0
        self.href = ""
        self.id = ""
        self.images: list[Image] = []
        self.product = "unknown"
        self.uri = ""

    def __repr__(self) -> str:
        return f"<UserClient id={self.id!r} name={self.name!r}>"

    # Hey, a UserClient built from a token owns its Client (and the HTTP connection). Close it
    # when done, or use "async with UserClient(token) as user:".
    async def close(self) -> None:
        """Close the underlying Client."""
        await self.client.close()

    async def __aenter__(self) -> UserClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # =========================================================================
    # PROFILE
    # =========================================================================

    async def _load_profile(self) -> None:
        data = await self.client.util.fetch("/me")
        record = decode("private user", data)

        self.name = record.display_name or ""
        self.country = record.country or "unknown"
        self.id = record.id or ""
        self.email = record.email or "unknown"
        self.external_urls = record.external_urls
        self.total_followers = record.followers.total
        self.href = record.href or ""
        self.images = [Image(url=i.url, height=i.height, width=i.width) for i in record.images or []]
        self.product = record.product or "unknown"
        self.uri = record.uri
        logger.debug("Loaded profile of Spotify user %s", self.id)

    async def info(self) -> UserClient:
        """
        Fetch the current user's profile and cache it on this object.

        Country, email and product fall back to "unknown" when the token lacks
        the scopes to read them.

        Returns:
            self

        Raises:
            UnexpectedError: If the request fails, regardless of ``throw_errors``
        """
        try:
            await self._load_profile()
        except RECOVERABLE_ERRORS as e:
            self.client.errors.raise_unexpected(e, "fetch current user")
        return self

    # =========================================================================
    # TOP ITEMS
    # =========================================================================

    async def get_top_tracks(
        self,
        limit: int | None = None,
        offset: int | None = None,
        time_range: str | None = None,
    ) -> Paging[Track]:
        """
        Get the current user's top tracks.

        Args:
            limit: Page size (1-50)
            offset: Index of the first track
            time_range: "long_term", "medium_term" or "short_term"

        Returns:
            Paging of full tracks, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                "/me/top/tracks",
                params=self._options(limit=limit, offset=offset, time_range=time_range),
            )
            return self._page(data, lambda x: Track(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), "get top tracks")

    async def get_top_artists(
        self,
        limit: int | None = None,
        offset: int | None = None,
        time_range: str | None = None,
    ) -> Paging[Artist]:
        """
        Get the current user's top artists.

        Args:
            limit: Page size (1-50)
            offset: Index of the first artist
            time_range: "long_term", "medium_term" or "short_term"

        Returns:
            Paging of full artists, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                "/me/top/artists",
                params=self._options(limit=limit, offset=offset, time_range=time_range),
            )
            return self._page(data, lambda x: Artist(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), "get top artists")

    # =========================================================================
    # PLAYLIST FOLLOWING
    # =========================================================================

    async def follow_playlist(self, playlist_id: str, public: bool = True) -> bool:
        """
        Follow a playlist (adds it to the user's library).

        Args:
            playlist_id: Spotify playlist ID
            public: Show the playlist on the user's public profile

        Returns:
            True on success, False on suppressed failure
        """
        try:
            await self.client.util.fetch(
                f"/playlists/{playlist_id}/followers",
                method="PUT",
                headers={"Content-Type": "application/json"},
                body={"public": public},
            )
            return True
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, False, f"follow playlist {playlist_id}")

    async def unfollow_playlist(self, playlist_id: str) -> bool:
        """
        Unfollow a playlist.

        Returns:
            True on success, False on suppressed failure
        """
        try:
            await self.client.util.fetch(f"/playlists/{playlist_id}/followers", method="DELETE")
            return True
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, False, f"unfollow playlist {playlist_id}")

    async def follows_playlist(self, playlist_id: str) -> bool:
        """
        Check whether the current user follows a playlist.

        Loads the profile first if ``info()`` hasn't been called yet, since the
        check needs the user id.

        Returns:
            True if followed, False if not or on suppressed failure
        """
        if not self.id:
            try:
                await self._load_profile()
            except RECOVERABLE_ERRORS as e:
                return self.client.errors.handle(e, False, f"check follow of playlist {playlist_id}")

        follows = await self.client.playlists.user_follows(playlist_id, self.id)
        return follows[0] if follows else False

    # =========================================================================
    # ARTIST / USER FOLLOWING
    # =========================================================================

    async def get_following_artists(
        self,
        after: str | None = None,
        limit: int | None = None,
    ) -> Paging[Artist]:
        """
        Get the artists the current user follows.

        This endpoint is cursor paged: pass ``paging.after`` of the previous
        page as ``after`` to get the next one.

        Args:
            after: Last artist ID of the previous page
            limit: Page size (1-50)

        Returns:
            Paging of full artists, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                "/me/following",
                params=self._options(type="artist", after=after, limit=limit),
            )
            record = decode("followed artists", data)
            return Paging.from_record(record.artists, lambda x: Artist(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), "get followed artists")

    async def _change_following(self, method: str, kind: str, ids: tuple[str, ...]) -> bool:
        if not ids:
            return True
        verb = "follow" if method == "PUT" else "unfollow"
        try:
            await self.client.util.fetch(
                "/me/following",
                method=method,
                params={"type": kind, "ids": self._join_ids(ids)},
            )
            return True
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, False, f"{verb} {kind}s")

    async def follow_artists(self, *artist_ids: str) -> bool:
        """Follow artists. Returns True on success, False on suppressed failure."""
        return await self._change_following("PUT", "artist", artist_ids)

    async def unfollow_artists(self, *artist_ids: str) -> bool:
        """Unfollow artists. Returns True on success, False on suppressed failure."""
        return await self._change_following("DELETE", "artist", artist_ids)

    async def follow_users(self, *user_ids: str) -> bool:
        """Follow users. Returns True on success, False on suppressed failure."""
        return await self._change_following("PUT", "user", user_ids)

    async def unfollow_users(self, *user_ids: str) -> bool:
        """Unfollow users. Returns True on success, False on suppressed failure."""
        return await self._change_following("DELETE", "user", user_ids)

    async def _follows(self, kind: str, ids: tuple[str, ...]) -> list[bool]:
        if not ids:
            return []
        try:
            return await self._contains("/me/following/contains", ids, {"type": kind})
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], f"check followed {kind}s")

    async def follows_artists(self, *artist_ids: str) -> list[bool]:
        """
        Check whether the current user follows artists.

        Usage:
            [follows_first, follows_second] = await user.follows_artists("id1", "id2")

        Returns:
            One boolean per id in the same order, or [] on suppressed failure
        """
        return await self._follows("artist", artist_ids)

    async def follows_users(self, *user_ids: str) -> list[bool]:
        """
        Check whether the current user follows users.

        Returns:
            One boolean per id in the same order, or [] on suppressed failure
        """
        return await self._follows("user", user_ids)

    # =========================================================================
    # SAVED ALBUMS / TRACKS
    # =========================================================================

    async def get_albums(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Paging[Album]:
        """
        Get the albums saved in the current user's library.

        Returns:
            Paging of full albums, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                "/me/albums",
                params=self._options(limit=limit, offset=offset, market=market),
            )
            return self._saved_page(data, "album", lambda x: Album(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), "get saved albums")

    async def add_albums(self, *album_ids: str) -> bool:
        """Save albums to the current user's library. False on suppressed failure."""
        return await self._change_library("PUT", "albums", album_ids)

    async def delete_albums(self, *album_ids: str) -> bool:
        """Remove albums from the current user's library. False on suppressed failure."""
        return await self._change_library("DELETE", "albums", album_ids)

    async def has_albums(self, *album_ids: str) -> list[bool]:
        """
        Check whether albums are saved in the current user's library.

        Usage:
            [has_first, has_second] = await user.has_albums("id1", "id2")

        Returns:
            One boolean per id in the same order, or [] on suppressed failure
        """
        return await self._library_contains("albums", album_ids)

    async def get_tracks(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Paging[Track]:
        """
        Get the tracks saved in the current user's library ("Liked Songs").

        Returns:
            Paging of full tracks, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                "/me/tracks",
                params=self._options(limit=limit, offset=offset, market=market),
            )
            return self._saved_page(data, "track", lambda x: Track(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), "get saved tracks")

    async def add_tracks(self, *track_ids: str) -> bool:
        """Save tracks to the current user's library. False on suppressed failure."""
        return await self._change_library("PUT", "tracks", track_ids)

    async def delete_tracks(self, *track_ids: str) -> bool:
        """Remove tracks from the current user's library. False on suppressed failure."""
        return await self._change_library("DELETE", "tracks", track_ids)

    async def has_tracks(self, *track_ids: str) -> list[bool]:
        """One boolean per track id telling whether it's saved, [] on suppressed failure."""
        return await self._library_contains("tracks", track_ids)

    def _saved_page(
        self,
        payload: Any,
        key: str,
        factory: Callable[[dict[str, Any]], T],
    ) -> Paging[T]:
        # Saved items come wrapped as {"added_at": ..., "album": {...}}. Spotify sends null
        # for the wrapped object once it is no longer available; those items are skipped.
        record = decode("paging", payload)
        items = [item[key] for item in record.items if item.get(key)]
        return Paging.from_record(record.model_copy(update={"items": items}), factory)

    async def _change_library(self, method: str, kind: str, ids: tuple[str, ...]) -> bool:
        if not ids:
            return True
        verb = "save" if method == "PUT" else "remove"
        try:
            await self.client.util.fetch(
                f"/me/{kind}", method=method, params={"ids": self._join_ids(ids)}
            )
            return True
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, False, f"{verb} {kind}")

    async def _library_contains(self, kind: str, ids: tuple[str, ...]) -> list[bool]:
        if not ids:
            return []
        try:
            return await self._contains(f"/me/{kind}/contains", ids)
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, [], f"check saved {kind}")

    # =========================================================================
    # PLAYLISTS
    # =========================================================================

    async def get_playlists(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paging[Playlist]:
        """
        Get the playlists owned or followed by the current user.

        Returns:
            Paging of simplified playlists, or the empty paging on suppressed failure
        """
        try:
            data = await self.client.util.fetch(
                "/me/playlists", params=self._options(limit=limit, offset=offset)
            )
            return self._page(data, lambda x: Playlist(x, self.client))
        except RECOVERABLE_ERRORS as e:
            return self.client.errors.handle(e, Paging.empty(), "get playlists")
