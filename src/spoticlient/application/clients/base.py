"""Shared plumbing for the resource clients."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from spoticlient.domain.entities import Paging
from spoticlient.domain.exceptions import RecordDecodeError
from spoticlient.infrastructure.integrations.schemas import decode, decode_bool_list

if TYPE_CHECKING:
    from spoticlient.application.clients.client import Client

T = TypeVar("T")


class BaseResourceClient:
    """Base class for the classes exposing one Spotify resource as methods.

    Every public method of a subclass performs exactly one request through
    ``client.util`` and routes failures through ``client.errors``.
    """

    def __init__(self, client: Client) -> None:
        self.client = client

    @staticmethod
    def _options(**options: Any) -> dict[str, Any]:
        """Query parameters with unset (None) options dropped."""
        return {key: value for key, value in options.items() if value is not None}

    @staticmethod
    def _join_ids(ids: Sequence[str]) -> str:
        return ",".join(ids)

    def _page(
        self,
        payload: Any,
        factory: Callable[[dict[str, Any]], T],
    ) -> Paging[T]:
        """Decode a paging object and map its raw items through ``factory``."""
        return Paging.from_record(decode("paging", payload), factory)

    async def _contains(
        self, path: str, ids: Sequence[str], params: dict[str, Any] | None = None
    ) -> list[bool]:
        """Call a ``.../contains`` endpoint; the answer is in the order of ``ids``.

        Raises:
            TransportError: If the request fails
            RecordDecodeError: If the answer isn't one boolean per id
        """
        query = {**(params or {}), "ids": self._join_ids(ids)}
        result = decode_bool_list(await self.client.util.fetch(path, params=query))
        if len(result) != len(ids):
            raise RecordDecodeError(
                "contains", f"asked about {len(ids)} ids, got {len(result)} answers"
            )
        return result
