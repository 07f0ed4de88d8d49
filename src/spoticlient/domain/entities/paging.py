"""Paging envelope shared by every list endpoint."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Paging(Generic[T]):
    """Uniform ``{limit, offset, total, items}`` shape of a list response.

    ``next`` is the URL of the following page when Spotify sent one; ``after``
    is the cursor of cursor-paged endpoints like /me/following.
    """

    limit: int
    offset: int
    total: int
    items: list[T] = field(default_factory=list)
    next: str | None = None
    after: str | None = None

    @classmethod
    def empty(cls) -> "Paging[T]":
        """The zero envelope returned when a list request fails."""
        return cls(limit=0, offset=0, total=0, items=[])

    @classmethod
    def from_record(cls, record: Any, factory: Callable[[dict[str, Any]], T]) -> "Paging[T]":
        """Build a page from a decoded PagingRecord, mapping raw items through ``factory``."""
        cursors = record.cursors or {}
        return cls(
            limit=record.limit,
            offset=record.offset,
            total=record.total,
            items=[factory(item) for item in record.items],
            next=record.next,
            after=cursors.get("after"),
        )

    @property
    def has_next(self) -> bool:
        return self.next is not None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
