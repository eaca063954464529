"""In-Memory Repository — CRUD store over an insertion-ordered list of entities.

Invariants:
    - items is owned by one repository instance; never shared across instances
    - insert appends without an id-uniqueness check
    - find_by_id/update/delete compare ids as strings and raise NotFoundError when absent
    - update/delete verify existence before mutating; update keeps the entity's index
    - Mutations run under a per-instance asyncio.Lock

Design Decisions:
    - Linear scan over a list (not a dict keyed by id): insertion order is the
      natural order the search pipeline starts from
    - Async methods with no suspension points: the contract stays swappable
      for a real storage backend
"""

import asyncio
import logging
from typing import Generic, TypeVar

from userbase.core.entity import Entity
from userbase.core.errors import ErrorContext, NotFoundError

E = TypeVar("E", bound=Entity)
logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[E]):
    """Repository[E] implementation held entirely in process memory."""

    def __init__(self) -> None:
        self.items: list[E] = []
        self._lock = asyncio.Lock()

    async def insert(self, entity: E) -> None:
        async with self._lock:
            self.items.append(entity)
        logger.debug(
            "Entity inserted",
            extra={"entity_id": entity.id, "repository": type(self).__name__},
        )

    async def find_by_id(self, id: str) -> E:
        return self.items[self._index_of(id)]

    async def find_all(self) -> list[E]:
        return list(self.items)

    async def update(self, entity: E) -> None:
        async with self._lock:
            index = self._index_of(entity.id)
            self.items[index] = entity
        logger.debug(
            "Entity updated",
            extra={"entity_id": entity.id, "repository": type(self).__name__},
        )

    async def delete(self, id: str) -> None:
        async with self._lock:
            index = self._index_of(id)
            del self.items[index]
        logger.debug(
            "Entity deleted",
            extra={"entity_id": str(id), "repository": type(self).__name__},
        )

    def _index_of(self, id: str) -> int:
        """Position of the entity with this id; raises NotFoundError."""
        _id = str(id)
        for index, item in enumerate(self.items):
            if item.id == _id:
                return index
        logger.warning(
            "Entity not found",
            extra={"entity_id": _id, "repository": type(self).__name__},
        )
        raise NotFoundError(
            "Entity not found",
            ErrorContext(entity_id=_id, repository=type(self).__name__),
        )
