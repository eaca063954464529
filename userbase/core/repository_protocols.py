"""Boundary Protocols — repository contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - id-based operations raise NotFoundError when the id is absent
    - search() returns a SearchResult whose total counts filtered items, pre-pagination

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy required of implementations
    - Async in Protocol: in-memory implementations resolve immediately, but the
      contract stays swappable for a real storage backend
"""

from typing import Protocol, TypeVar

from userbase.core.entity import Entity
from userbase.core.search_params import SearchParams, SearchResult
from userbase.core.user_entity import UserEntity

E = TypeVar("E", bound=Entity)


class Repository(Protocol[E]):
    """CRUD contract over one entity type."""
    async def insert(self, entity: E) -> None: ...
    async def find_by_id(self, id: str) -> E: ...
    async def find_all(self) -> list[E]: ...
    async def update(self, entity: E) -> None: ...
    async def delete(self, id: str) -> None: ...


class SearchableRepository(Repository[E], Protocol[E]):
    """CRUD contract plus filter → sort → paginate search."""
    async def search(self, params: SearchParams) -> SearchResult[E]: ...


class UserRepository(SearchableRepository[UserEntity], Protocol):
    """User store — adds email lookups used by signup."""
    async def find_by_email(self, email: str) -> UserEntity: ...
    async def email_exists(self, email: str) -> None: ...
