"""In-Memory Searchable Repository — filter → sort → paginate over the stored items.

Invariants:
    - search() always runs filter, then sort, then paginate, in that order
    - SearchResult.total is the filtered count, before pagination
    - apply_filter(items, None) returns the full sequence, never an empty one
    - apply_sort only orders by allow-listed fields; unknown fields leave items unchanged
    - Sorting is stable: ties keep input order in both directions
    - apply_paginate never raises; out-of-range pages yield []

Design Decisions:
    - Filter predicate is abstract: every concrete store supplies its own policy
    - Typed accessor table (sort_accessors) over attribute reflection; fields
      without an accessor read entity.props[field]
    - Comparator over key-based sort: incomparable values (e.g. None vs str)
      compare as ties instead of raising
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from functools import cmp_to_key
from typing import Any, TypeVar

from userbase.core.domain_types import SortDirection
from userbase.core.entity import Entity
from userbase.core.search_params import SearchParams, SearchResult
from userbase.infrastructure.in_memory_repository import InMemoryRepository

E = TypeVar("E", bound=Entity)
logger = logging.getLogger(__name__)


def _compare(a: Any, b: Any) -> int:
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        pass
    return 0


class InMemorySearchableRepository(InMemoryRepository[E], ABC):
    """SearchableRepository[E] base; subclasses declare sortable fields and the filter."""

    sortable_fields: tuple[str, ...] = ()
    sort_accessors: Mapping[str, Callable[[Any], Any]] = {}

    async def search(self, params: SearchParams) -> SearchResult[E]:
        items_filtered = await self.apply_filter(self.items, params.filter)
        items_sorted = self.apply_sort(items_filtered, params.sort, params.sort_dir)
        items_paginated = self.apply_paginate(
            items_sorted, params.page, params.per_page,
        )
        logger.debug(
            f"Search matched {len(items_sorted)} of {len(self.items)} items",
            extra={"repository": type(self).__name__, "operation": "search"},
        )
        return SearchResult(
            items=items_paginated,
            total=len(items_sorted),
            current_page=params.page,
            per_page=params.per_page,
            sort=params.sort,
            sort_dir=params.sort_dir,
            filter=params.filter,
        )

    @abstractmethod
    async def apply_filter(self, items: list[E], filter: str | None) -> list[E]:
        """Subset of items matching filter; all items when filter is None."""

    def apply_sort(
        self,
        items: list[E],
        sort: str | None,
        sort_dir: SortDirection | str | None,
    ) -> list[E]:
        if not sort or sort not in self.sortable_fields:
            return items
        accessor = self.sort_accessors.get(sort) or _props_accessor(sort)
        sign = -1 if sort_dir == SortDirection.DESC else 1

        def compare(a: E, b: E) -> int:
            return sign * _compare(accessor(a), accessor(b))

        return sorted(items, key=cmp_to_key(compare))

    def apply_paginate(self, items: list[E], page: int, per_page: int) -> list[E]:
        start = (page - 1) * per_page
        return items[start:start + per_page]


def _props_accessor(field: str) -> Callable[[Entity], Any]:
    return lambda entity: entity.props.get(field)
