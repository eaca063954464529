"""Search Params & Result — value objects for paging, sorting and filtering.

Invariants:
    - SearchParams never rejects input: invalid values coerce to defaults
    - page/per_page are positive ints; booleans, NaN, <= 0 and non-integers fall back
    - sort_dir is None whenever sort is None, else "asc" unless input is "asc"/"desc" (any case)
    - Empty-string sort/filter normalize to None
    - SearchResult.last_page is always ceil(total / per_page), never supplied

Design Decisions:
    - Two-phase constructor: hard defaults first, then validated overrides in the
      order page → per_page → sort → sort_dir → filter (sort_dir reads the final sort)
    - per_page falls back to the current value (sticky), which is the default on
      construction (ADR: one consistent policy for the per_page open question)
    - Frozen dataclass for SearchResult: computed metadata cannot drift from items
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from userbase.core.domain_types import DEFAULT_PAGE, DEFAULT_PER_PAGE, SortDirection
from userbase.core.entity import Entity

E = TypeVar("E", bound=Entity)

_INPUT_ALIASES = {"perPage": "per_page", "sortDir": "sort_dir"}


def _coerce_positive_int(value: Any, fallback: int) -> int:
    """Numeric coercion with fallback for NaN, non-positive and fractional input."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if math.isnan(number) or number <= 0 or not number.is_integer():
        return fallback
    return int(number)


def _normalize_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class SearchParams:
    """Normalized paging/sorting/filtering request."""

    def __init__(
        self,
        page: Any = None,
        per_page: Any = None,
        sort: Any = None,
        sort_dir: Any = None,
        filter: Any = None,
    ):
        self._page = DEFAULT_PAGE
        self._per_page = DEFAULT_PER_PAGE
        self._sort: str | None = None
        self._sort_dir: SortDirection | None = None
        self._filter: str | None = None

        self._set_page(DEFAULT_PAGE if page is None else page)
        self._set_per_page(DEFAULT_PER_PAGE if per_page is None else per_page)
        self._sort = _normalize_text(sort)
        self._set_sort_dir(sort_dir)
        self._filter = _normalize_text(filter)

    @classmethod
    def from_input(cls, data: Mapping[str, Any] | None = None) -> "SearchParams":
        """Build from a raw input mapping; accepts camelCase perPage/sortDir keys."""
        kwargs: dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _INPUT_ALIASES.get(key, key)
            if name in ("page", "per_page", "sort", "sort_dir", "filter"):
                kwargs[name] = value
        return cls(**kwargs)

    def _set_page(self, value: Any) -> None:
        if isinstance(value, bool):
            return
        self._page = _coerce_positive_int(value, DEFAULT_PAGE)

    def _set_per_page(self, value: Any) -> None:
        if isinstance(value, bool):
            return
        self._per_page = _coerce_positive_int(value, self._per_page)

    def _set_sort_dir(self, value: Any) -> None:
        if self._sort is None:
            self._sort_dir = None
            return
        if isinstance(value, SortDirection):
            value = value.value
        direction = str(value).lower()
        self._sort_dir = SortDirection.DESC if direction == "desc" else SortDirection.ASC

    @property
    def page(self) -> int:
        return self._page

    @property
    def per_page(self) -> int:
        return self._per_page

    @property
    def sort(self) -> str | None:
        return self._sort

    @property
    def sort_dir(self) -> SortDirection | None:
        return self._sort_dir

    @property
    def filter(self) -> str | None:
        return self._filter

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchParams):
            return NotImplemented
        return (
            (self.page, self.per_page, self.sort, self.sort_dir, self.filter)
            == (other.page, other.per_page, other.sort, other.sort_dir, other.filter)
        )

    def __repr__(self) -> str:
        return (
            f"SearchParams(page={self.page}, per_page={self.per_page}, "
            f"sort={self.sort!r}, sort_dir={self.sort_dir!r}, filter={self.filter!r})"
        )


@dataclass(frozen=True)
class SearchResult(Generic[E]):
    """Paginated items plus computed metadata and the echoed query."""
    items: Sequence[E]
    total: int
    current_page: int
    per_page: int
    sort: str | None = None
    sort_dir: SortDirection | None = None
    filter: str | None = None
    last_page: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", list(self.items))
        object.__setattr__(self, "last_page", math.ceil(self.total / self.per_page))

    def to_json(self, force_entity: bool = False) -> dict[str, Any]:
        """Serialize; force_entity projects items through Entity.to_json()."""
        return {
            "items": (
                [item.to_json() for item in self.items]
                if force_entity else list(self.items)
            ),
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
            "sort": self.sort,
            "sort_dir": self.sort_dir.value if self.sort_dir else None,
            "filter": self.filter,
        }
