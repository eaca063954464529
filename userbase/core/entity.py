"""Entity — identity and JSON projection shared by every domain object.

Invariants:
    - id is assigned once at construction (caller-supplied or uuid4) and never changes
    - props is held by reference; only subclass-defined update methods mutate it
    - Two entities are equal iff they are the same type and share an id
    - to_json() is total: {"id": id, **props}, no field omitted, never raises

Design Decisions:
    - Generic wrapper over a props mapping instead of per-field attributes:
      repositories sort and filter on props without reflection
"""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar
from uuid import uuid4

from userbase.core.domain_types import EntityId

P = TypeVar("P", bound=Mapping[str, Any])


class Entity(Generic[P]):
    """Base identity wrapper around an immutable property bag."""

    def __init__(self, props: P, id: str | None = None):
        self.props = props
        self._id = EntityId(str(id) if id is not None else str(uuid4()))

    @property
    def id(self) -> EntityId:
        return self._id

    def to_json(self) -> dict[str, Any]:
        return {"id": self._id, **self.props}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
