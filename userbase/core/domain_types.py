"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the string form of a UUID — ids are compared as strings
    - SortDirection has exactly two members; the str values are the wire values
    - FieldsErrors maps a field name to its ordered list of messages

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", str)


# ─── Search Types ────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Ordering applied by the sort stage of a search."""
    ASC = "asc"
    DESC = "desc"


DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


# ─── Validation Types ────────────────────────────────────────────

FieldsErrors = dict[str, list[str]]
