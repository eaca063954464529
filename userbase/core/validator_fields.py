"""Validator Fields — pluggable synchronous validation contract for entities.

Invariants:
    - validate() resets errors and validated_data on every call (no cross-call leakage)
    - On failure: errors maps field → ordered messages, validated_data is None
    - On success: errors is empty, validated_data holds the accepted payload

Design Decisions:
    - Protocol for the contract: entities accept any validator object, not a base class
    - Pydantic model as the rule set: declarative field constraints in one place
"""

from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from userbase.core.domain_types import FieldsErrors

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ValidatorFields(Protocol[T]):
    """Structural contract consumed by the entity construction path."""
    errors: FieldsErrors | None
    validated_data: T | None

    def validate(self, data: Any) -> bool: ...


class PydanticValidatorFields(Generic[M]):
    """ValidatorFields implementation backed by a pydantic rules model."""

    rules: type[M]

    def __init__(self) -> None:
        self.errors: FieldsErrors | None = None
        self.validated_data: M | None = None

    def validate(self, data: Any) -> bool:
        self.errors = {}
        self.validated_data = None
        try:
            self.validated_data = self.rules.model_validate(data)
        except PydanticValidationError as exc:
            self.errors = _group_errors(exc)
            return False
        return True


def _group_errors(exc: PydanticValidationError) -> FieldsErrors:
    """Group pydantic error entries by top-level field, keeping message order."""
    grouped: FieldsErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "data"
        grouped.setdefault(field, []).append(error["msg"])
    return grouped
