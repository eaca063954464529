"""User In-Memory Repository — searchable user store with email lookups.

Invariants:
    - Filter: case-insensitive substring match on name OR email
    - Sortable by name, email, created_at; no sort means created_at descending
    - find_by_email raises NotFoundError for invalid input or an unknown address
    - email_exists raises ConflictError when the address is taken, no-op for empty input
"""

import logging

from userbase.core.domain_types import SortDirection
from userbase.core.errors import ConflictError, ErrorContext, NotFoundError
from userbase.core.user_entity import UserEntity
from userbase.infrastructure.in_memory_searchable_repository import (
    InMemorySearchableRepository,
)

logger = logging.getLogger(__name__)


class UserInMemoryRepository(InMemorySearchableRepository[UserEntity]):
    """UserRepository implementation held in process memory."""

    sortable_fields = ("name", "email", "created_at")
    sort_accessors = {
        "name": lambda user: user.name,
        "email": lambda user: user.email,
        "created_at": lambda user: user.created_at,
    }

    async def apply_filter(
        self, items: list[UserEntity], filter: str | None,
    ) -> list[UserEntity]:
        if not filter:
            return items
        needle = filter.lower()
        return [
            item for item in items
            if needle in item.name.lower() or needle in item.email.lower()
        ]

    def apply_sort(
        self,
        items: list[UserEntity],
        sort: str | None,
        sort_dir: SortDirection | str | None,
    ) -> list[UserEntity]:
        if not sort:
            return super().apply_sort(items, "created_at", SortDirection.DESC)
        return super().apply_sort(items, sort, sort_dir)

    async def find_by_email(self, email: str) -> UserEntity:
        if not email or not isinstance(email, str):
            raise NotFoundError("Invalid email provided")
        for item in self.items:
            if item.email == email:
                return item
        logger.warning(
            "User email lookup missed",
            extra={"repository": type(self).__name__, "operation": "find_by_email"},
        )
        raise NotFoundError(
            f"User not found with email {email}",
            ErrorContext(repository=type(self).__name__),
        )

    async def email_exists(self, email: str) -> None:
        if not email or not isinstance(email, str):
            return
        if any(item.email == email for item in self.items):
            raise ConflictError(
                "Email address already used",
                ErrorContext(repository=type(self).__name__),
            )
