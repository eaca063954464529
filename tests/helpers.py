"""Test data builders shared across test packages."""

from datetime import datetime, timezone
from uuid import uuid4

from userbase.core.user_entity import UserProps


def make_user_props(
    name: str | None = None,
    email: str | None = None,
    password: str | None = None,
    created_at: datetime | None = None,
) -> UserProps:
    """Valid user props; any field can be overridden."""
    suffix = uuid4().hex[:8]
    return {
        "name": name if name is not None else f"User {suffix}",
        "email": email if email is not None else f"user.{suffix}@example.com",
        "password": password if password is not None else f"Secret-{suffix}",
        "created_at": created_at if created_at is not None else datetime.now(timezone.utc),
    }
