"""Signup Use Case — register a new user with a unique email.

Invariants:
    - name, email and password are all required (BadRequestError otherwise)
    - Email uniqueness checked before the entity is built (ConflictError)
    - Output never includes the password
"""

import logging
from typing import Any, TypedDict

from userbase.core.errors import BadRequestError
from userbase.core.repository_protocols import UserRepository
from userbase.core.user_entity import UserEntity

logger = logging.getLogger(__name__)


class SignupInput(TypedDict):
    name: str
    email: str
    password: str


def to_user_output(user: UserEntity) -> dict[str, Any]:
    """Public projection of a user (password excluded)."""
    data = user.to_json()
    data.pop("password", None)
    return data


class SignupUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, input: SignupInput) -> dict[str, Any]:
        name = input.get("name")
        email = input.get("email")
        password = input.get("password")
        if not email or not name or not password:
            raise BadRequestError("Input data not provided")

        await self.user_repository.email_exists(email)
        user = UserEntity({"name": name, "email": email, "password": password})
        await self.user_repository.insert(user)
        logger.info("User signed up", extra={"entity_id": user.id})
        return to_user_output(user)
