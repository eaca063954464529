"""Users Service — CRUD and search use cases behind the users routes.

Invariants:
    - Every return value is the public projection (no password)
    - Domain errors (NotFound, Conflict, EntityValidation, BadRequest) propagate unchanged
    - Updates validate on the entity before the repository is touched
"""

import logging
from typing import Any

from userbase.core.errors import BadRequestError
from userbase.core.repository_protocols import UserRepository
from userbase.core.search_params import SearchParams
from userbase.services.signup import SignupInput, SignupUseCase, to_user_output

logger = logging.getLogger(__name__)


class UsersService:
    """Application service wrapping a UserRepository."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def create(self, input: SignupInput) -> dict[str, Any]:
        return await SignupUseCase(self.user_repository).execute(input)

    async def search(self, params: SearchParams) -> dict[str, Any]:
        """Paginated user listing; items projected without passwords."""
        result = await self.user_repository.search(params)
        output = result.to_json()
        output["items"] = [to_user_output(user) for user in result.items]
        return output

    async def find_one(self, id: str) -> dict[str, Any]:
        user = await self.user_repository.find_by_id(id)
        return to_user_output(user)

    async def update(self, id: str, name: str) -> dict[str, Any]:
        if not name:
            raise BadRequestError("Name not provided")
        user = await self.user_repository.find_by_id(id)
        user.update(name)
        await self.user_repository.update(user)
        return to_user_output(user)

    async def update_password(self, id: str, password: str) -> dict[str, Any]:
        if not password:
            raise BadRequestError("Password not provided")
        user = await self.user_repository.find_by_id(id)
        user.update_password(password)
        await self.user_repository.update(user)
        logger.info("User password changed", extra={"entity_id": user.id})
        return to_user_output(user)

    async def remove(self, id: str) -> None:
        await self.user_repository.delete(id)
        logger.info("User removed", extra={"entity_id": str(id)})
