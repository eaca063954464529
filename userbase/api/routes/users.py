"""Users Routes — signup, search, read, update and delete of users.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Search query params passed raw to SearchParams (it coerces, never rejects)
    - Domain errors propagate to the global handlers (404/409/422/400)
    - Responses never include passwords

Design Decisions:
    - Repository injected via get_user_repository: tests override the dependency
    - Routes hold no business logic; UsersService owns the use cases
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from userbase.core.search_params import SearchParams
from userbase.infrastructure.repositories import get_user_repository
from userbase.infrastructure.user_in_memory_repository import UserInMemoryRepository
from userbase.schemas.user import (
    CreateUserRequest, UpdateUserRequest, UserListResponse, UserResponse,
)
from userbase.services.users_service import UsersService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_users_service(
    repository: UserInMemoryRepository = Depends(get_user_repository),
) -> UsersService:
    return UsersService(repository)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: CreateUserRequest, service: UsersService = Depends(get_users_service),
):
    """Sign up a new user."""
    return await service.create(body.model_dump())


@router.get("", response_model=UserListResponse)
async def list_users(
    page: str | None = Query(None),
    per_page: str | None = Query(None),
    sort: str | None = Query(None),
    sort_dir: str | None = Query(None),
    filter: str | None = Query(None),
    service: UsersService = Depends(get_users_service),
):
    """Search users with filter, sort and pagination."""
    params = SearchParams(
        page=page, per_page=per_page, sort=sort, sort_dir=sort_dir, filter=filter,
    )
    return await service.search(params)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, service: UsersService = Depends(get_users_service),
):
    """Get one user by id."""
    return await service.find_one(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UpdateUserRequest,
    service: UsersService = Depends(get_users_service),
):
    """Rename a user and/or change their password."""
    user = None
    if body.name is not None:
        user = await service.update(user_id, body.name)
    if body.password is not None:
        user = await service.update_password(user_id, body.password)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str, service: UsersService = Depends(get_users_service),
):
    """Delete a user."""
    await service.remove(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
