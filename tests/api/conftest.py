"""API test fixtures — FastAPI test client over a fresh user repository.

Invariants:
    - Every test gets its own UserInMemoryRepository (no state across tests)
    - get_user_repository dependency overridden, cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from userbase.infrastructure.repositories import get_user_repository
from userbase.infrastructure.user_in_memory_repository import UserInMemoryRepository
from userbase.main import app


@pytest.fixture
def user_repository() -> UserInMemoryRepository:
    return UserInMemoryRepository()


@pytest.fixture
async def client(user_repository):
    """FastAPI test client with the repository dependency overridden."""
    app.dependency_overrides[get_user_repository] = lambda: user_repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
