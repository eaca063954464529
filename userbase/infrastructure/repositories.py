"""Repository Provider — process-wide repository instances for the HTTP layer.

Invariants:
    - One UserInMemoryRepository per process; state lost on restart
    - Routes obtain it only through get_user_repository (overridable in tests)

Design Decisions:
    - Module-level instance: single-process uvicorn, no multi-worker, in-memory only
"""

from userbase.infrastructure.user_in_memory_repository import UserInMemoryRepository

_user_repository = UserInMemoryRepository()


def get_user_repository() -> UserInMemoryRepository:
    return _user_repository
