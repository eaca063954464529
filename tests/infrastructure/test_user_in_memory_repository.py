"""UserInMemoryRepository tests — user filter, default ordering and email lookups.

Tests cover:
    - find_by_email: invalid input, unknown address, hit
    - email_exists: empty input no-op, free address, taken address → ConflictError
    - Filter over name OR email, case-insensitive
    - Default sort is created_at descending; explicit sorts honoured
"""

from datetime import datetime, timedelta, timezone

import pytest

from userbase.core.errors import ConflictError, NotFoundError
from userbase.core.search_params import SearchParams
from userbase.core.user_entity import UserEntity
from userbase.infrastructure.user_in_memory_repository import UserInMemoryRepository
from tests.helpers import make_user_props


@pytest.fixture
def sut() -> UserInMemoryRepository:
    return UserInMemoryRepository()


def _user(**overrides) -> UserEntity:
    return UserEntity(make_user_props(**overrides))


# --- find_by_email ------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["", None, 123])
async def test_find_by_email_invalid_input(sut, email):
    with pytest.raises(NotFoundError, match="Invalid email provided"):
        await sut.find_by_email(email)


@pytest.mark.asyncio
async def test_find_by_email_unknown(sut):
    with pytest.raises(NotFoundError, match="User not found with email a@a.com"):
        await sut.find_by_email("a@a.com")


@pytest.mark.asyncio
async def test_find_by_email(sut):
    user = _user(email="a@a.com")
    await sut.insert(user)
    assert await sut.find_by_email("a@a.com") is user


# --- email_exists -------------------------------------------------------------

@pytest.mark.asyncio
async def test_email_exists_free_address(sut):
    assert await sut.email_exists("a@a.com") is None


@pytest.mark.asyncio
async def test_email_exists_ignores_empty_input(sut):
    await sut.insert(_user(email="a@a.com"))
    assert await sut.email_exists("") is None


@pytest.mark.asyncio
async def test_email_exists_taken_address(sut):
    await sut.insert(_user(email="a@a.com"))
    with pytest.raises(ConflictError, match="Email address already used"):
        await sut.email_exists("a@a.com")


# --- apply_filter -------------------------------------------------------------

@pytest.mark.asyncio
async def test_filter_none_returns_all(sut):
    items = [_user(name="test"), _user(name="other")]
    assert await sut.apply_filter(items, None) == items


@pytest.mark.asyncio
async def test_filter_matches_name_or_email(sut):
    items = [
        _user(name="Test Name", email="first@example.com"),
        _user(name="Other", email="TEST.VALUE@example.com"),
        _user(name="other", email="third@example.com"),
    ]
    result = await sut.apply_filter(items, "test")
    assert result == items[:2]


# --- apply_sort ---------------------------------------------------------------

def test_default_sort_is_created_at_desc(sut):
    now = datetime.now(timezone.utc)
    items = [
        _user(name="oldest", created_at=now),
        _user(name="middle", created_at=now + timedelta(seconds=1)),
        _user(name="newest", created_at=now + timedelta(seconds=2)),
    ]
    result = sut.apply_sort(items, None, None)
    assert [u.name for u in result] == ["newest", "middle", "oldest"]


def test_sort_by_name(sut):
    items = [_user(name="c"), _user(name="a"), _user(name="b")]
    assert [u.name for u in sut.apply_sort(items, "name", "asc")] == ["a", "b", "c"]
    assert [u.name for u in sut.apply_sort(items, "name", "desc")] == ["c", "b", "a"]


def test_sort_by_email(sut):
    items = [_user(email="b@x.com"), _user(email="a@x.com")]
    assert [u.email for u in sut.apply_sort(items, "email", "asc")] == ["a@x.com", "b@x.com"]


def test_sort_by_unsortable_field_keeps_order(sut):
    items = [_user(name="b"), _user(name="a")]
    assert sut.apply_sort(items, "password", "asc") == items


# --- search -------------------------------------------------------------------

@pytest.mark.asyncio
async def test_search_filters_then_sorts(sut):
    now = datetime.now(timezone.utc)
    for offset, name in enumerate(["Test A", "Other", "test b", "TEST c"]):
        await sut.insert(_user(name=name, created_at=now + timedelta(seconds=offset)))

    result = await sut.search(SearchParams(per_page=2, filter="TEST"))

    assert result.total == 3
    assert result.last_page == 2
    assert [u.name for u in result.items] == ["TEST c", "test b"]
