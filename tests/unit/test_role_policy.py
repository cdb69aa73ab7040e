"""Unit tests for the role policy."""

from datetime import datetime, timezone

import pytest

from app.domain.entities.user import User, UserRole
from app.domain.policies import is_admin, is_it_support, is_staff
from app.infrastructure.repositories.user_repository_impl import UserRepositoryImpl

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def users() -> UserRepositoryImpl:
    return UserRepositoryImpl()


@pytest.mark.asyncio
async def test_unknown_user_has_no_role(users: UserRepositoryImpl):
    assert await is_admin(users, "missing") is False
    assert await is_it_support(users, "missing") is False
    assert await is_staff(users, "missing") is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "role, admin, support",
    [
        (UserRole.ADMIN, True, False),
        (UserRole.IT_SUPPORT, False, True),
        (UserRole.USER, False, False),
    ],
)
async def test_role_checks(users: UserRepositoryImpl, role, admin, support):
    await users.insert("u1", User(id="u1", username="someone", role=role, created_at=NOW))

    assert await is_admin(users, "u1") is admin
    assert await is_it_support(users, "u1") is support
    assert await is_staff(users, "u1") is (admin or support)


@pytest.mark.asyncio
async def test_role_change_is_seen_by_next_check(users: UserRepositoryImpl):
    await users.insert("u1", User(id="u1", username="dana", role=UserRole.USER, created_at=NOW))
    assert await is_it_support(users, "u1") is False

    await users.insert("u1", User(id="u1", username="dana", role=UserRole.IT_SUPPORT, created_at=NOW))
    assert await is_it_support(users, "u1") is True
