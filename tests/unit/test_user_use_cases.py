"""Unit tests for user use cases."""

import pytest

from app.application.dto.user_dto import UserCreateDTO
from app.application.use_cases.user_use_cases import UserUseCases
from app.domain.entities.user import UserRole
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError


@pytest.mark.asyncio
async def test_create_user(user_use_cases: UserUseCases, clock):
    user = await user_use_cases.create_user(UserCreateDTO(username="alice", role=UserRole.ADMIN))

    assert user.id
    assert user.username == "alice"
    assert user.role == UserRole.ADMIN
    assert user.created_at == clock.now()


@pytest.mark.asyncio
async def test_duplicate_username_conflicts(user_use_cases: UserUseCases):
    await user_use_cases.create_user(UserCreateDTO(username="alice", role=UserRole.ADMIN))

    with pytest.raises(ConflictError):
        await user_use_cases.create_user(UserCreateDTO(username="alice", role=UserRole.USER))

    users = await user_use_cases.get_all_users()
    assert [u.username for u in users] == ["alice"]


@pytest.mark.asyncio
async def test_usernames_stay_unique(user_use_cases: UserUseCases):
    names = ["a", "b", "a", "c", "b", "a"]
    created = []
    for name in names:
        try:
            created.append(await user_use_cases.create_user(UserCreateDTO(username=name)))
        except ConflictError:
            pass

    usernames = [u.username for u in created]
    assert sorted(usernames) == ["a", "b", "c"]


@pytest.mark.asyncio
@pytest.mark.parametrize("username", ["", "   "])
async def test_empty_username_rejected(user_use_cases: UserUseCases, username):
    with pytest.raises(ValidationError):
        await user_use_cases.create_user(UserCreateDTO(username=username))


@pytest.mark.asyncio
async def test_default_role_is_user(user_use_cases: UserUseCases):
    user = await user_use_cases.create_user(UserCreateDTO(username="carol"))
    assert user.role == UserRole.USER


@pytest.mark.asyncio
async def test_get_user_by_id(user_use_cases: UserUseCases):
    created = await user_use_cases.create_user(UserCreateDTO(username="bob", role=UserRole.IT_SUPPORT))
    assert await user_use_cases.get_user(created.id) == created


@pytest.mark.asyncio
async def test_get_user_not_found(user_use_cases: UserUseCases):
    with pytest.raises(NotFoundError):
        await user_use_cases.get_user("nope")


@pytest.mark.asyncio
async def test_get_all_users_on_empty_store(user_use_cases: UserUseCases):
    with pytest.raises(NotFoundError):
        await user_use_cases.get_all_users()
