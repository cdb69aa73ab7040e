"""Role policy

Roles are looked up on every call, so a role change is visible to the very
next check.
"""
from app.domain.entities.user import UserRole
from app.domain.repositories.user_repository import UserRepository


async def has_role(users: UserRepository, user_id: str, role: UserRole) -> bool:
    user = await users.get(user_id)
    if user is None:
        return False
    return user.role == role


async def is_admin(users: UserRepository, user_id: str) -> bool:
    """True if the user exists and is an Admin"""
    return await has_role(users, user_id, UserRole.ADMIN)


async def is_it_support(users: UserRepository, user_id: str) -> bool:
    """True if the user exists and is IT support"""
    return await has_role(users, user_id, UserRole.IT_SUPPORT)


async def is_staff(users: UserRepository, user_id: str) -> bool:
    """True if the user is IT support or an Admin"""
    return await is_it_support(users, user_id) or await is_admin(users, user_id)
