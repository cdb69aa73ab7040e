"""User repository implementation"""
from typing import Optional
from app.domain.entities.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.record_repository_impl import InMemoryRecordRepository


class UserRepositoryImpl(InMemoryRecordRepository[User], UserRepository):
    """User repository implementation with in-memory storage"""

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        for user in await self.values():
            if user.username == username:
                return user
        return None
