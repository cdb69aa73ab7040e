"""User repository interface"""
from abc import abstractmethod
from typing import Optional
from app.domain.entities.user import User
from app.domain.repositories.record_repository import RecordRepository


class UserRepository(RecordRepository[User]):
    """Interface for user repository"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass
