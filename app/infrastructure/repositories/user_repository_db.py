"""User repository implementation with database"""
from typing import Optional
from app.domain.entities.user import User, UserRole
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.database.models import UserModel
from app.infrastructure.repositories.record_repository_db import SQLRecordRepository


class UserRepositoryDB(SQLRecordRepository[User, UserModel], UserRepository):
    """User repository implementation with SQL database"""

    model = UserModel

    def _model_to_entity(self, model: UserModel) -> User:
        """Convert UserModel to User entity"""
        return User(
            id=str(model.id),
            username=model.username,
            role=UserRole(model.role),
            created_at=model.created_at,
        )

    def _entity_to_model(self, key: str, entity: User) -> UserModel:
        """Convert User entity to UserModel"""
        return UserModel(
            id=key,
            username=entity.username,
            role=entity.role,
            created_at=entity.created_at,
        )

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        with self.session_factory() as db:
            return self._query_first(db, UserModel.username == username)
