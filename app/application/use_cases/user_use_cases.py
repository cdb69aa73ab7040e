"""User use cases"""
import asyncio
import logging
from typing import List, Optional
from app.domain.entities.user import User
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError
from app.domain.providers import Clock, IdGenerator
from app.domain.repositories.user_repository import UserRepository
from app.application.dto.user_dto import UserCreateDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class UserUseCases:
    """Use cases for user operations"""

    def __init__(
        self,
        user_repository: UserRepository,
        clock: Clock,
        id_generator: IdGenerator,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator
        self._lock = lock or asyncio.Lock()

    async def create_user(self, user_data: UserCreateDTO) -> UserResponseDTO:
        """Create a new user with a unique username"""
        if not user_data.username or not user_data.username.strip():
            raise ValidationError("Username is required")

        async with self._lock:
            existing = await self.user_repository.get_by_username(user_data.username)
            if existing:
                logger.warning("Rejected duplicate username %r", user_data.username)
                raise ConflictError(
                    f"User with username '{user_data.username}' already exists"
                )

            user = User(
                id=self.id_generator.new_id(),
                username=user_data.username,
                role=user_data.role,
                created_at=self.clock.now(),
            )
            await self.user_repository.insert(user.id, user)

        logger.info("Created user %s (%s, %s)", user.id, user.username, user.role.value)
        return self._user_to_dto(user)

    async def get_user(self, user_id: str) -> UserResponseDTO:
        """Get user by ID"""
        async with self._lock:
            user = await self.user_repository.get(user_id)
        if not user:
            raise NotFoundError.for_entity("User", user_id)
        return self._user_to_dto(user)

    async def get_all_users(self) -> List[UserResponseDTO]:
        """Get all users. An empty store is reported as NotFoundError."""
        async with self._lock:
            users = await self.user_repository.values()
        if not users:
            raise NotFoundError("No users found")
        return [self._user_to_dto(user) for user in users]

    def _user_to_dto(self, user: User) -> UserResponseDTO:
        """Convert User entity to UserResponseDTO"""
        return UserResponseDTO(
            id=user.id,
            username=user.username,
            role=user.role,
            created_at=user.created_at,
        )
