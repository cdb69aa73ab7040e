"""User DTOs"""
from datetime import datetime
from pydantic import BaseModel
from app.domain.entities.user import UserRole


class UserCreateDTO(BaseModel):
    """DTO for creating a user"""
    username: str
    role: UserRole = UserRole.USER


class UserResponseDTO(BaseModel):
    """DTO for user response"""
    id: str
    username: str
    role: UserRole
    created_at: datetime

    model_config = {"from_attributes": True}
