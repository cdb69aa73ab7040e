"""Users API router"""
from fastapi import APIRouter, Depends, status
from typing import List
from app.application.dto.user_dto import (
    UserCreateDTO,
    UserResponseDTO,
)
from app.presentation.api.v1.dependencies import get_user_use_cases
from app.application.use_cases.user_use_cases import UserUseCases

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.post("/", response_model=UserResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreateDTO,
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    """Create a new user. Usernames must be unique."""
    return await use_cases.create_user(user_data)


@router.get("/", response_model=List[UserResponseDTO])
async def get_all_users(
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    """Get all users"""
    return await use_cases.get_all_users()


@router.get("/{user_id}", response_model=UserResponseDTO)
async def get_user(
    user_id: str,
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    """Get user by ID"""
    return await use_cases.get_user(user_id)
