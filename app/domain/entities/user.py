"""User domain entity"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """User roles enum"""
    ADMIN = "Admin"
    IT_SUPPORT = "ITSupport"
    USER = "User"


@dataclass
class User:
    """User domain entity"""
    id: str
    username: str
    role: UserRole
    created_at: datetime
