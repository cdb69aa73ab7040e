# Database
from app.infrastructure.database.base import Base, create_db_engine, create_session_factory, init_db
from app.infrastructure.database.models import (
    UserModel,
    TicketModel,
    CommentModel,
    ITAssetModel,
    MaintenanceRecordModel,
)

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "UserModel",
    "TicketModel",
    "CommentModel",
    "ITAssetModel",
    "MaintenanceRecordModel",
]
