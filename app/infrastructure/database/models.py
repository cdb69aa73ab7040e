"""SQLAlchemy database models"""
from datetime import timezone
from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, String, Text, Enum as SQLEnum
from sqlalchemy.types import TypeDecorator
from app.infrastructure.database.base import Base
from app.domain.entities.user import UserRole
from app.domain.entities.ticket import TicketPriority, TicketStatus


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime stored as UTC

    SQLite keeps no offset, so values read back without one are UTC.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def id_column():
    """Primary key column holding an opaque string identifier"""
    return Column(String(36), primary_key=True)


class UserModel(Base):
    """User database model"""
    __tablename__ = "users"

    id = id_column()
    username = Column(String(100), unique=True, nullable=False, index=True)
    role = Column(SQLEnum(UserRole, native_enum=False), nullable=False, default=UserRole.USER)
    created_at = Column(UTCDateTime(), nullable=False)


class TicketModel(Base):
    """Ticket database model"""
    __tablename__ = "tickets"

    id = id_column()
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(SQLEnum(TicketStatus, native_enum=False), nullable=False, default=TicketStatus.OPEN, index=True)
    status_note = Column(Text, nullable=True)
    priority = Column(SQLEnum(TicketPriority, native_enum=False), nullable=False, default=TicketPriority.MEDIUM)
    created_at = Column(UTCDateTime(), nullable=False)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)
    assigned_to = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)


class CommentModel(Base):
    """Comment database model"""
    __tablename__ = "comments"

    id = id_column()
    ticket_id = Column(String(36), ForeignKey("tickets.id"), nullable=False, index=True)
    # Author id is stored as given, without a foreign key
    user_id = Column(String(36), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(UTCDateTime(), nullable=False)


class ITAssetModel(Base):
    """IT asset database model"""
    __tablename__ = "it_assets"

    id = id_column()
    asset_name = Column(String(255), nullable=False)
    asset_type = Column(String(100), nullable=False)
    purchase_date = Column(BigInteger, nullable=False)  # epoch millis
    assigned_to = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    approx_value = Column(BigInteger, nullable=False)
    depreciation_rate = Column(BigInteger, nullable=False)


class MaintenanceRecordModel(Base):
    """Asset maintenance record database model"""
    __tablename__ = "asset_maintenance_records"

    id = id_column()
    asset_id = Column(String(36), ForeignKey("it_assets.id"), nullable=False, index=True)
    maintenance_type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    cost = Column(BigInteger, nullable=False)
    date = Column(BigInteger, nullable=False)  # epoch millis
