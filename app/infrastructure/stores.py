"""Record store wiring

The five stores are built once at startup and handed to every use case.
All operations share one lock, so mutations never interleave with each
other or with reads.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional
from app.domain.providers import Clock, IdGenerator
from app.domain.repositories.asset_repository import AssetRepository, MaintenanceRecordRepository
from app.domain.repositories.ticket_repository import CommentRepository, TicketRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.config.settings import Settings
from app.infrastructure.providers import SystemClock, UuidGenerator

logger = logging.getLogger(__name__)


@dataclass
class RecordStores:
    """The five record stores plus the collaborators every use case needs"""
    users: UserRepository
    tickets: TicketRepository
    comments: CommentRepository
    assets: AssetRepository
    maintenance_records: MaintenanceRecordRepository
    clock: Clock = field(default_factory=SystemClock)
    id_generator: IdGenerator = field(default_factory=UuidGenerator)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def build_memory_stores(
    clock: Optional[Clock] = None,
    id_generator: Optional[IdGenerator] = None,
) -> RecordStores:
    """Fresh in-memory stores"""
    from app.infrastructure.repositories.asset_repository_impl import (
        AssetRepositoryImpl,
        MaintenanceRecordRepositoryImpl,
    )
    from app.infrastructure.repositories.ticket_repository_impl import (
        CommentRepositoryImpl,
        TicketRepositoryImpl,
    )
    from app.infrastructure.repositories.user_repository_impl import UserRepositoryImpl

    return RecordStores(
        users=UserRepositoryImpl(),
        tickets=TicketRepositoryImpl(),
        comments=CommentRepositoryImpl(),
        assets=AssetRepositoryImpl(),
        maintenance_records=MaintenanceRecordRepositoryImpl(),
        clock=clock or SystemClock(),
        id_generator=id_generator or UuidGenerator(),
    )


def build_database_stores(
    settings: Settings,
    database_url: Optional[str] = None,
    clock: Optional[Clock] = None,
    id_generator: Optional[IdGenerator] = None,
) -> RecordStores:
    """Stores backed by the configured database; creates missing tables"""
    from app.infrastructure.database.base import create_db_engine, create_session_factory, init_db
    from app.infrastructure.repositories.asset_repository_db import (
        AssetRepositoryDB,
        MaintenanceRecordRepositoryDB,
    )
    from app.infrastructure.repositories.ticket_repository_db import (
        CommentRepositoryDB,
        TicketRepositoryDB,
    )
    from app.infrastructure.repositories.user_repository_db import UserRepositoryDB

    engine = create_db_engine(settings, database_url)
    init_db(engine)
    session_factory = create_session_factory(engine)

    return RecordStores(
        users=UserRepositoryDB(session_factory),
        tickets=TicketRepositoryDB(session_factory),
        comments=CommentRepositoryDB(session_factory),
        assets=AssetRepositoryDB(session_factory),
        maintenance_records=MaintenanceRecordRepositoryDB(session_factory),
        clock=clock or SystemClock(),
        id_generator=id_generator or UuidGenerator(),
    )


def build_stores(settings: Settings) -> RecordStores:
    """Build stores for the configured storage backend"""
    if settings.STORAGE_BACKEND == "memory":
        logger.info("🗂️  Using in-memory record stores")
        return build_memory_stores()
    if settings.STORAGE_BACKEND == "database":
        return build_database_stores(settings)
    raise ValueError(f"Unsupported storage backend: {settings.STORAGE_BACKEND}")
