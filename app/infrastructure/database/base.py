"""Database base configuration"""
import logging
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def create_db_engine(settings: Settings, database_url: Optional[str] = None) -> Engine:
    """Create database engine with connect args suited to the backend"""
    database_url = database_url or settings.get_database_url()

    if database_url.startswith("sqlite"):
        logger.info("🔌 Using SQLite database: %s", database_url)
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(database_url, connect_args=connect_args)

    logger.info(
        "🔌 Connecting to %s database: %s@%s:%s",
        settings.DATABASE_TYPE,
        settings.DB_NAME,
        settings.DB_HOST,
        settings.DB_PORT,
    )
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create session factory bound to the engine

    expire_on_commit=False keeps loaded attributes readable after the
    repository commits and closes its session.
    """
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Initialize database - create all tables"""
    from app.infrastructure.database import models  # noqa: F401  Import models to register them

    Base.metadata.create_all(bind=engine)
    logger.info("✅ Database initialized")
