"""SQLAlchemy record store"""
import logging
from abc import abstractmethod
from typing import Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session, sessionmaker
from app.domain.repositories.record_repository import RecordRepository
from app.infrastructure.database.base import Base

T = TypeVar("T")
M = TypeVar("M", bound=Base)

logger = logging.getLogger(__name__)


class SQLRecordRepository(RecordRepository[T], Generic[T, M]):
    """Record store backed by one database table

    Every call opens its own session and commits before returning, so a
    completed insert is durable.
    """

    model: Type[M]

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @abstractmethod
    def _model_to_entity(self, model: M) -> T:
        """Convert database model to domain entity"""
        pass

    @abstractmethod
    def _entity_to_model(self, key: str, entity: T) -> M:
        """Convert domain entity to database model"""
        pass

    async def get(self, key: str) -> Optional[T]:
        """Get record by key"""
        with self.session_factory() as db:
            instance = db.get(self.model, key)
            if instance is None:
                return None
            return self._model_to_entity(instance)

    async def insert(self, key: str, record: T) -> None:
        """Insert or overwrite record"""
        with self.session_factory() as db:
            try:
                db.merge(self._entity_to_model(key, record))
                db.commit()
            except Exception:
                db.rollback()
                logger.exception("❌ Failed to write %s %s", self.model.__tablename__, key)
                raise

    async def values(self) -> List[T]:
        """Get all records"""
        with self.session_factory() as db:
            return [self._model_to_entity(instance) for instance in db.query(self.model).all()]

    def _query_first(self, db: Session, *criteria) -> Optional[T]:
        instance = db.query(self.model).filter(*criteria).first()
        if instance is None:
            return None
        return self._model_to_entity(instance)
