"""In-memory record store"""
from dataclasses import replace
from typing import Dict, List, Optional, TypeVar
from app.domain.repositories.record_repository import RecordRepository

T = TypeVar("T")


class InMemoryRecordRepository(RecordRepository[T]):
    """Record store backed by a dict

    Records are copied on the way in and out, so callers never hold a
    reference to the stored instance.
    """

    def __init__(self):
        self._records: Dict[str, T] = {}

    async def get(self, key: str) -> Optional[T]:
        """Get record by key"""
        record = self._records.get(key)
        if record is None:
            return None
        return replace(record)

    async def insert(self, key: str, record: T) -> None:
        """Insert or overwrite record"""
        self._records[key] = replace(record)

    async def values(self) -> List[T]:
        """Get all records"""
        return [replace(record) for record in self._records.values()]
