"""Record store interface shared by every entity repository"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Keyed record store

    ``insert`` replaces any record already stored under the key. There is
    no delete and ``values`` carries no meaningful order.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[T]:
        """Get record by key"""
        pass

    @abstractmethod
    async def insert(self, key: str, record: T) -> None:
        """Insert or overwrite record"""
        pass

    @abstractmethod
    async def values(self) -> List[T]:
        """Get all records"""
        pass
