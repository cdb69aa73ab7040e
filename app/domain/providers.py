"""Clock and identifier collaborators used by the use cases"""
from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Wall-clock source"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware datetime"""
        pass

    def now_millis(self) -> int:
        """Current time as epoch milliseconds"""
        return int(self.now().timestamp() * 1000)


class IdGenerator(ABC):
    """Source of globally unique opaque identifiers"""

    @abstractmethod
    def new_id(self) -> str:
        pass
