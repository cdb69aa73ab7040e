"""System clock and uuid4 identifier generator"""
import uuid
from datetime import datetime, timezone
from app.domain.providers import Clock, IdGenerator


class SystemClock(Clock):
    """UTC wall clock"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidGenerator(IdGenerator):
    """Random uuid4 identifiers"""

    def new_id(self) -> str:
        return str(uuid.uuid4())
