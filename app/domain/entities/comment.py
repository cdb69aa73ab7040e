"""Comment domain entity"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    """Comment left on a ticket"""
    id: str
    ticket_id: str
    user_id: str
    content: str
    created_at: datetime
