"""Ticket domain entity"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class TicketPriority(str, Enum):
    """Ticket priority levels"""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TicketStatus(str, Enum):
    """Ticket status"""
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    CLOSED = "Closed"


DEFAULT_OPEN_NOTE = "Ticket is open"


@dataclass
class Ticket:
    """Ticket domain entity

    ``status_note`` is the optional descriptive text carried by the current
    status. ``user_id`` is the reporter; ``created_by`` is set to the same
    id at creation.
    """
    id: str
    user_id: str
    title: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime
    created_by: str
    status_note: Optional[str] = None
    assigned_to: Optional[str] = None
