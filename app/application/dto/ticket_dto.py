"""Ticket DTOs"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from app.domain.entities.ticket import (
    TicketPriority,
    TicketStatus,
)


class TicketCreateDTO(BaseModel):
    """DTO for creating a ticket. ``user_id`` is both reporter and caller."""
    user_id: str
    title: str
    description: str
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketAssignDTO(BaseModel):
    """DTO for assigning a ticket to the calling IT support user"""
    user_id: str


class TicketStatusUpdateDTO(BaseModel):
    """DTO for changing ticket status"""
    user_id: str
    new_status: TicketStatus
    note: Optional[str] = None


class TicketResponseDTO(BaseModel):
    """DTO for ticket response"""
    id: str
    user_id: str
    title: str
    description: str
    status: TicketStatus
    status_note: Optional[str] = None
    priority: TicketPriority
    created_at: datetime
    created_by: str
    assigned_to: Optional[str] = None

    model_config = {"from_attributes": True}


class CommentCreateDTO(BaseModel):
    """DTO for creating a comment"""
    user_id: str
    content: str


class CommentResponseDTO(BaseModel):
    """DTO for comment response"""
    id: str
    ticket_id: str
    user_id: str
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}
