"""Ticket and comment repository interfaces"""
from app.domain.entities.comment import Comment
from app.domain.entities.ticket import Ticket
from app.domain.repositories.record_repository import RecordRepository


class TicketRepository(RecordRepository[Ticket]):
    """Interface for ticket repository"""


class CommentRepository(RecordRepository[Comment]):
    """Interface for comment repository"""
