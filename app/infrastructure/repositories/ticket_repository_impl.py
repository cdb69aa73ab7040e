"""Ticket and comment repository implementations"""
from app.domain.entities.comment import Comment
from app.domain.entities.ticket import Ticket
from app.domain.repositories.ticket_repository import CommentRepository, TicketRepository
from app.infrastructure.repositories.record_repository_impl import InMemoryRecordRepository


class TicketRepositoryImpl(InMemoryRecordRepository[Ticket], TicketRepository):
    """Ticket repository implementation with in-memory storage"""


class CommentRepositoryImpl(InMemoryRecordRepository[Comment], CommentRepository):
    """Comment repository implementation with in-memory storage"""
