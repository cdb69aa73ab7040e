"""Ticket use cases"""
import asyncio
import logging
from dataclasses import replace
from typing import List, Optional
from app.domain.entities.comment import Comment
from app.domain.entities.ticket import DEFAULT_OPEN_NOTE, Ticket, TicketStatus
from app.domain.exceptions import AuthorizationError, NotFoundError, ValidationError
from app.domain.policies import is_it_support, is_staff
from app.domain.providers import Clock, IdGenerator
from app.domain.repositories.ticket_repository import CommentRepository, TicketRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.dto.ticket_dto import (
    CommentCreateDTO,
    CommentResponseDTO,
    TicketAssignDTO,
    TicketCreateDTO,
    TicketResponseDTO,
    TicketStatusUpdateDTO,
)

logger = logging.getLogger(__name__)


class TicketUseCases:
    """Use cases for ticket and comment operations"""

    def __init__(
        self,
        ticket_repository: TicketRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        clock: Clock,
        id_generator: IdGenerator,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.ticket_repository = ticket_repository
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator
        self._lock = lock or asyncio.Lock()

    async def create_ticket(self, ticket_data: TicketCreateDTO) -> TicketResponseDTO:
        """Create a new ticket

        Only IT support and Admins can create tickets.
        """
        if not ticket_data.user_id or not ticket_data.title or not ticket_data.description:
            raise ValidationError("User ID, title, and description are required")

        async with self._lock:
            user = await self.user_repository.get(ticket_data.user_id)
            if not user:
                raise NotFoundError.for_entity("User", ticket_data.user_id)

            if not await is_staff(self.user_repository, ticket_data.user_id):
                logger.warning("User %s may not create tickets", ticket_data.user_id)
                raise AuthorizationError("Only IT support and Admins can create tickets")

            ticket = Ticket(
                id=self.id_generator.new_id(),
                user_id=ticket_data.user_id,
                title=ticket_data.title,
                description=ticket_data.description,
                status=TicketStatus.OPEN,
                status_note=DEFAULT_OPEN_NOTE,
                priority=ticket_data.priority,
                created_at=self.clock.now(),
                created_by=ticket_data.user_id,
                assigned_to=None,
            )
            await self.ticket_repository.insert(ticket.id, ticket)

        logger.info("Created ticket %s by %s", ticket.id, ticket.created_by)
        return self._ticket_to_dto(ticket)

    async def assign_ticket(self, ticket_id: str, assign_data: TicketAssignDTO) -> TicketResponseDTO:
        """Assign ticket to the calling IT support user"""
        async with self._lock:
            ticket = await self.ticket_repository.get(ticket_id)
            if not ticket:
                raise NotFoundError.for_entity("Ticket", ticket_id)

            user = await self.user_repository.get(assign_data.user_id)
            if not user:
                raise NotFoundError.for_entity("User", assign_data.user_id)

            if not await is_it_support(self.user_repository, assign_data.user_id):
                logger.warning("User %s may not assign tickets", assign_data.user_id)
                raise AuthorizationError("Only IT support can assign tickets")

            updated_ticket = replace(ticket, assigned_to=assign_data.user_id)
            await self.ticket_repository.insert(ticket_id, updated_ticket)

        logger.info("Ticket %s assigned to %s", ticket_id, assign_data.user_id)
        return self._ticket_to_dto(updated_ticket)

    async def update_ticket_status(
        self, ticket_id: str, status_data: TicketStatusUpdateDTO
    ) -> TicketResponseDTO:
        """Change ticket status. Any status may follow any other."""
        async with self._lock:
            # An unknown caller fails the role gate too
            if not await is_staff(self.user_repository, status_data.user_id):
                logger.warning("User %s may not change ticket status", status_data.user_id)
                raise AuthorizationError("Only IT support and Admins can update ticket status")

            ticket = await self.ticket_repository.get(ticket_id)
            if not ticket:
                raise NotFoundError.for_entity("Ticket", ticket_id)

            updated_ticket = replace(
                ticket,
                status=status_data.new_status,
                status_note=status_data.note,
            )
            await self.ticket_repository.insert(ticket_id, updated_ticket)

        logger.info("Ticket %s moved to %s", ticket_id, status_data.new_status.value)
        return self._ticket_to_dto(updated_ticket)

    async def get_all_tickets(self) -> List[TicketResponseDTO]:
        """Get all tickets. An empty store is reported as NotFoundError."""
        async with self._lock:
            tickets = await self.ticket_repository.values()
        if not tickets:
            raise NotFoundError("No tickets found")
        return [self._ticket_to_dto(ticket) for ticket in tickets]

    async def get_ticket(self, ticket_id: str) -> TicketResponseDTO:
        """Get ticket by ID"""
        async with self._lock:
            ticket = await self.ticket_repository.get(ticket_id)
        if not ticket:
            raise NotFoundError.for_entity("Ticket", ticket_id)
        return self._ticket_to_dto(ticket)

    async def add_comment(self, ticket_id: str, comment_data: CommentCreateDTO) -> CommentResponseDTO:
        """Add comment to ticket. The author id is stored as given."""
        async with self._lock:
            ticket = await self.ticket_repository.get(ticket_id)
            if not ticket:
                raise NotFoundError.for_entity("Ticket", ticket_id)

            comment = Comment(
                id=self.id_generator.new_id(),
                ticket_id=ticket_id,
                user_id=comment_data.user_id,
                content=comment_data.content,
                created_at=self.clock.now(),
            )
            await self.comment_repository.insert(comment.id, comment)

        logger.info("Comment %s added to ticket %s", comment.id, ticket_id)
        return self._comment_to_dto(comment)

    async def get_comments(self, ticket_id: str) -> List[CommentResponseDTO]:
        """Get comments for a ticket

        Raises NotFoundError only when the ticket itself does not exist; a
        ticket without comments yields an empty list.
        """
        async with self._lock:
            ticket = await self.ticket_repository.get(ticket_id)
            if not ticket:
                raise NotFoundError.for_entity("Ticket", ticket_id)
            comments = await self.comment_repository.values()

        return [
            self._comment_to_dto(comment)
            for comment in comments
            if comment.ticket_id == ticket_id
        ]

    def _ticket_to_dto(self, ticket: Ticket) -> TicketResponseDTO:
        """Convert Ticket entity to TicketResponseDTO"""
        return TicketResponseDTO(
            id=ticket.id,
            user_id=ticket.user_id,
            title=ticket.title,
            description=ticket.description,
            status=ticket.status,
            status_note=ticket.status_note,
            priority=ticket.priority,
            created_at=ticket.created_at,
            created_by=ticket.created_by,
            assigned_to=ticket.assigned_to,
        )

    def _comment_to_dto(self, comment: Comment) -> CommentResponseDTO:
        """Convert Comment entity to CommentResponseDTO"""
        return CommentResponseDTO(
            id=comment.id,
            ticket_id=comment.ticket_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
        )
