"""Ticket and comment repository implementations with database"""
from app.domain.entities.comment import Comment
from app.domain.entities.ticket import Ticket, TicketPriority, TicketStatus
from app.domain.repositories.ticket_repository import CommentRepository, TicketRepository
from app.infrastructure.database.models import CommentModel, TicketModel
from app.infrastructure.repositories.record_repository_db import SQLRecordRepository


class TicketRepositoryDB(SQLRecordRepository[Ticket, TicketModel], TicketRepository):
    """Ticket repository implementation with SQL database"""

    model = TicketModel

    def _model_to_entity(self, model: TicketModel) -> Ticket:
        """Convert TicketModel to Ticket entity"""
        return Ticket(
            id=str(model.id),
            user_id=str(model.user_id),
            title=model.title,
            description=model.description,
            status=TicketStatus(model.status),
            status_note=model.status_note,
            priority=TicketPriority(model.priority),
            created_at=model.created_at,
            created_by=str(model.created_by),
            assigned_to=str(model.assigned_to) if model.assigned_to else None,
        )

    def _entity_to_model(self, key: str, entity: Ticket) -> TicketModel:
        """Convert Ticket entity to TicketModel"""
        return TicketModel(
            id=key,
            user_id=entity.user_id,
            title=entity.title,
            description=entity.description,
            status=entity.status,
            status_note=entity.status_note,
            priority=entity.priority,
            created_at=entity.created_at,
            created_by=entity.created_by,
            assigned_to=entity.assigned_to,
        )


class CommentRepositoryDB(SQLRecordRepository[Comment, CommentModel], CommentRepository):
    """Comment repository implementation with SQL database"""

    model = CommentModel

    def _model_to_entity(self, model: CommentModel) -> Comment:
        """Convert CommentModel to Comment entity"""
        return Comment(
            id=str(model.id),
            ticket_id=str(model.ticket_id),
            user_id=model.user_id,
            content=model.content,
            created_at=model.created_at,
        )

    def _entity_to_model(self, key: str, entity: Comment) -> CommentModel:
        """Convert Comment entity to CommentModel"""
        return CommentModel(
            id=key,
            ticket_id=entity.ticket_id,
            user_id=entity.user_id,
            content=entity.content,
            created_at=entity.created_at,
        )
