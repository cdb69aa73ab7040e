"""Tickets API router"""
from fastapi import APIRouter, Depends, status
from typing import List
from app.application.dto.ticket_dto import (
    CommentCreateDTO,
    CommentResponseDTO,
    TicketAssignDTO,
    TicketCreateDTO,
    TicketResponseDTO,
    TicketStatusUpdateDTO,
)
from app.presentation.api.v1.dependencies import get_ticket_use_cases
from app.application.use_cases.ticket_use_cases import TicketUseCases

router = APIRouter(prefix="/tickets", tags=["tickets"], redirect_slashes=False)


@router.post("/", response_model=TicketResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    ticket_data: TicketCreateDTO,
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Create a new ticket

    The reporting user must be IT support or an Admin.
    """
    return await use_cases.create_ticket(ticket_data)


@router.get("/", response_model=List[TicketResponseDTO])
async def get_all_tickets(
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Get all tickets"""
    return await use_cases.get_all_tickets()


@router.get("/{ticket_id}", response_model=TicketResponseDTO)
async def get_ticket(
    ticket_id: str,
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Get ticket by ID"""
    return await use_cases.get_ticket(ticket_id)


@router.post("/{ticket_id}/assign", response_model=TicketResponseDTO)
async def assign_ticket(
    ticket_id: str,
    assign_data: TicketAssignDTO,
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Assign ticket to the calling IT support user"""
    return await use_cases.assign_ticket(ticket_id, assign_data)


@router.put("/{ticket_id}/status", response_model=TicketResponseDTO)
async def update_ticket_status(
    ticket_id: str,
    status_data: TicketStatusUpdateDTO,
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Update ticket status (Admin and IT support only)"""
    return await use_cases.update_ticket_status(ticket_id, status_data)


@router.post(
    "/{ticket_id}/comments",
    response_model=CommentResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    ticket_id: str,
    comment_data: CommentCreateDTO,
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Add comment to ticket"""
    return await use_cases.add_comment(ticket_id, comment_data)


@router.get("/{ticket_id}/comments", response_model=List[CommentResponseDTO])
async def get_comments(
    ticket_id: str,
    use_cases: TicketUseCases = Depends(get_ticket_use_cases),
):
    """Get comments for a ticket"""
    return await use_cases.get_comments(ticket_id)
