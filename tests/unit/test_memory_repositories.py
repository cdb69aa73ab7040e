"""Unit tests for the in-memory record stores."""

from datetime import datetime, timezone

import pytest

from app.domain.entities.ticket import Ticket, TicketPriority, TicketStatus
from app.domain.entities.user import User, UserRole
from app.infrastructure.repositories.ticket_repository_impl import TicketRepositoryImpl
from app.infrastructure.repositories.user_repository_impl import UserRepositoryImpl

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_ticket(ticket_id: str = "t1") -> Ticket:
    return Ticket(
        id=ticket_id,
        user_id="u1",
        title="Printer broken",
        description="No toner",
        status=TicketStatus.OPEN,
        priority=TicketPriority.LOW,
        created_at=NOW,
        created_by="u1",
    )


@pytest.mark.asyncio
async def test_get_missing_key():
    assert await TicketRepositoryImpl().get("nope") is None


@pytest.mark.asyncio
async def test_insert_overwrites():
    repo = TicketRepositoryImpl()
    await repo.insert("t1", make_ticket())
    replacement = make_ticket()
    replacement.title = "Printer fixed"
    await repo.insert("t1", replacement)

    assert (await repo.get("t1")).title == "Printer fixed"
    assert len(await repo.values()) == 1


@pytest.mark.asyncio
async def test_records_are_not_shared_by_reference():
    repo = TicketRepositoryImpl()
    ticket = make_ticket()
    await repo.insert("t1", ticket)

    ticket.title = "mutated after insert"
    fetched = await repo.get("t1")
    fetched.assigned_to = "someone"

    stored = await repo.get("t1")
    assert stored.title == "Printer broken"
    assert stored.assigned_to is None


@pytest.mark.asyncio
async def test_get_by_username():
    repo = UserRepositoryImpl()
    await repo.insert("u1", User(id="u1", username="alice", role=UserRole.ADMIN, created_at=NOW))

    assert (await repo.get_by_username("alice")).id == "u1"
    assert await repo.get_by_username("bob") is None
