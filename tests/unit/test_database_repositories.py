"""Tests for the SQLAlchemy record stores against SQLite."""

import json

import pytest

from app.application.dto.asset_dto import ITAssetCreateDTO, MaintenanceRecordCreateDTO
from app.application.dto.report_dto import ReportType
from app.application.dto.ticket_dto import CommentCreateDTO, TicketAssignDTO, TicketCreateDTO, TicketResponseDTO
from app.application.dto.user_dto import UserCreateDTO
from app.application.use_cases.asset_use_cases import AssetUseCases
from app.application.use_cases.report_use_cases import ReportUseCases
from app.application.use_cases.ticket_use_cases import TicketUseCases
from app.application.use_cases.user_use_cases import UserUseCases
from app.domain.entities.ticket import TicketStatus
from app.domain.entities.user import UserRole
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.config.settings import Settings
from app.infrastructure.stores import RecordStores, build_database_stores


@pytest.fixture
def db_stores(clock) -> RecordStores:
    return build_database_stores(Settings(STORAGE_BACKEND="database"), database_url="sqlite://", clock=clock)


def use_cases_for(stores: RecordStores):
    users = UserUseCases(stores.users, stores.clock, stores.id_generator, stores.lock)
    tickets = TicketUseCases(
        stores.tickets, stores.comments, stores.users, stores.clock, stores.id_generator, stores.lock
    )
    assets = AssetUseCases(
        stores.assets, stores.maintenance_records, stores.users, stores.clock, stores.id_generator, stores.lock
    )
    return users, tickets, assets


@pytest.mark.asyncio
async def test_user_round_trip(db_stores: RecordStores):
    users, _, _ = use_cases_for(db_stores)
    created = await users.create_user(UserCreateDTO(username="alice", role=UserRole.ADMIN))

    fetched = await users.get_user(created.id)
    assert fetched.username == "alice"
    assert fetched.role == UserRole.ADMIN
    assert (await db_stores.users.get_by_username("alice")).id == created.id

    with pytest.raises(ConflictError):
        await users.create_user(UserCreateDTO(username="alice"))


@pytest.mark.asyncio
async def test_ticket_assignment_overwrites_row(db_stores: RecordStores):
    users, tickets, _ = use_cases_for(db_stores)
    support = await users.create_user(UserCreateDTO(username="bob", role=UserRole.IT_SUPPORT))
    ticket = await tickets.create_ticket(
        TicketCreateDTO(user_id=support.id, title="Printer broken", description="No toner")
    )

    await tickets.assign_ticket(ticket.id, TicketAssignDTO(user_id=support.id))

    stored = await tickets.get_ticket(ticket.id)
    assert stored.assigned_to == support.id
    assert stored.status == TicketStatus.OPEN
    assert stored.title == "Printer broken"
    assert len(await db_stores.tickets.values()) == 1


@pytest.mark.asyncio
async def test_comments_and_maintenance(db_stores: RecordStores):
    users, tickets, assets = use_cases_for(db_stores)
    support = await users.create_user(UserCreateDTO(username="bob", role=UserRole.IT_SUPPORT))
    ticket = await tickets.create_ticket(TicketCreateDTO(user_id=support.id, title="t", description="d"))

    comment = await tickets.add_comment(ticket.id, CommentCreateDTO(user_id="not-a-user", content="hi"))
    assert [c.id for c in await tickets.get_comments(ticket.id)] == [comment.id]

    asset = await assets.create_asset(
        ITAssetCreateDTO(
            asset_name="Laptop",
            asset_type="Hardware",
            purchase_date=1_700_000_000_000,
            assigned_to=support.id,
            approx_value=1000,
            depreciation_rate=20,
        )
    )
    record = await assets.add_maintenance_record(
        asset.id,
        MaintenanceRecordCreateDTO(maintenance_type="Repair", description="Fan", cost=80, date=1_710_000_000_000),
    )
    assert await assets.get_maintenance_history(asset.id) == [record]
    assert await assets.get_asset(asset.id) == asset


@pytest.mark.asyncio
async def test_empty_database(db_stores: RecordStores):
    users, tickets, assets = use_cases_for(db_stores)
    with pytest.raises(NotFoundError):
        await users.get_all_users()
    with pytest.raises(NotFoundError):
        await tickets.get_all_tickets()
    with pytest.raises(NotFoundError):
        await assets.get_all_assets()


@pytest.mark.asyncio
async def test_records_survive_restart(tmp_path, clock):
    url = f"sqlite:///{tmp_path / 'helpdesk.db'}"
    settings = Settings(STORAGE_BACKEND="database")

    first = build_database_stores(settings, database_url=url, clock=clock)
    users, _, _ = use_cases_for(first)
    created = await users.create_user(UserCreateDTO(username="alice", role=UserRole.ADMIN))

    second = build_database_stores(settings, database_url=url, clock=clock)
    users_after_restart, _, _ = use_cases_for(second)
    fetched = await users_after_restart.get_user(created.id)
    assert fetched.username == "alice"


@pytest.mark.asyncio
async def test_fetched_records_keep_utc_timestamps(tmp_path, clock):
    stores = build_database_stores(
        Settings(STORAGE_BACKEND="database"), database_url=f"sqlite:///{tmp_path / 'helpdesk.db'}", clock=clock
    )
    users, tickets, _ = use_cases_for(stores)
    support = await users.create_user(UserCreateDTO(username="bob", role=UserRole.IT_SUPPORT))
    ticket = await tickets.create_ticket(TicketCreateDTO(user_id=support.id, title="t", description="d"))
    comment = await tickets.add_comment(ticket.id, CommentCreateDTO(user_id=support.id, content="hi"))

    assert await users.get_user(support.id) == support
    assert await tickets.get_ticket(ticket.id) == ticket
    assert await tickets.get_comments(ticket.id) == [comment]
    assert (await tickets.get_ticket(ticket.id)).created_at.utcoffset() is not None


@pytest.mark.asyncio
async def test_ticket_report_from_database_keeps_offset(db_stores: RecordStores, clock):
    users, tickets, _ = use_cases_for(db_stores)
    support = await users.create_user(UserCreateDTO(username="bob", role=UserRole.IT_SUPPORT))
    await tickets.create_ticket(TicketCreateDTO(user_id=support.id, title="t", description="d"))

    reports = ReportUseCases(db_stores.tickets, db_stores.assets, db_stores.lock)
    [entry] = json.loads(await reports.generate_report(ReportType.OPEN_TICKETS))

    assert TicketResponseDTO.model_validate(entry).created_at == clock.now()
