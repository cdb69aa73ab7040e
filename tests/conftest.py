"""Shared fixtures: fresh in-memory stores and a controllable clock."""

from datetime import datetime, timedelta, timezone

import pytest

from app.application.use_cases.asset_use_cases import AssetUseCases
from app.application.use_cases.report_use_cases import ReportUseCases
from app.application.use_cases.ticket_use_cases import TicketUseCases
from app.application.use_cases.user_use_cases import UserUseCases
from app.domain.providers import Clock
from app.infrastructure.stores import RecordStores, build_memory_stores


class FixedClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, current: datetime):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def stores(clock: FixedClock) -> RecordStores:
    return build_memory_stores(clock=clock)


@pytest.fixture
def user_use_cases(stores: RecordStores) -> UserUseCases:
    return UserUseCases(stores.users, stores.clock, stores.id_generator, stores.lock)


@pytest.fixture
def ticket_use_cases(stores: RecordStores) -> TicketUseCases:
    return TicketUseCases(
        stores.tickets,
        stores.comments,
        stores.users,
        stores.clock,
        stores.id_generator,
        stores.lock,
    )


@pytest.fixture
def asset_use_cases(stores: RecordStores) -> AssetUseCases:
    return AssetUseCases(
        stores.assets,
        stores.maintenance_records,
        stores.users,
        stores.clock,
        stores.id_generator,
        stores.lock,
    )


@pytest.fixture
def report_use_cases(stores: RecordStores) -> ReportUseCases:
    return ReportUseCases(stores.tickets, stores.assets, stores.lock)
