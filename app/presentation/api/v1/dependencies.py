"""API dependencies"""
from fastapi import Depends, Request
from app.application.use_cases.asset_use_cases import AssetUseCases
from app.application.use_cases.report_use_cases import ReportUseCases
from app.application.use_cases.ticket_use_cases import TicketUseCases
from app.application.use_cases.user_use_cases import UserUseCases
from app.infrastructure.stores import RecordStores


def get_stores(request: Request) -> RecordStores:
    """Get the record stores built at startup"""
    return request.app.state.stores


def get_user_use_cases(stores: RecordStores = Depends(get_stores)) -> UserUseCases:
    """Get user use cases instance"""
    return UserUseCases(stores.users, stores.clock, stores.id_generator, stores.lock)


def get_ticket_use_cases(stores: RecordStores = Depends(get_stores)) -> TicketUseCases:
    """Get ticket use cases instance"""
    return TicketUseCases(
        stores.tickets,
        stores.comments,
        stores.users,
        stores.clock,
        stores.id_generator,
        stores.lock,
    )


def get_asset_use_cases(stores: RecordStores = Depends(get_stores)) -> AssetUseCases:
    """Get asset use cases instance"""
    return AssetUseCases(
        stores.assets,
        stores.maintenance_records,
        stores.users,
        stores.clock,
        stores.id_generator,
        stores.lock,
    )


def get_report_use_cases(stores: RecordStores = Depends(get_stores)) -> ReportUseCases:
    """Get report use cases instance"""
    return ReportUseCases(stores.tickets, stores.assets, stores.lock)
