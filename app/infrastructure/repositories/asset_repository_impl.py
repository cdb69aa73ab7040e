"""Asset and maintenance record repository implementations"""
from app.domain.entities.asset import AssetMaintenanceRecord, ITAsset
from app.domain.repositories.asset_repository import AssetRepository, MaintenanceRecordRepository
from app.infrastructure.repositories.record_repository_impl import InMemoryRecordRepository


class AssetRepositoryImpl(InMemoryRecordRepository[ITAsset], AssetRepository):
    """IT asset repository implementation with in-memory storage"""


class MaintenanceRecordRepositoryImpl(
    InMemoryRecordRepository[AssetMaintenanceRecord], MaintenanceRecordRepository
):
    """Maintenance record repository implementation with in-memory storage"""
