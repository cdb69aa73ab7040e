"""Asset and maintenance record repository interfaces"""
from app.domain.entities.asset import AssetMaintenanceRecord, ITAsset
from app.domain.repositories.record_repository import RecordRepository


class AssetRepository(RecordRepository[ITAsset]):
    """Interface for IT asset repository"""


class MaintenanceRecordRepository(RecordRepository[AssetMaintenanceRecord]):
    """Interface for asset maintenance record repository"""
