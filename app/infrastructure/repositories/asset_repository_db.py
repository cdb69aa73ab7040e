"""Asset and maintenance record repository implementations with database"""
from app.domain.entities.asset import AssetMaintenanceRecord, ITAsset
from app.domain.repositories.asset_repository import AssetRepository, MaintenanceRecordRepository
from app.infrastructure.database.models import ITAssetModel, MaintenanceRecordModel
from app.infrastructure.repositories.record_repository_db import SQLRecordRepository


class AssetRepositoryDB(SQLRecordRepository[ITAsset, ITAssetModel], AssetRepository):
    """IT asset repository implementation with SQL database"""

    model = ITAssetModel

    def _model_to_entity(self, model: ITAssetModel) -> ITAsset:
        """Convert ITAssetModel to ITAsset entity"""
        return ITAsset(
            id=str(model.id),
            asset_name=model.asset_name,
            asset_type=model.asset_type,
            purchase_date=int(model.purchase_date),
            assigned_to=str(model.assigned_to),
            approx_value=int(model.approx_value),
            depreciation_rate=int(model.depreciation_rate),
        )

    def _entity_to_model(self, key: str, entity: ITAsset) -> ITAssetModel:
        """Convert ITAsset entity to ITAssetModel"""
        return ITAssetModel(
            id=key,
            asset_name=entity.asset_name,
            asset_type=entity.asset_type,
            purchase_date=entity.purchase_date,
            assigned_to=entity.assigned_to,
            approx_value=entity.approx_value,
            depreciation_rate=entity.depreciation_rate,
        )


class MaintenanceRecordRepositoryDB(
    SQLRecordRepository[AssetMaintenanceRecord, MaintenanceRecordModel],
    MaintenanceRecordRepository,
):
    """Maintenance record repository implementation with SQL database"""

    model = MaintenanceRecordModel

    def _model_to_entity(self, model: MaintenanceRecordModel) -> AssetMaintenanceRecord:
        """Convert MaintenanceRecordModel to AssetMaintenanceRecord entity"""
        return AssetMaintenanceRecord(
            id=str(model.id),
            asset_id=str(model.asset_id),
            maintenance_type=model.maintenance_type,
            description=model.description,
            cost=int(model.cost),
            date=int(model.date),
        )

    def _entity_to_model(self, key: str, entity: AssetMaintenanceRecord) -> MaintenanceRecordModel:
        """Convert AssetMaintenanceRecord entity to MaintenanceRecordModel"""
        return MaintenanceRecordModel(
            id=key,
            asset_id=entity.asset_id,
            maintenance_type=entity.maintenance_type,
            description=entity.description,
            cost=entity.cost,
            date=entity.date,
        )
