"""IT asset use cases"""
import asyncio
import logging
from typing import List, Optional
from app.domain.depreciation import depreciated_value
from app.domain.entities.asset import AssetMaintenanceRecord, ITAsset
from app.domain.exceptions import NotFoundError, ValidationError
from app.domain.providers import Clock, IdGenerator
from app.domain.repositories.asset_repository import AssetRepository, MaintenanceRecordRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.dto.asset_dto import (
    AssetValueResponseDTO,
    ITAssetCreateDTO,
    ITAssetResponseDTO,
    MaintenanceRecordCreateDTO,
    MaintenanceRecordResponseDTO,
)

logger = logging.getLogger(__name__)


class AssetUseCases:
    """Use cases for IT asset and maintenance operations"""

    def __init__(
        self,
        asset_repository: AssetRepository,
        maintenance_repository: MaintenanceRecordRepository,
        user_repository: UserRepository,
        clock: Clock,
        id_generator: IdGenerator,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.asset_repository = asset_repository
        self.maintenance_repository = maintenance_repository
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator
        self._lock = lock or asyncio.Lock()

    async def create_asset(self, asset_data: ITAssetCreateDTO) -> ITAssetResponseDTO:
        """Create a new IT asset assigned to an existing user"""
        if not asset_data.asset_name or not asset_data.asset_type:
            raise ValidationError("Asset name and type are required")

        async with self._lock:
            user = await self.user_repository.get(asset_data.assigned_to)
            if not user:
                raise NotFoundError.for_entity("User", asset_data.assigned_to)

            asset = ITAsset(
                id=self.id_generator.new_id(),
                asset_name=asset_data.asset_name,
                asset_type=asset_data.asset_type,
                purchase_date=asset_data.purchase_date,
                assigned_to=asset_data.assigned_to,
                approx_value=asset_data.approx_value,
                depreciation_rate=asset_data.depreciation_rate,
            )
            await self.asset_repository.insert(asset.id, asset)

        logger.info("Created asset %s (%s)", asset.id, asset.asset_name)
        return self._asset_to_dto(asset)

    async def get_asset(self, asset_id: str) -> ITAssetResponseDTO:
        """Get IT asset by ID"""
        async with self._lock:
            asset = await self.asset_repository.get(asset_id)
        if not asset:
            raise NotFoundError.for_entity("IT asset", asset_id)
        return self._asset_to_dto(asset)

    async def get_all_assets(self) -> List[ITAssetResponseDTO]:
        """Get all IT assets. An empty store is reported as NotFoundError."""
        async with self._lock:
            assets = await self.asset_repository.values()
        if not assets:
            raise NotFoundError("No IT assets found")
        return [self._asset_to_dto(asset) for asset in assets]

    async def add_maintenance_record(
        self, asset_id: str, record_data: MaintenanceRecordCreateDTO
    ) -> MaintenanceRecordResponseDTO:
        """Record maintenance performed on an asset"""
        async with self._lock:
            asset = await self.asset_repository.get(asset_id)
            if not asset:
                raise NotFoundError.for_entity("IT asset", asset_id)

            record = AssetMaintenanceRecord(
                id=self.id_generator.new_id(),
                asset_id=asset_id,
                maintenance_type=record_data.maintenance_type,
                description=record_data.description,
                cost=record_data.cost,
                date=record_data.date,
            )
            await self.maintenance_repository.insert(record.id, record)

        logger.info("Maintenance record %s added to asset %s", record.id, asset_id)
        return self._record_to_dto(record)

    async def get_maintenance_history(self, asset_id: str) -> List[MaintenanceRecordResponseDTO]:
        """Get maintenance history of an asset

        Raises NotFoundError only when the asset itself does not exist; an
        asset that was never serviced yields an empty list.
        """
        async with self._lock:
            asset = await self.asset_repository.get(asset_id)
            if not asset:
                raise NotFoundError.for_entity("IT asset", asset_id)
            records = await self.maintenance_repository.values()

        return [
            self._record_to_dto(record)
            for record in records
            if record.asset_id == asset_id
        ]

    async def calculate_asset_value(self, asset_id: str) -> AssetValueResponseDTO:
        """Current depreciated value of an asset, floored at zero"""
        async with self._lock:
            asset = await self.asset_repository.get(asset_id)
        if not asset:
            raise NotFoundError.for_entity("IT asset", asset_id)

        value = depreciated_value(
            approx_value=asset.approx_value,
            depreciation_rate=asset.depreciation_rate,
            purchase_date=asset.purchase_date,
            now=self.clock.now_millis(),
        )
        return AssetValueResponseDTO(asset_id=asset_id, value=value)

    def _asset_to_dto(self, asset: ITAsset) -> ITAssetResponseDTO:
        """Convert ITAsset entity to ITAssetResponseDTO"""
        return ITAssetResponseDTO(
            id=asset.id,
            asset_name=asset.asset_name,
            asset_type=asset.asset_type,
            purchase_date=asset.purchase_date,
            assigned_to=asset.assigned_to,
            approx_value=asset.approx_value,
            depreciation_rate=asset.depreciation_rate,
        )

    def _record_to_dto(self, record: AssetMaintenanceRecord) -> MaintenanceRecordResponseDTO:
        """Convert AssetMaintenanceRecord entity to MaintenanceRecordResponseDTO"""
        return MaintenanceRecordResponseDTO(
            id=record.id,
            asset_id=record.asset_id,
            maintenance_type=record.maintenance_type,
            description=record.description,
            cost=record.cost,
            date=record.date,
        )
