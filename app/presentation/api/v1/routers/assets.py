"""IT assets API router"""
from fastapi import APIRouter, Depends, status
from typing import List
from app.application.dto.asset_dto import (
    AssetValueResponseDTO,
    ITAssetCreateDTO,
    ITAssetResponseDTO,
    MaintenanceRecordCreateDTO,
    MaintenanceRecordResponseDTO,
)
from app.presentation.api.v1.dependencies import get_asset_use_cases
from app.application.use_cases.asset_use_cases import AssetUseCases

router = APIRouter(prefix="/assets", tags=["assets"], redirect_slashes=False)


@router.post("/", response_model=ITAssetResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_asset(
    asset_data: ITAssetCreateDTO,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
):
    """Create a new IT asset"""
    return await use_cases.create_asset(asset_data)


@router.get("/", response_model=List[ITAssetResponseDTO])
async def get_all_assets(
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
):
    """Get all IT assets"""
    return await use_cases.get_all_assets()


@router.get("/{asset_id}", response_model=ITAssetResponseDTO)
async def get_asset(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
):
    """Get IT asset by ID"""
    return await use_cases.get_asset(asset_id)


@router.post(
    "/{asset_id}/maintenance",
    response_model=MaintenanceRecordResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def add_maintenance_record(
    asset_id: str,
    record_data: MaintenanceRecordCreateDTO,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
):
    """Record maintenance performed on an asset"""
    return await use_cases.add_maintenance_record(asset_id, record_data)


@router.get("/{asset_id}/maintenance", response_model=List[MaintenanceRecordResponseDTO])
async def get_maintenance_history(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
):
    """Get maintenance history of an asset"""
    return await use_cases.get_maintenance_history(asset_id)


@router.get("/{asset_id}/value", response_model=AssetValueResponseDTO)
async def get_asset_value(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
):
    """Current depreciated value of an asset"""
    return await use_cases.calculate_asset_value(asset_id)
