"""IT asset DTOs"""
from pydantic import BaseModel, Field


class ITAssetCreateDTO(BaseModel):
    """DTO for creating an IT asset"""
    asset_name: str
    asset_type: str
    purchase_date: int = Field(ge=0, description="Epoch milliseconds")
    assigned_to: str
    approx_value: int = Field(ge=0)
    depreciation_rate: int = Field(ge=0, description="Percent per year")


class ITAssetResponseDTO(BaseModel):
    """DTO for IT asset response"""
    id: str
    asset_name: str
    asset_type: str
    purchase_date: int
    assigned_to: str
    approx_value: int
    depreciation_rate: int

    model_config = {"from_attributes": True}


class MaintenanceRecordCreateDTO(BaseModel):
    """DTO for recording maintenance on an asset"""
    maintenance_type: str
    description: str
    cost: int = Field(ge=0)
    date: int = Field(ge=0, description="Epoch milliseconds")


class MaintenanceRecordResponseDTO(BaseModel):
    """DTO for maintenance record response"""
    id: str
    asset_id: str
    maintenance_type: str
    description: str
    cost: int
    date: int

    model_config = {"from_attributes": True}


class AssetValueResponseDTO(BaseModel):
    """Current depreciated value of an asset"""
    asset_id: str
    value: int
