"""IT asset domain entities"""
from dataclasses import dataclass


@dataclass
class ITAsset:
    """IT asset domain entity

    ``purchase_date`` is epoch milliseconds, ``depreciation_rate`` is a
    percentage of the original value lost per full year.
    """
    id: str
    asset_name: str
    asset_type: str
    purchase_date: int
    assigned_to: str
    approx_value: int
    depreciation_rate: int


@dataclass
class AssetMaintenanceRecord:
    """Maintenance performed on an asset"""
    id: str
    asset_id: str
    maintenance_type: str
    description: str
    cost: int
    date: int
