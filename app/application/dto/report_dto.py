"""Report DTOs"""
from enum import Enum
from pydantic import BaseModel


class ReportType(str, Enum):
    """Supported report categories"""
    OPEN_TICKETS = "OpenTickets"
    CLOSED_TICKETS = "ClosedTickets"
    IN_PROGRESS_TICKETS = "InProgressTickets"
    ASSET_UTILIZATION = "AssetUtilization"


class AssetUtilizationDTO(BaseModel):
    """One row of the asset utilization report"""
    id: str
    name: str
    assigned_to: str
