"""Report use cases"""
import asyncio
import logging
from typing import List, Optional, Union
from pydantic import TypeAdapter
from app.domain.entities.ticket import TicketStatus
from app.domain.exceptions import ValidationError
from app.domain.repositories.asset_repository import AssetRepository
from app.domain.repositories.ticket_repository import TicketRepository
from app.application.dto.report_dto import AssetUtilizationDTO, ReportType
from app.application.dto.ticket_dto import TicketResponseDTO

logger = logging.getLogger(__name__)

_TICKET_REPORTS = {
    ReportType.OPEN_TICKETS: TicketStatus.OPEN,
    ReportType.CLOSED_TICKETS: TicketStatus.CLOSED,
    ReportType.IN_PROGRESS_TICKETS: TicketStatus.IN_PROGRESS,
}

_tickets_adapter = TypeAdapter(List[TicketResponseDTO])
_utilization_adapter = TypeAdapter(List[AssetUtilizationDTO])


class ReportUseCases:
    """Read-only reports over tickets and assets"""

    def __init__(
        self,
        ticket_repository: TicketRepository,
        asset_repository: AssetRepository,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.ticket_repository = ticket_repository
        self.asset_repository = asset_repository
        self._lock = lock or asyncio.Lock()

    async def generate_report(self, report_type: Union[ReportType, str]) -> str:
        """Serialize a report as a JSON array string.

        An empty result is a valid report and serializes to ``[]``.
        """
        try:
            report_type = ReportType(report_type)
        except ValueError:
            raise ValidationError(f"Unknown report type '{report_type}'") from None

        if report_type == ReportType.ASSET_UTILIZATION:
            async with self._lock:
                assets = await self.asset_repository.values()
            rows = [
                AssetUtilizationDTO(id=asset.id, name=asset.asset_name, assigned_to=asset.assigned_to)
                for asset in assets
            ]
            payload = _utilization_adapter.dump_json(rows)
        else:
            status = _TICKET_REPORTS[report_type]
            async with self._lock:
                tickets = await self.ticket_repository.values()
            matching = [
                TicketResponseDTO.model_validate(ticket)
                for ticket in tickets
                if ticket.status == status
            ]
            payload = _tickets_adapter.dump_json(matching)

        logger.debug("Generated %s report", report_type.value)
        return payload.decode("utf-8")
