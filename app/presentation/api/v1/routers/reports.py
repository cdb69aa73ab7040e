"""Reports API router"""
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from app.presentation.api.v1.dependencies import get_report_use_cases
from app.application.use_cases.report_use_cases import ReportUseCases

router = APIRouter(prefix="/reports", tags=["reports"], redirect_slashes=False)


@router.get("/{report_type}")
async def generate_report(
    report_type: str,
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    """Generate a report

    report_type is one of OpenTickets, ClosedTickets, InProgressTickets or
    AssetUtilization. The body is a JSON array, empty when nothing matches.
    """
    report = await use_cases.generate_report(report_type)
    return Response(content=report, media_type="application/json")
