"""
Back-office dashboard metrics.
"""

from fastapi import APIRouter, Depends

from brokerage.schemas.dashboard import DashboardMetrics
from brokerage.schemas.error import get_error_responses
from brokerage.services.dashboard import DashboardService
from brokerage.utils.dependencies import get_current_admin, get_dashboard_service

router = APIRouter(
    prefix="/admin",
    tags=["Admin: Dashboard"],
    dependencies=[Depends(get_current_admin)],
)


@router.get(
    "/metrics",
    response_model=DashboardMetrics,
    summary="Dashboard metrics",
    description="Listing, inquiry and team counts with the five newest inquiries",
    responses=get_error_responses(401, 500)
)
async def get_metrics(
    dashboard_service: DashboardService = Depends(get_dashboard_service)
) -> DashboardMetrics:
    return await dashboard_service.get_metrics()
