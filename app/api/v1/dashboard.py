from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_session
from app.services import budget_service, guest_service, task_service, vendor_service
from app.services.planning_stats import compute_dashboard
from app.schemas.dashboard import DashboardStatsRead

router = APIRouter()


@router.get("/getDashboard", response_model=DashboardStatsRead)
async def get_dashboard(session: AsyncSession = Depends(get_session)):
    """Guest, budget, task and vendor aggregates over the full collections."""
    stats = compute_dashboard(
        guests=await guest_service.list_guests(session),
        vendors=await vendor_service.list_vendors(session),
        budget_items=await budget_service.list_budget_items(session),
        tasks=await task_service.list_tasks(session),
        upcoming_limit=settings.UPCOMING_TASKS_LIMIT,
    )
    return DashboardStatsRead.model_validate(stats, from_attributes=True)
