"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from access_sentinel.api.utils.admin_auth import require_admin
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.audit import (
    AuditEventListResponse,
    DailyActivityCountsUseCase,
    DailyActivityResponse,
    DashboardSummaryResponse,
    GetDashboardSummaryUseCase,
    ListAuditEventsUseCase,
)
from access_sentinel.depends import get_clock, get_unit_of_work

router = APIRouter(prefix="/audit", tags=["Audit"])


@router.get(
    "/events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventListResponse,
    dependencies=[Depends(require_admin)],
)
async def list_audit_events(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Audit Events

    Query Parameters:
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Returns:
        - events: List of audit events ordered by newest first
        - next_cursor: Cursor for next page (null if no more events)
    """
    use_case = ListAuditEventsUseCase(uow)
    result = await use_case.execute(limit=limit, cursor=cursor)
    return result.value


@router.get(
    "/daily-activity",
    status_code=status.HTTP_200_OK,
    response_model=DailyActivityResponse,
    dependencies=[Depends(require_admin)],
)
async def daily_activity(
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    days: int = Query(7, ge=1, le=90, description="Number of days, today included"),
):
    use_case = DailyActivityCountsUseCase(uow, clock)
    result = await use_case.execute(days=days)
    return result.value


@router.get(
    "/summary",
    status_code=status.HTTP_200_OK,
    response_model=DashboardSummaryResponse,
    dependencies=[Depends(require_admin)],
)
async def summary(
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    use_case = GetDashboardSummaryUseCase(uow, clock)
    result = await use_case.execute()
    return result.value
