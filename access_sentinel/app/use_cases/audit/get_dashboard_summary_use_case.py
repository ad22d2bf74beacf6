from datetime import timedelta

from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AccessRequestStatus
from access_sentinel.libs.result import Result, Return

from .dtos import DashboardSummaryResponse

RECENT_ACTIVITY_WINDOW = timedelta(hours=24)


class GetDashboardSummaryUseCase:
    """Headline counts for the admin dashboard."""

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[DashboardSummaryResponse]:
        async with self.uow:
            now = self.clock.now()
            return Return.ok(
                DashboardSummaryResponse(
                    accounts=await self.uow.accounts.count(),
                    pending_requests=await self.uow.access_requests.count_by_status(
                        AccessRequestStatus.pending
                    ),
                    recent_activity=await self.uow.audit_events.count_between(
                        now - RECENT_ACTIVITY_WINDOW, now
                    ),
                )
            )
