"""
Daily Activity Counts Use Case

Number of audit events per local calendar day, for activity charts.
"""

from datetime import UTC, datetime, time, timedelta

from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.libs.result import Result, Return

from .dtos import DailyActivityCount, DailyActivityResponse


class DailyActivityCountsUseCase:
    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, days: int = 7) -> Result[DailyActivityResponse]:
        async with self.uow:
            today = self.clock.today()
            counts = []
            for offset in range(days - 1, -1, -1):
                day = today - timedelta(days=offset)
                start = datetime.combine(day, time.min, tzinfo=self.clock.timezone)
                end = datetime.combine(
                    day + timedelta(days=1), time.min, tzinfo=self.clock.timezone
                )
                activities = await self.uow.audit_events.count_between(
                    start.astimezone(UTC), end.astimezone(UTC)
                )
                counts.append(DailyActivityCount(date=day, activities=activities))

            return Return.ok(DailyActivityResponse(days=counts))
