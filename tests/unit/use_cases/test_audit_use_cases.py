from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from access_sentinel.app.use_cases.audit import (
    DailyActivityCountsUseCase,
    GetDashboardSummaryUseCase,
    ListAuditEventsUseCase,
)
from access_sentinel.domain.entities import AccessRequestStatus, AuditAction, AuditEvent
from tests.fixtures.factories import FixedClock


@pytest.mark.asyncio
async def test_list_audit_events_passes_cursor(mock_uow, clock):
    event = AuditEvent(
        action=AuditAction.login_success_user,
        actor_label="alice@example.com",
        details={"client_os": "Windows"},
        created_at=clock.now(),
    )
    mock_uow.audit_events.list_recent.return_value = ([event], "next-page")

    result = await ListAuditEventsUseCase(mock_uow).execute(limit=1, cursor="abc")

    assert result.value.next_cursor == "next-page"
    assert result.value.events[0].action == "login_success_user"
    assert result.value.events[0].details == {"client_os": "Windows"}
    mock_uow.audit_events.list_recent.assert_called_once_with(limit=1, cursor="abc")


@pytest.mark.asyncio
async def test_daily_activity_counts_oldest_first(mock_uow, clock):
    mock_uow.audit_events.count_between.side_effect = [1, 2, 3]

    result = await DailyActivityCountsUseCase(mock_uow, clock).execute(days=3)

    days = result.value.days
    assert [d.date for d in days] == [date(2025, 3, 8), date(2025, 3, 9), date(2025, 3, 10)]
    assert [d.activities for d in days] == [1, 2, 3]
    first_start, first_end = mock_uow.audit_events.count_between.call_args_list[0].args
    assert first_start == datetime(2025, 3, 8, tzinfo=UTC)
    assert first_end == datetime(2025, 3, 9, tzinfo=UTC)


@pytest.mark.asyncio
async def test_daily_activity_uses_local_midnight(mock_uow):
    # 2025-03-10 02:00 UTC is still 2025-03-09 in New York
    clock = FixedClock(datetime(2025, 3, 10, 2, 0, tzinfo=UTC), ZoneInfo("America/New_York"))

    result = await DailyActivityCountsUseCase(mock_uow, clock).execute(days=1)

    assert result.value.days[0].date == date(2025, 3, 9)
    start, end = mock_uow.audit_events.count_between.call_args.args
    assert start == datetime(2025, 3, 9, 5, 0, tzinfo=UTC)
    assert end - start == timedelta(hours=23)  # DST starts on 2025-03-09


@pytest.mark.asyncio
async def test_dashboard_summary(mock_uow, clock):
    mock_uow.accounts.count.return_value = 4
    mock_uow.access_requests.count_by_status.return_value = 2
    mock_uow.audit_events.count_between.return_value = 17

    result = await GetDashboardSummaryUseCase(mock_uow, clock).execute()

    assert result.value.model_dump() == {
        "accounts": 4,
        "pending_requests": 2,
        "recent_activity": 17,
    }
    mock_uow.access_requests.count_by_status.assert_called_once_with(AccessRequestStatus.pending)
    mock_uow.audit_events.count_between.assert_called_once_with(
        clock.now() - timedelta(hours=24), clock.now()
    )
