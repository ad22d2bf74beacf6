from uuid import uuid4

import pytest

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.root_admin import RootAdminSettings
from access_sentinel.app.use_cases.auth.login_use_case import LoginUseCase
from access_sentinel.domain.entities import AccessRequestStatus, AuditAction, NotificationType
from tests.fixtures.factories import PASSWORD, make_account


@pytest.mark.asyncio
async def test_record_serializes_details(mock_uow, clock):
    account_id = uuid4()

    event = await AuditLog(mock_uow, clock).record(
        AuditAction.request_approved,
        actor_id=account_id,
        actor_label="ada@example.com",
        details={"request_id": account_id, "previous_status": AccessRequestStatus.pending, "at": clock.now()},
    )

    assert event.created_at == clock.now()
    assert event.details == {
        "request_id": str(account_id),
        "previous_status": "pending",
        "at": clock.now().isoformat(),
    }


@pytest.mark.asyncio
async def test_record_failure_is_swallowed(mock_uow, clock):
    mock_uow.audit_events.create.side_effect = RuntimeError("disk full")

    event = await AuditLog(mock_uow, clock).record(AuditAction.login_success_user)

    assert event is None


@pytest.mark.asyncio
async def test_notify_failure_is_swallowed(mock_uow, clock):
    mock_uow.notifications.create.side_effect = RuntimeError("disk full")

    notification = await AuditLog(mock_uow, clock).notify("hi", NotificationType.info)

    assert notification is None


@pytest.mark.asyncio
async def test_login_survives_audit_outage(mock_uow, clock, locks):
    account = make_account()
    mock_uow.accounts.get_by_email.return_value = account
    mock_uow.accounts.get_for_update.return_value = account
    mock_uow.audit_events.create.side_effect = RuntimeError("audit down")
    mock_uow.notifications.create.side_effect = RuntimeError("audit down")

    use_case = LoginUseCase(
        mock_uow, clock, locks, RootAdminSettings(email="root@example.com", password="x")
    )
    result = await use_case.execute("alice@example.com", PASSWORD, "Windows")

    assert result.is_ok()
    mock_uow.accounts.update.assert_called_with(account)
    mock_uow.commit.assert_called()
