from datetime import UTC, datetime

import pytest
from unittest.mock import AsyncMock, MagicMock

from access_sentinel.app.services.account_locks import AccountLocks
from tests.fixtures.factories import FixedClock


def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_for_update = AsyncMock(return_value=None)
    uow.accounts.list_all = AsyncMock(return_value=[])
    uow.accounts.list_face_candidates = AsyncMock(return_value=[])
    uow.accounts.count = AsyncMock(return_value=0)
    uow.accounts.create = AsyncMock(side_effect=_echo)
    uow.accounts.update = AsyncMock(side_effect=_echo)
    uow.accounts.delete = AsyncMock()

    uow.access_requests = MagicMock()
    uow.access_requests.get_by_id = AsyncMock(return_value=None)
    uow.access_requests.get_active = AsyncMock(return_value=None)
    uow.access_requests.list_all = AsyncMock(return_value=[])
    uow.access_requests.list_by_requester = AsyncMock(return_value=[])
    uow.access_requests.count_by_status = AsyncMock(return_value=0)
    uow.access_requests.create = AsyncMock(side_effect=_echo)
    uow.access_requests.update = AsyncMock(side_effect=_echo)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=_echo)
    uow.audit_events.list_recent = AsyncMock(return_value=([], None))
    uow.audit_events.count_between = AsyncMock(return_value=0)

    uow.notifications = MagicMock()
    uow.notifications.create = AsyncMock(side_effect=_echo)
    uow.notifications.get_by_id = AsyncMock(return_value=None)
    uow.notifications.update = AsyncMock(side_effect=_echo)
    uow.notifications.list_recent = AsyncMock(return_value=[])
    uow.notifications.mark_all_read = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def clock():
    # Monday 2025-03-10 12:00 UTC
    return FixedClock(datetime(2025, 3, 10, 12, 0, tzinfo=UTC))


@pytest.fixture
def locks():
    return AccountLocks()
