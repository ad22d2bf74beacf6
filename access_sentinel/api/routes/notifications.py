from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from access_sentinel.api.error import raise_for_error
from access_sentinel.api.utils.admin_auth import require_admin
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.notifications import (
    AcknowledgeAllNotificationsUseCase,
    AcknowledgeAllResponse,
    AcknowledgeNotificationUseCase,
    ListNotificationsUseCase,
    NotificationListResponse,
    NotificationView,
)
from access_sentinel.depends import get_clock, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=NotificationListResponse,
    dependencies=[Depends(require_admin)],
)
async def list_notifications(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100),
):
    use_case = ListNotificationsUseCase(uow)
    result = await use_case.execute(limit=limit)
    return result.value


@router.post(
    "/read-all",
    status_code=status.HTTP_200_OK,
    response_model=AcknowledgeAllResponse,
)
async def acknowledge_all(
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    use_case = AcknowledgeAllNotificationsUseCase(uow, clock)
    result = await use_case.execute(UUID(current_account["account_id"]))
    return result.value


@router.post(
    "/{notification_id}/read",
    status_code=status.HTTP_200_OK,
    response_model=NotificationView,
    dependencies=[Depends(require_admin)],
)
async def acknowledge(
    notification_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AcknowledgeNotificationUseCase(uow)
    result = await use_case.execute(notification_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
