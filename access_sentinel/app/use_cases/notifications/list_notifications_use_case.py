from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.libs.result import Result, Return

from .dtos import NotificationListResponse, NotificationView


class ListNotificationsUseCase:
    """Newest notifications first, with the unread count of the returned page."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = 50) -> Result[NotificationListResponse]:
        async with self.uow:
            notifications = await self.uow.notifications.list_recent(limit=limit)
            return Return.ok(
                NotificationListResponse(
                    notifications=[NotificationView.from_notification(n) for n in notifications],
                    unread=sum(1 for n in notifications if not n.is_read),
                )
            )
