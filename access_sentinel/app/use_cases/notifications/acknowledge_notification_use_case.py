from uuid import UUID

from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import NotificationView


class AcknowledgeNotificationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, notification_id: UUID) -> Result[NotificationView]:
        async with self.uow:
            notification = await self.uow.notifications.get_by_id(notification_id)
            if notification is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Notification not found"))

            if not notification.is_read:
                notification.is_read = True
                await self.uow.notifications.update(notification)
                await self.uow.commit()

            return Return.ok(NotificationView.from_notification(notification))
