"""
Acknowledge All Notifications Use Case
"""

from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AuditAction
from access_sentinel.libs.result import Result, Return

from .dtos import AcknowledgeAllResponse


class AcknowledgeAllNotificationsUseCase:
    """
    Marks every unread notification as read.

    Records a single admin_notifications_marked_read event carrying the count,
    even when nothing was unread.
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, actor_id: UUID) -> Result[AcknowledgeAllResponse]:
        async with self.uow:
            actor = await self.uow.accounts.get_by_id(actor_id)
            count = await self.uow.notifications.mark_all_read()

            await AuditLog(self.uow, self.clock).record(
                AuditAction.admin_notifications_marked_read,
                actor_id=actor_id,
                actor_label=actor.email if actor else "unknown",
                details={"count": count},
            )
            await self.uow.commit()

            return Return.ok(AcknowledgeAllResponse(marked_read=count))
