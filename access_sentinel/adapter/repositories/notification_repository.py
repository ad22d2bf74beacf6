from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_sentinel.app.repositories.notification_repository import INotificationRepository
from access_sentinel.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification inside a savepoint"""
        async with self.session.begin_nested():
            self.session.add(notification)
        await self.session.refresh(notification)
        return notification

    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, notification: Notification) -> Notification:
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def list_recent(self, limit: int = 50) -> List[Notification]:
        stmt = select(Notification).order_by(Notification.created_at.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def mark_all_read(self) -> int:
        stmt = (
            update(Notification)
            .where(Notification.is_read == False)  # noqa: E712
            .values(is_read=True)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
