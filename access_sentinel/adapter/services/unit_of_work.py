from sqlmodel.ext.asyncio.session import AsyncSession

from access_sentinel.adapter.repositories.access_request_repository import AccessRequestRepository
from access_sentinel.adapter.repositories.account_repository import AccountRepository
from access_sentinel.adapter.repositories.audit_event_repository import AuditEventRepository
from access_sentinel.adapter.repositories.notification_repository import NotificationRepository
from access_sentinel.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.access_requests = AccessRequestRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
