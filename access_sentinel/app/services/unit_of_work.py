from abc import ABC, abstractmethod

from access_sentinel.app.repositories.access_request_repository import IAccessRequestRepository
from access_sentinel.app.repositories.account_repository import IAccountRepository
from access_sentinel.app.repositories.audit_event_repository import IAuditEventRepository
from access_sentinel.app.repositories.notification_repository import INotificationRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    access_requests: IAccessRequestRepository
    audit_events: IAuditEventRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
