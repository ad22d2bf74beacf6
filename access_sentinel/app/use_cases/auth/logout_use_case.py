"""
Logout Use Case

Records the end of a session. The session itself lives on the client.
"""

from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AuditAction, NotificationType
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import LogoutResponse


class LogoutUseCase:
    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, account_id: UUID) -> Result[LogoutResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            audit = AuditLog(self.uow, self.clock)
            await audit.record(
                AuditAction.logout_success, actor_id=account.id, actor_label=account.email
            )
            await audit.notify(
                f"User {account.email} logged out.",
                NotificationType.logout,
                {"user_email": account.email},
            )
            await self.uow.commit()

            return Return.ok(LogoutResponse(status="logged_out"))
