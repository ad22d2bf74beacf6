from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AuditAction
from access_sentinel.domain.errors import ErrorCode, ProtectedAccountViolation
from access_sentinel.libs.result import Error, Result, Return

from .admin_guard import load_admin
from .dtos import DeleteAccountResponse


class DeleteAccountUseCase:
    """Admin-only removal of an account. The root admin is protected."""

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, actor_id: UUID, account_id: UUID) -> Result[DeleteAccountResponse]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            actor_result = await load_admin(self.uow, audit, actor_id, "delete_account")
            if actor_result.is_err():
                return actor_result
            actor = actor_result.value

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            if account.is_root_admin:
                raise ProtectedAccountViolation("The root admin cannot be deleted")

            await self.uow.accounts.delete(account)
            await audit.record(
                AuditAction.user_deleted,
                actor_id=actor.id,
                actor_label=actor.email,
                details={"account_id": account.id, "email": account.email},
            )
            await self.uow.commit()

            return Return.ok(DeleteAccountResponse(status="deleted"))
