"""
Disable Two-Factor Use Case
"""

from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AccountRole, AuditAction, NotificationType
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import TwoFactorStatusResponse


class DisableTwoFactorUseCase:
    """
    Use case for turning two-factor off for an administrator.

    Clears both the active secret and any pending enrollment.
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, account_id: UUID) -> Result[TwoFactorStatusResponse]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                await audit.record(
                    AuditAction.admin_2fa_disable_failed,
                    actor_id=account_id,
                    actor_label="unknown",
                    details={"reason": ErrorCode.NOT_FOUND.value},
                )
                await self.uow.commit()
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            if account.role != AccountRole.admin:
                await audit.record(
                    AuditAction.admin_2fa_disable_failed,
                    actor_id=account.id,
                    actor_label=account.email,
                    details={"reason": ErrorCode.UNAUTHORIZED.value},
                )
                await self.uow.commit()
                return Return.err(Error(ErrorCode.UNAUTHORIZED, "Account is not an admin"))

            account.two_factor_enabled = False
            account.two_factor_secret = None
            account.pending_two_factor_secret = None
            account.pending_two_factor_expires_at = None
            await self.uow.accounts.update(account)

            await audit.record(
                AuditAction.admin_2fa_disabled,
                actor_id=account.id,
                actor_label=account.email,
            )
            await audit.notify(
                f"Admin {account.email} disabled 2FA.",
                NotificationType.info,
                {"user_email": account.email, "security_action": "2FA_disabled"},
            )
            await self.uow.commit()

            return Return.ok(TwoFactorStatusResponse(enabled=False))
