"""
Enroll Two-Factor Use Case

Starts TOTP enrollment for an administrator.
"""

from datetime import timedelta
from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.totp_provider import ITotpProvider
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AccountRole, AuditAction
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import TwoFactorSetupResponse

ENROLLMENT_WINDOW = timedelta(minutes=10)


class EnrollTwoFactorUseCase:
    """
    Use case for generating a pending TOTP secret.

    Business Rules:
    - Only admin accounts can enroll
    - A fresh secret replaces any previous pending enrollment
    - The pending secret is valid for 10 minutes
    - The active secret (if any) is untouched until confirmation
    """

    def __init__(self, uow: UnitOfWork, clock: Clock, totp: ITotpProvider, issuer: str):
        self.uow = uow
        self.clock = clock
        self.totp = totp
        self.issuer = issuer

    async def execute(self, account_id: UUID) -> Result[TwoFactorSetupResponse]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                await audit.record(
                    AuditAction.admin_2fa_setup_denied,
                    actor_id=account_id,
                    actor_label="unknown",
                    details={"reason": ErrorCode.NOT_FOUND.value},
                )
                await self.uow.commit()
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            if account.role != AccountRole.admin:
                await audit.record(
                    AuditAction.admin_2fa_setup_denied,
                    actor_id=account.id,
                    actor_label=account.email,
                    details={"reason": ErrorCode.UNAUTHORIZED.value},
                )
                await self.uow.commit()
                return Return.err(
                    Error(ErrorCode.UNAUTHORIZED, "Only admins can enable 2FA")
                )

            secret = self.totp.generate_secret()
            expires_at = self.clock.now() + ENROLLMENT_WINDOW
            account.pending_two_factor_secret = secret
            account.pending_two_factor_expires_at = expires_at
            await self.uow.accounts.update(account)

            await audit.record(
                AuditAction.admin_2fa_setup_started,
                actor_id=account.id,
                actor_label=account.email,
                details={"expires_at": expires_at},
            )
            await self.uow.commit()

            return Return.ok(
                TwoFactorSetupResponse(
                    secret=secret,
                    provisioning_uri=self.totp.provisioning_uri(
                        secret, account.email, self.issuer
                    ),
                    expires_at=expires_at,
                )
            )
