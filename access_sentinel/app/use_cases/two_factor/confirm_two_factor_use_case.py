"""
Confirm Two-Factor Use Case

Promotes a pending TOTP secret once the admin proves possession of it.
"""

from uuid import UUID

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.totp_provider import ITotpProvider
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.base import ensure_utc
from access_sentinel.domain.entities import AccountRole, AuditAction, NotificationType
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import TwoFactorStatusResponse


class ConfirmTwoFactorUseCase:
    """
    Use case for confirming a pending TOTP enrollment.

    Business Rules:
    - Refusals are audited as admin_2fa_confirm_failed, expiry as admin_2fa_setup_expired
    - No pending enrollment: ENROLLMENT_MISSING
    - now >= expires_at: ENROLLMENT_EXPIRED, pending state cleared
    - Wrong token: INVALID_TOKEN, pending state kept for a retry
    - Correct token (+/- 1 step): secret promoted, 2FA enabled
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock,
        locks: AccountLocks,
        totp: ITotpProvider,
    ):
        self.uow = uow
        self.clock = clock
        self.locks = locks
        self.totp = totp

    async def execute(self, account_id: UUID, token: str) -> Result[TwoFactorStatusResponse]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            async with self.locks.hold(account_id):
                account = await self.uow.accounts.get_for_update(account_id)
                if account is None:
                    await audit.record(
                        AuditAction.admin_2fa_confirm_failed,
                        actor_id=account_id,
                        actor_label="unknown",
                        details={"reason": ErrorCode.NOT_FOUND.value},
                    )
                    await self.uow.commit()
                    return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

                if account.role != AccountRole.admin:
                    await audit.record(
                        AuditAction.admin_2fa_confirm_failed,
                        actor_id=account.id,
                        actor_label=account.email,
                        details={"reason": ErrorCode.UNAUTHORIZED.value},
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(ErrorCode.UNAUTHORIZED, "Only admins can enable 2FA")
                    )

                if not account.pending_two_factor_secret:
                    await audit.record(
                        AuditAction.admin_2fa_confirm_failed,
                        actor_id=account.id,
                        actor_label=account.email,
                        details={"reason": ErrorCode.ENROLLMENT_MISSING.value},
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(
                            ErrorCode.ENROLLMENT_MISSING,
                            "No pending 2FA enrollment. Please restart setup.",
                        )
                    )

                now = self.clock.now()
                expires_at = ensure_utc(account.pending_two_factor_expires_at)
                if expires_at is None or now >= expires_at:
                    account.pending_two_factor_secret = None
                    account.pending_two_factor_expires_at = None
                    await self.uow.accounts.update(account)
                    await audit.record(
                        AuditAction.admin_2fa_setup_expired,
                        actor_id=account.id,
                        actor_label=account.email,
                        details={"reason": ErrorCode.ENROLLMENT_EXPIRED.value},
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(
                            ErrorCode.ENROLLMENT_EXPIRED,
                            "2FA setup timed out. Please restart.",
                        )
                    )

                if not self.totp.verify(
                    account.pending_two_factor_secret, token, now, valid_window=1
                ):
                    await audit.record(
                        AuditAction.admin_2fa_confirm_failed,
                        actor_id=account.id,
                        actor_label=account.email,
                        details={"reason": ErrorCode.INVALID_TOKEN.value},
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(ErrorCode.INVALID_TOKEN, "Invalid token. Please try again.")
                    )

                account.two_factor_enabled = True
                account.two_factor_secret = account.pending_two_factor_secret
                account.pending_two_factor_secret = None
                account.pending_two_factor_expires_at = None
                await self.uow.accounts.update(account)

                await audit.record(
                    AuditAction.admin_2fa_enabled,
                    actor_id=account.id,
                    actor_label=account.email,
                )
                await audit.notify(
                    f"Admin {account.email} enabled 2FA.",
                    NotificationType.info,
                    {"user_email": account.email, "security_action": "2FA_enabled"},
                )
                await self.uow.commit()

                return Return.ok(TwoFactorStatusResponse(enabled=True))
