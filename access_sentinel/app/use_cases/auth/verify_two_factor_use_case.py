"""
Verify Two-Factor Use Case

Completes an admin login that returned outcome=two_factor_required.
"""

from uuid import UUID

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.totp_provider import ITotpProvider
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AccountRole, AuditAction
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .admission import AdmissionGate
from .dtos import AdmissionResponse


class VerifyTwoFactorUseCase:
    """
    Use case for TOTP verification after a password match.

    Business Rules:
    - Account must be an admin with two-factor enabled
    - Token checked against the active secret with +/- 1 step tolerance
    - A wrong token never blocks and never consumes the daily attempt quota
    - Success handling is identical to a password login success
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

    async def execute(
        self, account_id: UUID, token: str, client_os: str
    ) -> Result[AdmissionResponse]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            async with self.locks.hold(account_id):
                account = await self.uow.accounts.get_for_update(account_id)

                if account is None:
                    await audit.record(
                        AuditAction.login_fail_not_found,
                        actor_label=str(account_id),
                        details={"client_os": client_os, "reason": ErrorCode.NOT_FOUND.value},
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(ErrorCode.NOT_FOUND, "Account not found for 2FA verification")
                    )

                if (
                    account.role != AccountRole.admin
                    or not account.two_factor_enabled
                    or not account.two_factor_secret
                ):
                    await audit.record(
                        AuditAction.login_fail_2fa_not_enabled,
                        actor_id=account.id,
                        actor_label=account.email,
                        details={
                            "client_os": client_os,
                            "reason": ErrorCode.ENROLLMENT_MISSING.value,
                        },
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(
                            ErrorCode.ENROLLMENT_MISSING,
                            "2FA is not enabled or configured for this account",
                        )
                    )

                if not self.totp.verify(
                    account.two_factor_secret, token, self.clock.now(), valid_window=1
                ):
                    await audit.record(
                        AuditAction.login_fail_2fa_token,
                        actor_id=account.id,
                        actor_label=account.email,
                        details={
                            "client_os": client_os,
                            "reason": ErrorCode.TWO_FACTOR_INVALID.value,
                        },
                    )
                    await self.uow.commit()
                    return Return.err(Error(ErrorCode.TWO_FACTOR_INVALID, "Invalid 2FA code"))

                gate = AdmissionGate(self.uow, audit, self.clock)
                return await gate.admit(
                    account,
                    client_os,
                    AuditAction.login_success_admin_2fa,
                    method="two_factor",
                )
