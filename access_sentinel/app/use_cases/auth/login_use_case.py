"""
Login Use Case

Password admission for user and admin accounts.
"""

import logging

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.credentials import burn_credential_check, verify_credential
from access_sentinel.app.services.root_admin import RootAdminBootstrap, RootAdminSettings
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import (
    Account,
    AccountRole,
    AdmissionOutcome,
    AuditAction,
)
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .admission import FAILED_ATTEMPTS_BEFORE_BLOCK, PASSWORD_LOGIN, AdmissionGate
from .dtos import AdmissionResponse

logger = logging.getLogger(__name__)

ROOT_BOOTSTRAP_LOCK = "root-admin-bootstrap"


class LoginUseCase:
    """
    Use case for password login.

    Business Rules (evaluated in order, one transaction per attempt):
    1. Unknown email is denied (root admin is bootstrapped on first lookup)
    2. Daily counter resets on the first attempt of a new local day
    3. Expired blocks are lifted
    4. Blocked accounts are denied with the remaining minutes
    5. Users at their daily quota are blocked for 2 minutes
    6. Wrong credential increments the counter; a user's 2nd failure blocks
    7. Admins with 2FA enabled must complete the second factor
    8. Users must connect from Windows or Android
    9. Users with a login window must be inside it
    10. Success resets the counter and issues a session
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock,
        locks: AccountLocks,
        root_admin: RootAdminSettings,
    ):
        self.uow = uow
        self.clock = clock
        self.locks = locks
        self.root_admin = root_admin

    async def execute(
        self, email: str, credential: str, client_os: str
    ) -> Result[AdmissionResponse]:
        """
        Execute login use case.

        Args:
            email: Account email
            credential: Plain text password
            client_os: Operating system reported by the client

        Returns:
            Result with AdmissionResponse, or Error with an ErrorCode
        """
        email = email.strip().lower()

        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            bootstrap = RootAdminBootstrap(self.uow, audit, self.root_admin)
            if bootstrap.is_root_email(email):
                async with self.locks.hold(ROOT_BOOTSTRAP_LOCK):
                    if await bootstrap.ensure(email) is not None:
                        await self.uow.commit()

            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                # Keep timing uniform with a real credential check
                burn_credential_check(credential)
                await audit.record(
                    AuditAction.login_fail_not_found,
                    actor_label=email,
                    details={"client_os": client_os, "reason": ErrorCode.NOT_FOUND.value},
                )
                await self.uow.commit()
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            # No transaction may stay open while waiting on an account lock
            account_id = account.id
            await self.uow.rollback()

            async with self.locks.hold(account_id):
                account = await self.uow.accounts.get_for_update(account_id)
                if account is None:
                    return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))
                return await self._admit(account, credential, client_os, audit)

    async def _admit(
        self, account: Account, credential: str, client_os: str, audit: AuditLog
    ) -> Result[AdmissionResponse]:
        gate = AdmissionGate(self.uow, audit, self.clock)

        denial = await gate.check_lockout(account, client_os, PASSWORD_LOGIN)
        if denial is not None:
            return denial

        if not verify_credential(credential, account.credential_hash):
            account.attempts_today += 1
            attempts = account.attempts_today

            if account.role == AccountRole.user and attempts >= FAILED_ATTEMPTS_BEFORE_BLOCK:
                gate.block(account)
                return await gate.deny(
                    account,
                    ErrorCode.ACCOUNT_BLOCKED,
                    "Invalid credentials. Account blocked for 2 minutes "
                    "due to multiple failed attempts.",
                    AuditAction.login_fail_credentials_blocked,
                    client_os,
                    {
                        "attempts": attempts,
                        "remaining_minutes": gate.remaining_block_minutes(account),
                    },
                )

            remaining = None
            message = "Invalid password."
            if account.role == AccountRole.user:
                remaining = FAILED_ATTEMPTS_BEFORE_BLOCK - attempts
                message = (
                    f"Invalid password. {remaining} attempt(s) remaining "
                    "before a 2-minute block."
                )
            return await gate.deny(
                account,
                ErrorCode.INVALID_CREDENTIALS,
                message,
                AuditAction.login_fail_password,
                client_os,
                {"attempts": attempts, "attempts_remaining": remaining},
            )

        if (
            account.role == AccountRole.admin
            and account.two_factor_enabled
            and account.two_factor_secret
        ):
            await self.uow.accounts.update(account)
            await audit.record(
                AuditAction.login_second_factor_required,
                actor_id=account.id,
                actor_label=account.email,
                details={"client_os": client_os},
            )
            await self.uow.commit()
            return Return.ok(
                AdmissionResponse(
                    outcome=AdmissionOutcome.two_factor_required,
                    account_id=str(account.id),
                )
            )

        denial = await gate.check_client_environment(account, client_os, PASSWORD_LOGIN)
        if denial is not None:
            return denial

        action = (
            AuditAction.login_success_admin
            if account.role == AccountRole.admin
            else AuditAction.login_success_user
        )
        return await gate.admit(account, client_os, action)
