"""
Update Account Use Case

Admin operation editing an account's profile and admission policy.
"""

from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.credentials import credential_too_long, hash_credential
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.auth.dtos import AccountSummary
from access_sentinel.domain.base import format_time_of_day
from access_sentinel.domain.entities import AccountRole, AuditAction
from access_sentinel.domain.errors import ErrorCode, ProtectedAccountViolation
from access_sentinel.libs.result import Error, Result, Return

from .admin_guard import load_admin
from .dtos import UpdateAccountCommand
from .login_window import parse_login_window


class UpdateAccountUseCase:
    """
    Use case for updating an account.

    Business Rules:
    - Only admins can update accounts
    - Root admin cannot be demoted or blocked (ProtectedAccountViolation)
    - Unblocking clears blocked_until; a manual block has no expiry
    - Face embedding and login window can be cleared with null
    """

    def __init__(self, uow: UnitOfWork, clock: Clock, bcrypt_rounds: int = 12):
        self.uow = uow
        self.clock = clock
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(
        self, actor_id: UUID, account_id: UUID, command: UpdateAccountCommand
    ) -> Result[AccountSummary]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            actor_result = await load_admin(self.uow, audit, actor_id, "update_account")
            if actor_result.is_err():
                return actor_result
            actor = actor_result.value

            account = await self.uow.accounts.get_for_update(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            changes = command.model_fields_set

            if command.password is not None and credential_too_long(command.password):
                return Return.err(
                    Error(ErrorCode.CREDENTIAL_TOO_LONG, "Password must be at most 72 bytes")
                )

            if account.is_root_admin:
                if "role" in changes and command.role != AccountRole.admin:
                    raise ProtectedAccountViolation("The root admin cannot be demoted")
                if command.blocked:
                    raise ProtectedAccountViolation("The root admin cannot be blocked")

            if {"login_window_start", "login_window_end"} & changes:
                start = (
                    command.login_window_start
                    if "login_window_start" in changes
                    else _current_bound(account.login_window_start)
                )
                end = (
                    command.login_window_end
                    if "login_window_end" in changes
                    else _current_bound(account.login_window_end)
                )
                window_result = parse_login_window(start, end)
                if window_result.is_err():
                    return window_result
                account.login_window_start, account.login_window_end = window_result.value

            if "name" in changes and command.name is not None:
                account.name = command.name
            if "password" in changes and command.password is not None:
                account.credential_hash = hash_credential(command.password, self.bcrypt_rounds)
            if "role" in changes and command.role is not None:
                account.role = command.role
            if "max_attempts_per_day" in changes and command.max_attempts_per_day is not None:
                account.max_attempts_per_day = command.max_attempts_per_day
            if "blocked" in changes and command.blocked is not None:
                account.blocked = command.blocked
                account.blocked_until = None
            if "face_embedding" in changes:
                account.face_embedding = command.face_embedding or None

            await self.uow.accounts.update(account)

            await audit.record(
                AuditAction.user_updated,
                actor_id=actor.id,
                actor_label=actor.email,
                details={
                    "account_id": account.id,
                    "email": account.email,
                    "fields": sorted(f for f in changes if f != "password"),
                },
            )
            await self.uow.commit()

            return Return.ok(AccountSummary.from_account(account))


def _current_bound(minute_of_day):
    return format_time_of_day(minute_of_day) if minute_of_day is not None else None
