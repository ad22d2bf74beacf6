"""
Add Account Use Case

Admin operation creating a user or admin account.
"""

import logging
from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.credentials import credential_too_long, hash_credential
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.auth.dtos import AccountSummary
from access_sentinel.domain.entities import Account, AuditAction, NotificationType
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .admin_guard import load_admin
from .dtos import AddAccountCommand
from .login_window import parse_login_window

logger = logging.getLogger(__name__)


class AddAccountUseCase:
    """
    Use case for adding an account.

    Business Rules:
    - Only admins can add accounts
    - Email is unique (case-insensitive)
    - Defaults: role user, 5 attempts per day
    - Login window is both-or-neither, given as HH:MM
    - The credential is stored as a bcrypt hash
    """

    def __init__(self, uow: UnitOfWork, clock: Clock, bcrypt_rounds: int = 12):
        self.uow = uow
        self.clock = clock
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, actor_id: UUID, command: AddAccountCommand) -> Result[AccountSummary]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            actor_result = await load_admin(self.uow, audit, actor_id, "add_account")
            if actor_result.is_err():
                return actor_result
            actor = actor_result.value

            if credential_too_long(command.password):
                return Return.err(
                    Error(ErrorCode.CREDENTIAL_TOO_LONG, "Password must be at most 72 bytes")
                )

            email = command.email.strip().lower()
            if await self.uow.accounts.get_by_email(email) is not None:
                return Return.err(
                    Error(ErrorCode.EMAIL_ALREADY_EXISTS, "An account with this email already exists")
                )

            window_result = parse_login_window(
                command.login_window_start, command.login_window_end
            )
            if window_result.is_err():
                return window_result
            window_start, window_end = window_result.value

            account = Account(
                name=command.name,
                email=email,
                credential_hash=hash_credential(command.password, self.bcrypt_rounds),
                role=command.role,
                max_attempts_per_day=command.max_attempts_per_day,
                last_attempt_date=self.clock.today(),
                login_window_start=window_start,
                login_window_end=window_end,
                face_embedding=command.face_embedding or None,
                created_at=self.clock.now(),
            )
            await self.uow.accounts.create(account)

            await audit.record(
                AuditAction.user_added,
                actor_id=actor.id,
                actor_label=actor.email,
                details={
                    "account_id": account.id,
                    "email": account.email,
                    "role": account.role,
                },
            )
            await audit.notify(
                f"Account {account.email} added by {actor.email}.",
                NotificationType.info,
                {"user_email": account.email, "admin_email": actor.email},
            )
            await self.uow.commit()
            logger.info(f"Account {account.email} added by {actor.email}")

            return Return.ok(AccountSummary.from_account(account))
