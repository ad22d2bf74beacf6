"""
Admission Gate

Steps shared by password login, face login and two-factor verification:
day rollover, auto-unblock, lockout checks, client environment checks and
success handling. Every exit path persists the account, records an audit
event and commits.
"""

import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Optional

from access_sentinel.api.utils.jwt import generate_jwt
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.base import ensure_utc, format_time_of_day
from access_sentinel.domain.entities import (
    Account,
    AccountRole,
    AdmissionOutcome,
    AuditAction,
    NotificationType,
)
from access_sentinel.domain.errors import ErrorCode, ProtectedAccountViolation
from access_sentinel.libs.result import Error, Result, Return

from .dtos import AccountSession, AccountSummary, AdmissionResponse

logger = logging.getLogger(__name__)

LOCKOUT_DURATION = timedelta(minutes=2)
FAILED_ATTEMPTS_BEFORE_BLOCK = 2
ALLOWED_OS_MARKERS = ("win", "android")


@dataclass(frozen=True)
class DenialActions:
    """Audit actions used for denials on a given admission path"""

    blocked: AuditAction
    daily_limit: AuditAction
    os_block: AuditAction
    time_denied: AuditAction


PASSWORD_LOGIN = DenialActions(
    blocked=AuditAction.login_fail_blocked,
    daily_limit=AuditAction.login_fail_daily_limit,
    os_block=AuditAction.login_fail_os_block,
    time_denied=AuditAction.login_fail_time_denied,
)

FACE_LOGIN = DenialActions(
    blocked=AuditAction.face_login_fail_blocked,
    daily_limit=AuditAction.face_login_fail_daily_limit,
    os_block=AuditAction.face_login_fail_os_block,
    time_denied=AuditAction.face_login_fail_time_denied,
)


def is_allowed_os(client_os: str) -> bool:
    lowered = (client_os or "").lower()
    return any(marker in lowered for marker in ALLOWED_OS_MARKERS)


class AdmissionGate:
    def __init__(self, uow: UnitOfWork, audit: AuditLog, clock: Clock):
        self.uow = uow
        self.audit = audit
        self.clock = clock

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def block(self, account: Account) -> None:
        if account.is_root_admin:
            raise ProtectedAccountViolation("Cannot block the primary admin account")
        account.blocked = True
        account.blocked_until = self.clock.now() + LOCKOUT_DURATION

    def remaining_block_minutes(self, account: Account) -> Optional[int]:
        blocked_until = ensure_utc(account.blocked_until)
        if blocked_until is None:
            return None
        seconds = (blocked_until - self.clock.now()).total_seconds()
        return max(0, math.ceil(seconds / 60))

    def refresh_daily_counter(self, account: Account) -> None:
        today = self.clock.today()
        if account.last_attempt_date != today:
            account.attempts_today = 0
            account.last_attempt_date = today

    async def lift_expired_block(self, account: Account, client_os: str) -> None:
        blocked_until = ensure_utc(account.blocked_until)
        if account.blocked and blocked_until is not None and blocked_until <= self.clock.now():
            account.blocked = False
            account.blocked_until = None
            await self.audit.record(
                AuditAction.user_auto_unblocked,
                actor_id=account.id,
                actor_label=account.email,
                details={"client_os": client_os},
            )

    # ------------------------------------------------------------------
    # Exits
    # ------------------------------------------------------------------

    async def deny(
        self,
        account: Account,
        code: ErrorCode,
        message: str,
        action: AuditAction,
        client_os: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> Result[AdmissionResponse]:
        details = details or {}
        logger.info(f"Admission denied for {account.email}: {code.value}")
        await self.uow.accounts.update(account)
        await self.audit.record(
            action,
            actor_id=account.id,
            actor_label=account.email,
            details={"client_os": client_os, "reason": code.value, **details},
        )
        await self.uow.commit()
        return Return.err(Error(code, message, details))

    async def admit(
        self,
        account: Account,
        client_os: str,
        action: AuditAction,
        method: Optional[str] = None,
    ) -> Result[AdmissionResponse]:
        now = self.clock.now()
        account.attempts_today = 0
        account.last_attempt_date = self.clock.today()
        account.blocked = False
        account.blocked_until = None
        account.last_os_used = client_os
        account.last_login_at = now
        await self.uow.accounts.update(account)

        details: Dict[str, Any] = {"client_os": client_os, "role": account.role}
        if method:
            details["login_method"] = method
        await self.audit.record(
            action, actor_id=account.id, actor_label=account.email, details=details
        )

        label = "Admin" if account.role == AccountRole.admin else "User"
        suffix = f" via {method.replace('_', ' ')}" if method else ""
        await self.audit.notify(
            f"{label} {account.email} logged in{suffix}.",
            NotificationType.login,
            {
                "user_email": account.email,
                "client_os": client_os,
                "is_admin": account.role == AccountRole.admin,
                "login_method": method or "password",
            },
        )
        await self.uow.commit()
        logger.info(f"Admission granted for {account.email} ({action.value})")

        session = AccountSession(
            access_token=generate_jwt(account.id, account.role.value),
            account=AccountSummary.from_account(account),
        )
        return Return.ok(
            AdmissionResponse(outcome=AdmissionOutcome.authenticated, session=session)
        )

    # ------------------------------------------------------------------
    # Checks (None means "keep going")
    # ------------------------------------------------------------------

    async def check_lockout(
        self, account: Account, client_os: str, actions: DenialActions
    ) -> Optional[Result[AdmissionResponse]]:
        """Day rollover, auto-unblock, active block and daily quota."""
        self.refresh_daily_counter(account)
        await self.lift_expired_block(account, client_os)

        if account.blocked:
            remaining = self.remaining_block_minutes(account)
            wait = f"{remaining} minutes" if remaining is not None else "later"
            return await self.deny(
                account,
                ErrorCode.ACCOUNT_BLOCKED,
                f"Account is blocked. Try again in {wait}.",
                actions.blocked,
                client_os,
                {"remaining_minutes": remaining},
            )

        if (
            account.role == AccountRole.user
            and account.attempts_today >= account.max_attempts_per_day
        ):
            attempts = account.attempts_today
            self.block(account)
            return await self.deny(
                account,
                ErrorCode.DAILY_LIMIT_EXCEEDED,
                "Daily login attempts limit reached. Account blocked for 2 minutes.",
                actions.daily_limit,
                client_os,
                {"attempts": attempts, "remaining_minutes": self.remaining_block_minutes(account)},
            )

        return None

    async def check_client_environment(
        self, account: Account, client_os: str, actions: DenialActions
    ) -> Optional[Result[AdmissionResponse]]:
        """OS allow-list and login window; user accounts only."""
        if account.role != AccountRole.user:
            return None

        if not is_allowed_os(client_os):
            self.block(account)
            account.last_os_used = client_os
            return await self.deny(
                account,
                ErrorCode.OS_NOT_ALLOWED,
                "Access denied. Only Windows or Android OS is permitted. "
                "Account blocked for 2 minutes.",
                actions.os_block,
                client_os,
                {"remaining_minutes": self.remaining_block_minutes(account)},
            )

        if account.has_login_window:
            current = self.clock.minute_of_day()
            if not account.login_window_start <= current <= account.login_window_end:
                window = (
                    f"{format_time_of_day(account.login_window_start)}-"
                    f"{format_time_of_day(account.login_window_end)}"
                )
                return await self.deny(
                    account,
                    ErrorCode.TIME_WINDOW_DENIED,
                    f"Access denied. Allowed login time is {window}.",
                    actions.time_denied,
                    client_os,
                    {"current_time": format_time_of_day(current), "access_window": window},
                )

        return None
