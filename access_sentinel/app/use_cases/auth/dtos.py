"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the admission domain.
Provides type safety and clear contracts between layers.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from access_sentinel.domain.base import format_time_of_day
from access_sentinel.domain.entities import Account, AdmissionOutcome


# ============================================================================
# Nested DTOs
# ============================================================================


class AccountSummary(BaseModel):
    """
    Account as exposed outside the core.

    Never carries the credential hash, TOTP secrets or the face embedding.
    """

    id: str
    name: str
    email: str
    role: str
    is_root_admin: bool
    blocked: bool
    blocked_until: Optional[datetime] = None
    login_window_start: Optional[str] = None
    login_window_end: Optional[str] = None
    max_attempts_per_day: int
    attempts_today: int
    last_attempt_date: Optional[date] = None
    two_factor_enabled: bool
    has_face_embedding: bool
    last_os_used: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            id=str(account.id),
            name=account.name,
            email=account.email,
            role=account.role.value,
            is_root_admin=account.is_root_admin,
            blocked=account.blocked,
            blocked_until=account.blocked_until,
            login_window_start=(
                format_time_of_day(account.login_window_start)
                if account.login_window_start is not None
                else None
            ),
            login_window_end=(
                format_time_of_day(account.login_window_end)
                if account.login_window_end is not None
                else None
            ),
            max_attempts_per_day=account.max_attempts_per_day,
            attempts_today=account.attempts_today,
            last_attempt_date=account.last_attempt_date,
            two_factor_enabled=account.two_factor_enabled,
            has_face_embedding=account.has_face_embedding,
            last_os_used=account.last_os_used,
            created_at=account.created_at,
            last_login_at=account.last_login_at,
        )


class AccountSession(BaseModel):
    """Opaque session handed to the caller after a successful admission"""

    access_token: str
    token_type: str = "bearer"
    account: AccountSummary


# ============================================================================
# Response DTOs
# ============================================================================


class AdmissionResponse(BaseModel):
    """
    Non-denied admission result.

    - outcome=authenticated: session is set
    - outcome=two_factor_required: account_id is set, no session yet
    """

    outcome: AdmissionOutcome
    session: Optional[AccountSession] = None
    account_id: Optional[str] = None


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
