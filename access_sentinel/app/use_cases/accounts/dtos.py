"""
Account Administration DTOs

Commands accepted by the admin account operations. Responses reuse
AccountSummary from the auth use cases.
"""

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from access_sentinel.app.use_cases.auth.dtos import AccountSummary
from access_sentinel.domain.entities import AccountRole


# ============================================================================
# Command DTOs
# ============================================================================


class AddAccountCommand(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=1)
    role: AccountRole = AccountRole.user
    max_attempts_per_day: int = Field(default=5, ge=0)
    login_window_start: Optional[str] = None
    login_window_end: Optional[str] = None
    face_embedding: Optional[List[float]] = None


class UpdateAccountCommand(BaseModel):
    """
    Partial update. Only fields explicitly present are applied, so sending
    ``null`` for an optional field clears it.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    password: Optional[str] = Field(default=None, min_length=1)
    role: Optional[AccountRole] = None
    max_attempts_per_day: Optional[int] = Field(default=None, ge=0)
    blocked: Optional[bool] = None
    login_window_start: Optional[str] = None
    login_window_end: Optional[str] = None
    face_embedding: Optional[List[float]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AccountListResponse(BaseModel):
    accounts: List[AccountSummary]


class DeleteAccountResponse(BaseModel):
    status: str
