"""
Account Entity

A user or administrator that can be admitted by the sentinel.
"""

from datetime import UTC, date, datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from .enums import AccountRole


class Account(SQLModel, table=True):
    """
    Account entity - the unit of admission control.

    Business Rules:
    - Email must be unique across all accounts
    - credential_hash is a bcrypt hash, verified in constant time
    - blocked_until set implies blocked = True
    - Exactly one root admin (is_root_admin) exists; it is never blocked,
      demoted or deleted
    - attempts_today resets once per local calendar day (last_attempt_date)
    - A pending two-factor enrollment is only valid before its expiry
    - Optional fields are cleared by assigning None
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(default="", max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    credential_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: AccountRole = Field(default=AccountRole.user)
    is_root_admin: bool = Field(default=False)

    # Lockout state
    blocked: bool = Field(default=False)
    blocked_until: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    max_attempts_per_day: int = Field(default=5)
    attempts_today: int = Field(default=0)
    last_attempt_date: Optional[date] = None

    # Minutes past local midnight, both set or both None
    login_window_start: Optional[int] = None
    login_window_end: Optional[int] = None

    # Second factors
    two_factor_enabled: bool = Field(default=False)
    two_factor_secret: Optional[str] = Field(default=None, max_length=64)
    pending_two_factor_secret: Optional[str] = Field(default=None, max_length=64)
    pending_two_factor_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    face_embedding: Optional[List[float]] = Field(
        default=None, sa_column=Column(JSON(none_as_null=True))
    )

    last_os_used: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )
    last_login_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (Index("idx_account_role", "role"),)

    @property
    def has_login_window(self) -> bool:
        return self.login_window_start is not None and self.login_window_end is not None

    @property
    def has_face_embedding(self) -> bool:
        return bool(self.face_embedding)
