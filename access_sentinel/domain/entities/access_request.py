"""
AccessRequest Entity

A requester's ask for access to a protected resource.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import AccessRequestStatus

_ACTIVE_STATUSES = "status IN ('pending', 'approved')"


class AccessRequest(SQLModel, table=True):
    """
    AccessRequest entity - one entry of the access ledger.

    Business Rules:
    - At most one pending/approved request per (requester_id, resource_id)
    - Transitions: pending -> approved | rejected, approved -> revoked
    - rejected and revoked are terminal
    - Only administrators decide requests
    """

    __tablename__ = "access_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    requester_id: UUID = Field(index=True)
    requester_email: str = Field(max_length=255)
    resource_id: str = Field(max_length=255, index=True)
    resource_name: Optional[str] = Field(default=None, max_length=255)

    status: AccessRequestStatus = Field(default=AccessRequestStatus.pending)

    requested_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )
    decided_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    decided_by: Optional[UUID] = None

    __table_args__ = (
        Index("idx_access_request_status", "status"),
        Index(
            "uq_access_request_active_pair",
            "requester_id",
            "resource_id",
            unique=True,
            sqlite_where=text(_ACTIVE_STATUSES),
            postgresql_where=text(_ACTIVE_STATUSES),
        ),
    )
