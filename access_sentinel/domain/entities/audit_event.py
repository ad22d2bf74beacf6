"""
AuditEvent Entity

Immutable log of every admission and ledger decision.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from .enums import AuditAction


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of all admission/ledger events.

    Business Rules:
    - Immutable (never updated or deleted)
    - actor_id nullable for unknown or system actors; actor_label always set
    - action is a tagged AuditAction, details carry the context
      (client OS, failure reason, previous status, ...)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor_id: Optional[UUID] = Field(default=None, index=True)
    actor_label: str = Field(default="system", max_length=255)

    action: AuditAction
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_action", "action"),
    )
