"""
Notification Entity

Operator-facing feed derived from selected audit events.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from .enums import NotificationType


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    message: str = Field(max_length=500)
    action_type: NotificationType = Field(default=NotificationType.info)
    related_info: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    is_read: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        Index("idx_notification_created_at", "created_at"),
        Index("idx_notification_is_read", "is_read"),
    )
