"""
Notification Use Case DTOs
"""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel

from access_sentinel.domain.entities import Notification


class NotificationView(BaseModel):
    id: str
    message: str
    action_type: str
    related_info: Dict[str, Any]
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        return cls(
            id=str(notification.id),
            message=notification.message,
            action_type=notification.action_type.value,
            related_info=notification.related_info or {},
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class NotificationListResponse(BaseModel):
    notifications: List[NotificationView]
    unread: int


class AcknowledgeAllResponse(BaseModel):
    """Response for acknowledge all notifications use case"""

    marked_read: int
