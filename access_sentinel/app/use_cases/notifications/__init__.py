"""
Notification Use Cases

Operator notification feed.
"""

from .list_notifications_use_case import ListNotificationsUseCase
from .acknowledge_notification_use_case import AcknowledgeNotificationUseCase
from .acknowledge_all_notifications_use_case import AcknowledgeAllNotificationsUseCase
from .dtos import AcknowledgeAllResponse, NotificationListResponse, NotificationView

__all__ = [
    "ListNotificationsUseCase",
    "AcknowledgeNotificationUseCase",
    "AcknowledgeAllNotificationsUseCase",
    "AcknowledgeAllResponse",
    "NotificationListResponse",
    "NotificationView",
]
