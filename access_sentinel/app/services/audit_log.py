"""
Audit trail and operator notification feed.

Both writes are best-effort: a persistence failure is logged and swallowed so
it never aborts the admission or ledger operation that triggered it, and
never rolls back the state change it describes.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID

from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import (
    AuditAction,
    AuditEvent,
    Notification,
    NotificationType,
)

logger = logging.getLogger(__name__)


def _jsonable(details: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Coerce enum/UUID/datetime values so details fit a JSON column."""
    cleaned: Dict[str, Any] = {}
    for key, value in (details or {}).items():
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        elif isinstance(value, UUID):
            value = str(value)
        elif isinstance(value, Enum):
            value = value.value
        cleaned[key] = value
    return cleaned


class AuditLog:
    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def record(
        self,
        action: AuditAction,
        actor_id: Optional[UUID] = None,
        actor_label: str = "system",
        details: Optional[Dict[str, Any]] = None,
    ) -> Optional[AuditEvent]:
        event = AuditEvent(
            actor_id=actor_id,
            actor_label=actor_label,
            action=action,
            details=_jsonable(details),
            created_at=self.clock.now(),
        )
        try:
            return await self.uow.audit_events.create(event)
        except Exception:
            logger.exception(f"Failed to append audit event {action.value} for {actor_label}")
            return None

    async def notify(
        self,
        message: str,
        action_type: NotificationType,
        related_info: Optional[Dict[str, Any]] = None,
    ) -> Optional[Notification]:
        notification = Notification(
            message=message,
            action_type=action_type,
            related_info=_jsonable(related_info),
            created_at=self.clock.now(),
        )
        try:
            return await self.uow.notifications.create(notification)
        except Exception:
            logger.exception(f"Failed to create {action_type.value} notification")
            return None
