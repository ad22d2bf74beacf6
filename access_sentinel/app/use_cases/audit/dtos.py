"""
Audit Use Case DTOs
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from access_sentinel.domain.entities import AuditEvent


class AuditEventView(BaseModel):
    """Single audit event in response"""

    id: str
    action: str
    actor_id: Optional[str] = None
    actor_label: str
    details: Dict[str, Any]
    created_at: datetime

    @classmethod
    def from_event(cls, event: AuditEvent) -> "AuditEventView":
        return cls(
            id=str(event.id),
            action=event.action.value,
            actor_id=str(event.actor_id) if event.actor_id else None,
            actor_label=event.actor_label,
            details=event.details or {},
            created_at=event.created_at,
        )


class AuditEventListResponse(BaseModel):
    events: List[AuditEventView]
    next_cursor: Optional[str] = None


class DailyActivityCount(BaseModel):
    date: date
    activities: int


class DailyActivityResponse(BaseModel):
    """Oldest day first, today last"""

    days: List[DailyActivityCount]


class DashboardSummaryResponse(BaseModel):
    accounts: int
    pending_requests: int
    recent_activity: int
