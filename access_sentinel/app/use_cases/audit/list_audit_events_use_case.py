"""
List Audit Events Use Case

Retrieves audit events with cursor-based pagination.
"""

from typing import Optional

from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.libs.result import Result, Return

from .dtos import AuditEventListResponse, AuditEventView


class ListAuditEventsUseCase:
    """
    Use case for browsing the audit trail.

    Business Rules:
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Admin-only access is enforced at the route
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Result[AuditEventListResponse]:
        """
        Execute list audit events use case.

        Args:
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor
        """
        async with self.uow:
            events, next_cursor = await self.uow.audit_events.list_recent(
                limit=limit, cursor=cursor
            )
            return Return.ok(
                AuditEventListResponse(
                    events=[AuditEventView.from_event(e) for e in events],
                    next_cursor=next_cursor,
                )
            )
