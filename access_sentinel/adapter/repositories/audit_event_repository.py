import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_sentinel.app.repositories.audit_event_repository import IAuditEventRepository
from access_sentinel.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)

        Runs in a savepoint so a failed insert does not poison the
        surrounding transaction.
        """
        async with self.session.begin_nested():
            self.session.add(audit_event)
        await self.session.refresh(audit_event)
        return audit_event

    async def list_recent(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        Get audit events with cursor-based pagination.

        Cursor format: urlsafe base64 of "<ISO created_at>|<id hex>" of the
        last event on the previous page
        """
        stmt = select(AuditEvent)

        # Apply cursor if provided
        if cursor:
            try:
                decoded = base64.urlsafe_b64decode(cursor.encode("utf-8")).decode("utf-8")
                timestamp_str, id_str = decoded.split("|", 1)
                cursor_timestamp = datetime.fromisoformat(timestamp_str)
                cursor_id = UUID(id_str)
                stmt = stmt.where(
                    or_(
                        AuditEvent.created_at < cursor_timestamp,
                        and_(AuditEvent.created_at == cursor_timestamp, AuditEvent.id < cursor_id),
                    )
                )
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        # Newest first, one extra row to detect another page
        stmt = stmt.order_by(AuditEvent.created_at.desc(), AuditEvent.id.desc()).limit(limit + 1)

        result = await self.session.exec(stmt)
        events = list(result.all())

        has_more = len(events) > limit
        if has_more:
            events = events[:limit]

        next_cursor = None
        if has_more and events:
            last = events[-1]
            raw = f"{last.created_at.isoformat()}|{last.id.hex}"
            next_cursor = base64.urlsafe_b64encode(raw.encode("utf-8")).decode("utf-8")

        return events, next_cursor

    async def count_between(self, start: datetime, end: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(AuditEvent)
            .where(AuditEvent.created_at >= start)
            .where(AuditEvent.created_at < end)
        )
        result = await self.session.exec(stmt)
        return result.one()
