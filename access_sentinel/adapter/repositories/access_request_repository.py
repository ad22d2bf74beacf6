from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_sentinel.app.repositories.access_request_repository import IAccessRequestRepository
from access_sentinel.domain.entities import AccessRequest, AccessRequestStatus

ACTIVE_STATUSES = (AccessRequestStatus.pending, AccessRequestStatus.approved)


class AccessRequestRepository(IAccessRequestRepository):
    """AccessRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[AccessRequest]:
        stmt = select(AccessRequest).where(AccessRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active(
        self, requester_id: UUID, resource_id: str
    ) -> Optional[AccessRequest]:
        stmt = select(AccessRequest).where(
            AccessRequest.requester_id == requester_id,
            AccessRequest.resource_id == resource_id,
            col(AccessRequest.status).in_(ACTIVE_STATUSES),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[AccessRequest]:
        stmt = select(AccessRequest).order_by(AccessRequest.requested_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_requester(self, requester_id: UUID) -> List[AccessRequest]:
        stmt = (
            select(AccessRequest)
            .where(AccessRequest.requester_id == requester_id)
            .order_by(AccessRequest.requested_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_status(self, status: AccessRequestStatus) -> int:
        stmt = (
            select(func.count())
            .select_from(AccessRequest)
            .where(AccessRequest.status == status)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, access_request: AccessRequest) -> AccessRequest:
        self.session.add(access_request)
        await self.session.flush()
        await self.session.refresh(access_request)
        return access_request

    async def update(self, access_request: AccessRequest) -> AccessRequest:
        self.session.add(access_request)
        await self.session.flush()
        await self.session.refresh(access_request)
        return access_request
