from typing import Optional
from uuid import UUID

from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.libs.result import Result, Return

from .dtos import AccessRequestListResponse, AccessRequestView


class ListAccessRequestsUseCase:
    """Lists access requests newest first, optionally for one requester."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: Optional[UUID] = None
    ) -> Result[AccessRequestListResponse]:
        async with self.uow:
            if requester_id is None:
                requests = await self.uow.access_requests.list_all()
            else:
                requests = await self.uow.access_requests.list_by_requester(requester_id)

            return Return.ok(
                AccessRequestListResponse(
                    requests=[AccessRequestView.from_request(r) for r in requests]
                )
            )
