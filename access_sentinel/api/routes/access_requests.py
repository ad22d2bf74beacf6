from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from access_sentinel.api.error import raise_for_error
from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.access_requests import (
    AccessRequestListResponse,
    AccessRequestView,
    ListAccessRequestsUseCase,
    RequestAccessUseCase,
)
from access_sentinel.depends import (
    get_account_locks,
    get_clock,
    get_current_account,
    get_unit_of_work,
)

router = APIRouter(prefix="/access-requests", tags=["Access Requests"])


class AccessRequestRequest(BaseModel):
    resource_id: str = Field(..., min_length=1, max_length=255)
    resource_name: Optional[str] = Field(None, max_length=255)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccessRequestView)
async def request_access(
    request: AccessRequestRequest,
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    locks: AccountLocks = Depends(get_account_locks),
):
    """
    Request access to a protected resource.

    Raises:
        - 404 Not Found: requester account no longer exists
        - 409 Conflict: DUPLICATE_REQUEST (details.existing_status)
    """
    use_case = RequestAccessUseCase(uow, clock, locks)
    result = await use_case.execute(
        UUID(current_account["account_id"]), request.resource_id, request.resource_name
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=AccessRequestListResponse)
async def list_my_requests(
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListAccessRequestsUseCase(uow)
    result = await use_case.execute(requester_id=UUID(current_account["account_id"]))
    return result.value
