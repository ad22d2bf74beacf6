"""
Admin API Routes

Account administration and access request decisions. Every endpoint
requires a bearer token with role=admin.
"""

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from access_sentinel.api.error import raise_for_error
from access_sentinel.api.utils.admin_auth import require_admin
from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.access_requests import (
    AccessRequestListResponse,
    AccessRequestView,
    DecideAccessRequestUseCase,
    ListAccessRequestsUseCase,
)
from access_sentinel.app.use_cases.accounts import (
    AccountListResponse,
    AddAccountCommand,
    AddAccountUseCase,
    DeleteAccountResponse,
    DeleteAccountUseCase,
    ListAccountsUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from access_sentinel.app.use_cases.auth import AccountSummary
from access_sentinel.depends import get_account_locks, get_clock, get_unit_of_work
from config import ApplicationConfig

router = APIRouter(prefix="/admin", tags=["Admin"])


# ============================================================================
# Accounts
# ============================================================================


@router.get("/accounts", status_code=status.HTTP_200_OK, response_model=AccountListResponse)
async def list_accounts(
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListAccountsUseCase(uow)
    result = await use_case.execute()
    return result.value


@router.post("/accounts", status_code=status.HTTP_201_CREATED, response_model=AccountSummary)
async def add_account(
    command: AddAccountCommand,
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Add Account

    Raises:
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: INVALID_LOGIN_WINDOW or invalid payload
    """
    use_case = AddAccountUseCase(uow, clock, ApplicationConfig.BCRYPT_ROUNDS)
    result = await use_case.execute(UUID(current_account["account_id"]), command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/accounts/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountSummary
)
async def update_account(
    account_id: UUID,
    command: UpdateAccountCommand,
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Update Account

    Raises:
        - 403 Forbidden: PROTECTED_ACCOUNT_VIOLATION (demoting or blocking root)
        - 404 Not Found: NOT_FOUND
        - 422 Unprocessable Entity: INVALID_LOGIN_WINDOW
    """
    use_case = UpdateAccountUseCase(uow, clock, ApplicationConfig.BCRYPT_ROUNDS)
    result = await use_case.execute(UUID(current_account["account_id"]), account_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/accounts/{account_id}", status_code=status.HTTP_200_OK, response_model=DeleteAccountResponse
)
async def delete_account(
    account_id: UUID,
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    use_case = DeleteAccountUseCase(uow, clock)
    result = await use_case.execute(UUID(current_account["account_id"]), account_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# ============================================================================
# Access requests
# ============================================================================


@router.get(
    "/access-requests", status_code=status.HTTP_200_OK, response_model=AccessRequestListResponse
)
async def list_access_requests(
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListAccessRequestsUseCase(uow)
    result = await use_case.execute()
    return result.value


class DecisionRequest(BaseModel):
    decision: Literal["approved", "rejected", "revoked"]


@router.post(
    "/access-requests/{request_id}/decision",
    status_code=status.HTTP_200_OK,
    response_model=AccessRequestView,
)
async def decide_access_request(
    request_id: UUID,
    request: DecisionRequest,
    current_account: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    locks: AccountLocks = Depends(get_account_locks),
):
    """
    Approve, reject or revoke an access request.

    Raises:
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION
    """
    use_case = DecideAccessRequestUseCase(uow, clock, locks)
    result = await use_case.execute(
        request_id, request.decision, UUID(current_account["account_id"])
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
