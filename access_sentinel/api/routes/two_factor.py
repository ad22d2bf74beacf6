"""
Two-Factor API Routes

TOTP enrollment for the authenticated admin.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from access_sentinel.api.error import raise_for_error
from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.totp_provider import ITotpProvider
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.two_factor import (
    ConfirmTwoFactorUseCase,
    DisableTwoFactorUseCase,
    EnrollTwoFactorUseCase,
    GetTwoFactorStatusUseCase,
    TwoFactorSetupResponse,
    TwoFactorStatusResponse,
)
from access_sentinel.depends import (
    get_account_locks,
    get_clock,
    get_current_account,
    get_totp_provider,
    get_unit_of_work,
)
from config import ApplicationConfig

router = APIRouter(prefix="/two-factor", tags=["Two-Factor"])


@router.post("/enroll", status_code=status.HTTP_200_OK, response_model=TwoFactorSetupResponse)
async def enroll(
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    totp: ITotpProvider = Depends(get_totp_provider),
):
    """
    Start 2FA enrollment.

    Returns a base32 secret and an otpauth:// URI valid for 10 minutes.

    Raises:
        - 403 Forbidden: UNAUTHORIZED (not an admin)
    """
    use_case = EnrollTwoFactorUseCase(uow, clock, totp, ApplicationConfig.TOTP_ISSUER)
    result = await use_case.execute(UUID(current_account["account_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ConfirmTwoFactorRequest(BaseModel):
    token: str


@router.post("/confirm", status_code=status.HTTP_200_OK, response_model=TwoFactorStatusResponse)
async def confirm(
    request: ConfirmTwoFactorRequest,
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    locks: AccountLocks = Depends(get_account_locks),
    totp: ITotpProvider = Depends(get_totp_provider),
):
    """
    Finish 2FA enrollment with a code from the authenticator app.

    Raises:
        - 400 Bad Request: INVALID_TOKEN
        - 409 Conflict: ENROLLMENT_MISSING
        - 410 Gone: ENROLLMENT_EXPIRED
    """
    use_case = ConfirmTwoFactorUseCase(uow, clock, locks, totp)
    result = await use_case.execute(UUID(current_account["account_id"]), request.token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("", status_code=status.HTTP_200_OK, response_model=TwoFactorStatusResponse)
async def disable(
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    use_case = DisableTwoFactorUseCase(uow, clock)
    result = await use_case.execute(UUID(current_account["account_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/status", status_code=status.HTTP_200_OK, response_model=TwoFactorStatusResponse)
async def get_status(
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    use_case = GetTwoFactorStatusUseCase(uow, clock)
    result = await use_case.execute(UUID(current_account["account_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
