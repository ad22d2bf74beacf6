from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from access_sentinel.api.error import raise_for_error
from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.embedding_matcher import IEmbeddingMatcher
from access_sentinel.app.services.root_admin import RootAdminSettings
from access_sentinel.app.services.totp_provider import ITotpProvider
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.auth import (
    AdmissionResponse,
    FaceLoginUseCase,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    VerifyTwoFactorUseCase,
)
from access_sentinel.depends import (
    get_account_locks,
    get_clock,
    get_current_account,
    get_embedding_matcher,
    get_root_admin_settings,
    get_totp_provider,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")
    client_os: str = Field("", description="Operating system reported by the client")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AdmissionResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    locks: AccountLocks = Depends(get_account_locks),
    root_admin: RootAdminSettings = Depends(get_root_admin_settings),
):
    """
    Password Login

    Returns outcome=authenticated with a session, or
    outcome=two_factor_required with the account id for admins using 2FA.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 403 Forbidden: OS_NOT_ALLOWED, TIME_WINDOW_DENIED
        - 404 Not Found: NOT_FOUND
        - 423 Locked: ACCOUNT_BLOCKED
        - 429 Too Many Requests: DAILY_LIMIT_EXCEEDED
    """
    use_case = LoginUseCase(uow, clock, locks, root_admin)
    result = await use_case.execute(request.email, request.password, request.client_os)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyTwoFactorRequest(BaseModel):
    account_id: UUID
    token: str
    client_os: str = ""


@router.post("/2fa/verify", status_code=status.HTTP_200_OK, response_model=AdmissionResponse)
async def verify_two_factor(
    request: VerifyTwoFactorRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    locks: AccountLocks = Depends(get_account_locks),
    totp: ITotpProvider = Depends(get_totp_provider),
):
    """
    Second step of an admin login with 2FA enabled.

    Raises:
        - 401 Unauthorized: TWO_FACTOR_INVALID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: ENROLLMENT_MISSING (2FA not enabled)
    """
    use_case = VerifyTwoFactorUseCase(uow, clock, locks, totp)
    result = await use_case.execute(request.account_id, request.token, request.client_os)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class FaceLoginRequest(BaseModel):
    embedding: List[float] = Field(..., min_length=1, description="Face descriptor of the probe")
    client_os: str = ""


@router.post("/face-login", status_code=status.HTTP_200_OK, response_model=AdmissionResponse)
async def face_login(
    request: FaceLoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    locks: AccountLocks = Depends(get_account_locks),
    matcher: IEmbeddingMatcher = Depends(get_embedding_matcher),
):
    """
    Face Login (user accounts only)

    Raises:
        - 403 Forbidden: OS_NOT_ALLOWED, TIME_WINDOW_DENIED
        - 404 Not Found: no enrolled face close enough
        - 423 Locked: ACCOUNT_BLOCKED
        - 429 Too Many Requests: DAILY_LIMIT_EXCEEDED
    """
    use_case = FaceLoginUseCase(uow, clock, locks, matcher)
    result = await use_case.execute(request.embedding, request.client_os)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    current_account: dict = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    use_case = LogoutUseCase(uow, clock)
    result = await use_case.execute(UUID(current_account["account_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
