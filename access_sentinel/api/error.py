from fastapi import status

from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error

# HTTP status per error code, shared by every route
ERROR_STATUS = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_BLOCKED: status.HTTP_423_LOCKED,
    ErrorCode.DAILY_LIMIT_EXCEEDED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.OS_NOT_ALLOWED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TIME_WINDOW_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TWO_FACTOR_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TWO_FACTOR_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ENROLLMENT_MISSING: status.HTTP_409_CONFLICT,
    ErrorCode.ENROLLMENT_EXPIRED: status.HTTP_410_GONE,
    ErrorCode.INVALID_TOKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_REQUEST: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.PROTECTED_ACCOUNT_VIOLATION: status.HTTP_403_FORBIDDEN,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_LOGIN_WINDOW: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.CREDENTIAL_TOO_LONG: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> None:
    """Raise the HTTP-facing exception for a use case error."""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
