"""
Sentinel error taxonomy.

Expected failures travel as ``Error(code=ErrorCode.X, ...)`` inside a Result.
Only misuse of the root admin account is raised as an exception.
"""

from enum import Enum


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ACCOUNT_BLOCKED = "ACCOUNT_BLOCKED"
    DAILY_LIMIT_EXCEEDED = "DAILY_LIMIT_EXCEEDED"
    OS_NOT_ALLOWED = "OS_NOT_ALLOWED"
    TIME_WINDOW_DENIED = "TIME_WINDOW_DENIED"
    TWO_FACTOR_REQUIRED = "TWO_FACTOR_REQUIRED"
    TWO_FACTOR_INVALID = "TWO_FACTOR_INVALID"
    ENROLLMENT_MISSING = "ENROLLMENT_MISSING"
    ENROLLMENT_EXPIRED = "ENROLLMENT_EXPIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    DUPLICATE_REQUEST = "DUPLICATE_REQUEST"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    UNAUTHORIZED = "UNAUTHORIZED"
    PROTECTED_ACCOUNT_VIOLATION = "PROTECTED_ACCOUNT_VIOLATION"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    INVALID_LOGIN_WINDOW = "INVALID_LOGIN_WINDOW"
    CREDENTIAL_TOO_LONG = "CREDENTIAL_TOO_LONG"


class ProtectedAccountViolation(Exception):
    """Raised when calling code tries to block, demote or delete the root admin."""

    code = ErrorCode.PROTECTED_ACCOUNT_VIOLATION

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
