"""
Admin Authorization

Restricts administration endpoints to accounts holding the admin role.
"""

from fastapi import Depends, status

from access_sentinel.api.error import ClientError
from access_sentinel.depends import get_current_account
from access_sentinel.domain.entities import AccountRole
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error


async def require_admin(current_account: dict = Depends(get_current_account)) -> dict:
    """
    Verify the bearer token belongs to an admin.

    Args:
        current_account: Decoded JWT payload

    Raises:
        ClientError: 403 if the role claim is not admin

    Returns:
        The decoded JWT payload
    """
    if current_account.get("role") != AccountRole.admin.value:
        raise ClientError(
            Error(ErrorCode.UNAUTHORIZED, "Admin role required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return current_account
