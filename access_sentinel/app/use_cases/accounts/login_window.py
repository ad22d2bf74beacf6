from typing import Optional, Tuple

from access_sentinel.domain.base import parse_time_of_day
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return


def parse_login_window(
    start: Optional[str], end: Optional[str]
) -> Result[Tuple[Optional[int], Optional[int]]]:
    """Parse an ``HH:MM`` window; both bounds must be given or neither."""
    if start is None and end is None:
        return Return.ok((None, None))
    if start is None or end is None:
        return Return.err(
            Error(
                ErrorCode.INVALID_LOGIN_WINDOW,
                "Login window needs both a start and an end time",
            )
        )
    try:
        return Return.ok((parse_time_of_day(start), parse_time_of_day(end)))
    except ValueError as e:
        return Return.err(Error(ErrorCode.INVALID_LOGIN_WINDOW, str(e)))
