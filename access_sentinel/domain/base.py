import re
from datetime import UTC, datetime
from typing import Optional

_TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps read back from stores that drop tzinfo."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_time_of_day(value: str) -> int:
    """Convert a zero-padded ``HH:MM`` string to minutes past midnight."""
    match = _TIME_OF_DAY.match(value or "")
    if match is None:
        raise ValueError(f"Invalid time of day: {value!r}, expected HH:MM")
    return int(match.group(1)) * 60 + int(match.group(2))


def format_time_of_day(minute_of_day: int) -> str:
    hours, minutes = divmod(minute_of_day, 60)
    return f"{hours:02d}:{minutes:02d}"