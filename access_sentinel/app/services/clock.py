from abc import ABC, abstractmethod
from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo


class Clock(ABC):
    """Time source for admission decisions.

    ``now()`` is an aware UTC timestamp used for persisted values and expiry;
    ``local_now()`` is the same instant in the configured zone and drives
    calendar days and login windows.
    """

    @abstractmethod
    def now(self) -> datetime:
        pass

    @property
    @abstractmethod
    def timezone(self) -> tzinfo:
        pass

    def local_now(self) -> datetime:
        return self.now().astimezone(self.timezone)

    def today(self) -> date:
        return self.local_now().date()

    def minute_of_day(self) -> int:
        local = self.local_now()
        return local.hour * 60 + local.minute


class SystemClock(Clock):
    def __init__(self, timezone_name: str = "UTC"):
        self._timezone = UTC if timezone_name == "UTC" else ZoneInfo(timezone_name)

    @property
    def timezone(self) -> tzinfo:
        return self._timezone

    def now(self) -> datetime:
        return datetime.now(UTC)
