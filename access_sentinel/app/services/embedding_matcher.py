from abc import ABC, abstractmethod
from typing import Optional, Sequence

from access_sentinel.domain.entities import Account


class IEmbeddingMatcher(ABC):
    """Face embedding matcher - application layer"""

    @abstractmethod
    def match(
        self, probe: Sequence[float], candidates: Sequence[Account]
    ) -> Optional[Account]:
        """
        Select the candidate whose embedding is closest to the probe.

        Only user accounts with a non-empty embedding are eligible. The
        global minimum distance wins and is returned only when strictly
        below the matcher's threshold.
        """
        pass
