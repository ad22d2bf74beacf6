import logging
from typing import List, Optional, Sequence

import numpy as np

from access_sentinel.app.services.embedding_matcher import IEmbeddingMatcher
from access_sentinel.domain.entities import Account, AccountRole

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.5


class EuclideanEmbeddingMatcher(IEmbeddingMatcher):
    """
    Best-match face lookup.

    Every eligible candidate is scored; the smallest Euclidean distance wins
    and is accepted only when strictly below the threshold. Ties keep the
    earliest candidate in the given order.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def match(self, probe: Sequence[float], candidates: List[Account]) -> Optional[Account]:
        probe_vector = np.asarray(probe, dtype=float)
        if probe_vector.ndim != 1 or probe_vector.size == 0:
            return None

        eligible = [
            account
            for account in candidates
            if account.role == AccountRole.user
            and account.face_embedding
            and len(account.face_embedding) == probe_vector.size
        ]
        if not eligible:
            return None

        matrix = np.asarray([account.face_embedding for account in eligible], dtype=float)
        distances = np.linalg.norm(matrix - probe_vector, axis=1)
        best = int(np.argmin(distances))
        logger.debug(f"Closest face candidate distance {distances[best]:.4f}")

        if distances[best] < self.threshold:
            return eligible[best]
        return None
