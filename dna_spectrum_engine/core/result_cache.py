"""
In-memory result cache.

Keeps recently computed results so they can still be served when the
file store is disabled or failing. Thread-safe; bounded by
``cache.max_entries`` with oldest-first eviction.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Iterator

from dna_spectrum_engine.core.interfaces import ResultStoreInterface
from dna_spectrum_engine.core.models import AssessmentResult

logger = logging.getLogger(__name__)


class ResultCache(ResultStoreInterface):
    """Bounded, thread-safe in-memory result store."""

    def __init__(self, max_entries: int = 500):
        """Initialize the cache.

        Args:
            max_entries: Number of results kept before eviction.
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self.max_entries = max_entries
        self._results: OrderedDict[str, AssessmentResult] = OrderedDict()
        self._lock = threading.RLock()

        logger.info("ResultCache initialized with capacity: %d", self.max_entries)

    @property
    def name(self) -> str:
        return "memory_cache"

    def save_result(self, result: AssessmentResult) -> str:
        """Store a copy of a result, evicting the oldest if full.

        Args:
            result: Result to cache

        Returns:
            The cached result id
        """
        with self._lock:
            self._results[result.id] = result.model_copy(deep=True)
            self._results.move_to_end(result.id)

            while len(self._results) > self.max_entries:
                evicted_id, _ = self._results.popitem(last=False)
                logger.debug("Evicted cached result: %s", evicted_id)

        return result.id

    def get_result(self, assessment_id: str) -> AssessmentResult | None:
        """Get a copy of a cached result.

        Args:
            assessment_id: Result identifier

        Returns:
            AssessmentResult or None if not cached
        """
        with self._lock:
            result = self._results.get(assessment_id)
            return result.model_copy(deep=True) if result else None

    def delete_result(self, assessment_id: str) -> bool:
        """Remove a cached result.

        Args:
            assessment_id: Result identifier

        Returns:
            True if removed, False if not cached
        """
        with self._lock:
            if assessment_id not in self._results:
                return False
            del self._results[assessment_id]
            return True

    def iter_results(self) -> Iterator[AssessmentResult]:
        """Yield copies of a snapshot of the cached results."""
        with self._lock:
            snapshot = list(self._results.values())
        for result in snapshot:
            yield result.model_copy(deep=True)

    def clear(self) -> None:
        """Drop every cached result."""
        with self._lock:
            self._results.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __contains__(self, assessment_id: object) -> bool:
        with self._lock:
            return assessment_id in self._results
