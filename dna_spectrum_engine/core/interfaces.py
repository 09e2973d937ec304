"""
Abstract Base Classes defining the contracts for the DNA Spectrum Engine.

The Orchestrator persists and retrieves assessment results through these
interfaces without knowing whether they live on disk or in memory.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

from dna_spectrum_engine.core.models import AssessmentResult, AssessmentStats


class ResultStoreInterface(ABC):
    """Abstract interface that all result stores must implement.

    Subclasses provide the four primitive operations; listing and
    statistics are derived from ``iter_results``.

    Example:
        class MemoryStore(ResultStoreInterface):
            def save_result(self, result: AssessmentResult) -> str:
                self._data[result.id] = result
                return result.id
            ...
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return an identifier used in log messages."""
        pass

    @abstractmethod
    def save_result(self, result: AssessmentResult) -> str:
        """Store a completed assessment.

        Args:
            result: The result to store.

        Returns:
            The stored result id.

        Raises:
            PersistenceError: If the store cannot write the result.
        """
        pass

    @abstractmethod
    def get_result(self, assessment_id: str) -> AssessmentResult | None:
        """Return a stored result verbatim, or None if unknown.

        Raises:
            PersistenceError: If the record exists but cannot be read.
        """
        pass

    @abstractmethod
    def delete_result(self, assessment_id: str) -> bool:
        """Delete a result.

        Returns:
            True if a record was removed, False if none existed.
        """
        pass

    @abstractmethod
    def iter_results(self) -> Iterator[AssessmentResult]:
        """Yield every stored result in no particular order."""
        pass

    def list_results(self, limit: int = 50, offset: int = 0) -> list[AssessmentResult]:
        """List stored results, newest first.

        Args:
            limit: Maximum number of results.
            offset: Number of newest results to skip.

        Returns:
            A page of results ordered by completion time, descending.
        """
        ordered = sorted(
            self.iter_results(),
            key=lambda result: result.completed_at,
            reverse=True,
        )
        return ordered[offset:offset + limit]

    def get_stats(self, now: datetime | None = None) -> AssessmentStats:
        """Count results completed overall, in the last 7 and 30 days.

        Args:
            now: Reference time; defaults to the current UTC time.

        Returns:
            AssessmentStats for this store.
        """
        now = now or datetime.now(timezone.utc)
        week_start = now - timedelta(days=7)
        month_start = now - timedelta(days=30)

        stats = AssessmentStats()
        for result in self.iter_results():
            completed_at = result.completed_at
            if completed_at.tzinfo is None:
                completed_at = completed_at.replace(tzinfo=timezone.utc)
            stats.total += 1
            if completed_at >= week_start:
                stats.this_week += 1
            if completed_at >= month_start:
                stats.this_month += 1
        return stats
