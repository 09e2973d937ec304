"""
Data Manager for the DNA Spectrum Engine.

File-backed result storage: one JSON or YAML document per completed
assessment. All on-disk persistence logic is centralized here.
"""

import json
import logging
import uuid
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from dna_spectrum_engine.core.config_loader import Settings
from dna_spectrum_engine.core.exceptions import PersistenceError
from dna_spectrum_engine.core.interfaces import ResultStoreInterface
from dna_spectrum_engine.core.models import AssessmentResult

logger = logging.getLogger(__name__)

FILE_PREFIX = "assessment_"


class DataManager(ResultStoreInterface):
    """Manages on-disk storage of assessment results.

    Results are written as ``assessment_<id>.<format>`` under the
    configured storage directory. Writes are retried on transient
    ``OSError`` before surfacing as PersistenceError.

    Attributes:
        settings: The application settings.
        output_dir: Path to the results directory.
        format: Serialization format, "json" or "yaml".
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the data manager.

        Args:
            settings: The application settings.

        Raises:
            PersistenceError: If the results directory cannot be created.
        """
        self.settings = settings
        self.output_dir = Path(settings.storage.directory)
        self.format = settings.storage.format
        self._ensure_output_directory()

    @property
    def name(self) -> str:
        return "file_store"

    def _ensure_output_directory(self) -> None:
        """Create output directory if it doesn't exist."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("Output directory ensured: %s", self.output_dir)
        except OSError as e:
            raise PersistenceError(
                f"Failed to create output directory: {self.output_dir}",
                details={"error": str(e)}
            ) from e

    def _path_for(self, assessment_id: str) -> Path | None:
        """Return the file path for an id, or None if the id is not a UUID."""
        try:
            canonical = str(uuid.UUID(assessment_id))
        except (ValueError, AttributeError, TypeError):
            return None
        return self.output_dir / f"{FILE_PREFIX}{canonical}.{self.format}"

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, max=1),
        retry=retry_if_exception_type(OSError),
        reraise=True,
    )
    def _write(self, path: Path, data: dict[str, Any]) -> None:
        """Serialize data to path in the configured format."""
        with path.open("w", encoding="utf-8") as f:
            if self.format == "json":
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)

    def _read(self, path: Path) -> AssessmentResult:
        """Load and validate a single result file.

        Raises:
            PersistenceError: If the file is unreadable or malformed.
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
            return AssessmentResult.model_validate(data)
        except (OSError, json.JSONDecodeError, yaml.YAMLError, ValidationError) as e:
            raise PersistenceError(
                f"Failed to read stored result: {path}",
                details={"path": str(path), "error": str(e)}
            ) from e

    def save_result(self, result: AssessmentResult) -> str:
        """Save an assessment result to a file.

        Args:
            result: The result to save.

        Returns:
            The saved result id.

        Raises:
            PersistenceError: If the id is not a UUID or the file cannot
                be written.
        """
        output_path = self._path_for(result.id)
        if output_path is None:
            raise PersistenceError(
                "Result id is not a valid UUID",
                details={"assessment_id": result.id}
            )

        try:
            self._write(output_path, result.to_wire())
        except (OSError, TypeError, yaml.YAMLError) as e:
            raise PersistenceError(
                f"Failed to save result: {output_path}",
                details={"error": str(e)}
            ) from e

        logger.info("Result saved to: %s", output_path)
        return result.id

    def get_result(self, assessment_id: str) -> AssessmentResult | None:
        """Load a stored result by id.

        Args:
            assessment_id: The result id.

        Returns:
            The stored result, or None if no file exists for this id.

        Raises:
            PersistenceError: If the file exists but cannot be parsed.
        """
        path = self._path_for(assessment_id)
        if path is None or not path.exists():
            return None
        return self._read(path)

    def delete_result(self, assessment_id: str) -> bool:
        """Delete a stored result file.

        Returns:
            True if a file was removed.

        Raises:
            PersistenceError: If the file exists but cannot be removed.
        """
        path = self._path_for(assessment_id)
        if path is None or not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise PersistenceError(
                f"Failed to delete result: {path}",
                details={"error": str(e)}
            ) from e
        logger.info("Result deleted: %s", assessment_id)
        return True

    def iter_results(self) -> Iterator[AssessmentResult]:
        """Yield every readable result in the storage directory.

        Unreadable files are logged and skipped so that a single corrupt
        record does not break listings.
        """
        for path in sorted(self.output_dir.glob(f"{FILE_PREFIX}*.{self.format}")):
            try:
                yield self._read(path)
            except PersistenceError as e:
                logger.warning("Skipping unreadable result file: %s", e)
