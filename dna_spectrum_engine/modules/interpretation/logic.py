"""
Interpretation Selector for the DNA Spectrum Engine.

Maps a profile type to its canned narrative. The table is read once from
the bundled ``interpretations.yaml`` and validated into Interpretation
models.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml
from pydantic import ValidationError

from dna_spectrum_engine.core.exceptions import ConfigurationError
from dna_spectrum_engine.core.models import (
    ArchetypeScores,
    Interpretation,
    ProfileType,
)

logger = logging.getLogger(__name__)

INTERPRETATIONS_PATH = Path(__file__).parent / "interpretations.yaml"


def load_interpretations(path: Path = INTERPRETATIONS_PATH) -> Mapping[ProfileType, Interpretation]:
    """Read and validate an interpretation table.

    Args:
        path: YAML file keyed by ProfileType value.

    Returns:
        Read-only mapping with an entry for every ProfileType.

    Raises:
        ConfigurationError: If the file is unreadable, malformed, or lacks
            an entry for any profile type.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            "Failed to load interpretation content",
            details={"path": str(path), "error": str(e)}
        ) from e

    if not isinstance(raw, dict):
        raise ConfigurationError(
            "Interpretation content must be a mapping",
            details={"path": str(path)}
        )

    missing = [t.value for t in ProfileType if t.value not in raw]
    if missing:
        raise ConfigurationError(
            "Interpretation content is missing profile types",
            details={"path": str(path), "missing": missing}
        )

    table: dict[ProfileType, Interpretation] = {}
    for profile_type in ProfileType:
        try:
            table[profile_type] = Interpretation.model_validate(raw[profile_type.value])
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid interpretation for {profile_type.value}",
                details={"path": str(path), "error": str(e)}
            ) from e

    logger.debug("Loaded %d interpretations from %s", len(table), path)
    return MappingProxyType(table)


@lru_cache(maxsize=1)
def _bundled_interpretations() -> Mapping[ProfileType, Interpretation]:
    return load_interpretations()


class InterpretationSelector:
    """Selects the narrative for a profile type.

    Attributes:
        table: Interpretation per profile type. Defaults to the bundled
            content.
    """

    def __init__(self, table: Mapping[ProfileType, Interpretation] | None = None) -> None:
        self.table = table if table is not None else _bundled_interpretations()

    def interpret(
        self,
        profile_type: ProfileType,
        scores: ArchetypeScores | None = None,
    ) -> Interpretation:
        """Return the interpretation for ``profile_type``.

        Args:
            profile_type: Resolved classification outcome.
            scores: Accepted for future score-sensitive copy; not consulted.

        Returns:
            A deep copy of the table entry, safe for the caller to keep.
        """
        return self.table[ProfileType(profile_type)].model_copy(deep=True)
