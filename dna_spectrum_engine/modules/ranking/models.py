"""
Pydantic models for the Archetype Ranker module.
"""

from pydantic import BaseModel, Field

from dna_spectrum_engine.core.models import ArchetypeKey


class RankedArchetypes(BaseModel):
    """Primary and secondary archetype bands.

    Attributes:
        primary: Animal names of the primary band (score >= 3.5, top 2).
        secondary: Animal names of the secondary band (3.0 <= score < 3.5, top 2).
        primary_keys: Archetypes behind ``primary``, in rank order.
        secondary_keys: Archetypes behind ``secondary``, in rank order.
    """

    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)
    primary_keys: list[ArchetypeKey] = Field(default_factory=list)
    secondary_keys: list[ArchetypeKey] = Field(default_factory=list)
