"""
Core module for the DNA Spectrum Engine.

This module contains the infrastructure layer:
- models: Shared data contracts and enumerations
- interfaces: Abstract Base Classes (The Contract)
- config_loader: Pydantic models for configuration
- data_manager: File-backed result storage
- result_cache: In-memory result storage
- orchestrator: Validation and the assessment service layer
- exceptions: Custom exceptions

The orchestrator depends on the scoring modules and is imported from
``dna_spectrum_engine.core.orchestrator`` directly.
"""

from dna_spectrum_engine.core.config_loader import Settings, load_settings
from dna_spectrum_engine.core.data_manager import DataManager
from dna_spectrum_engine.core.exceptions import (
    AssessmentNotFoundError,
    AssessmentValidationError,
    ConfigurationError,
    DNASpectrumError,
    InvalidQuestionSetError,
    InvalidResponseCountError,
    InvalidScoreRangeError,
    PersistenceError,
    ReportGenerationError,
)
from dna_spectrum_engine.core.interfaces import ResultStoreInterface
from dna_spectrum_engine.core.result_cache import ResultCache

__all__ = [
    "Settings",
    "load_settings",
    "DataManager",
    "ResultStoreInterface",
    "ResultCache",
    "DNASpectrumError",
    "ConfigurationError",
    "AssessmentValidationError",
    "InvalidResponseCountError",
    "InvalidScoreRangeError",
    "InvalidQuestionSetError",
    "AssessmentNotFoundError",
    "PersistenceError",
    "ReportGenerationError",
]
