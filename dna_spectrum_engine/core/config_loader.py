"""
Configuration loader for the DNA Spectrum Engine.

This module provides Pydantic models for type-safe configuration loading
from YAML files and environment variables. Every section carries defaults,
so an empty ``Settings()`` is a valid configuration.
"""

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from dna_spectrum_engine.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DNA_SPECTRUM_CONFIG"
STORAGE_DIR_ENV_VAR = "DNA_SPECTRUM_STORAGE_DIR"
LOG_LEVEL_ENV_VAR = "DNA_SPECTRUM_LOG_LEVEL"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings.yaml"


class AssessmentConfig(BaseModel):
    """Presentation settings for the assessment.

    Attributes:
        title: Assessment title printed on reports.
    """

    title: str = Field(default="H2 DNA Spectrum", min_length=1)


class StorageConfig(BaseModel):
    """Configuration for result persistence.

    Attributes:
        enabled: Whether results are written to disk at all.
        directory: Path to the results directory.
        format: Serialization format (json, yaml).
    """

    enabled: bool = Field(default=True, description="Persist results to disk")
    directory: Path = Field(
        default=Path("./output/assessments"),
        description="Results directory path"
    )
    format: str = Field(default="json", pattern="^(json|yaml)$")


class CacheConfig(BaseModel):
    """Configuration for the in-memory result cache.

    Attributes:
        max_entries: Number of results kept before the oldest is evicted.
    """

    max_entries: int = Field(default=500, ge=1)


class ReportConfig(BaseModel):
    """Configuration for PDF and HTML reports.

    Attributes:
        directory: Where CLI-generated reports are written.
        plotly_js: Embed plotly.js in HTML reports ("inline") or link the CDN.
    """

    directory: Path = Field(default=Path("./output/reports"))
    plotly_js: str = Field(default="inline", pattern="^(inline|cdn)$")


class ServerConfig(BaseModel):
    """Configuration for the development HTTP server."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    debug: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Root logging level name.
    """

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown logging level: {v}")
        return level


class Settings(BaseModel):
    """Root configuration model for the DNA Spectrum Engine.

    Attributes:
        assessment: Assessment presentation settings.
        storage: Result persistence settings.
        cache: In-memory cache settings.
        report: Report rendering settings.
        server: Development server settings.
        logging: Logging settings.
    """

    assessment: AssessmentConfig = Field(default_factory=AssessmentConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _apply_env_overrides(raw_config: dict) -> dict:
    """Overlay supported environment variables onto raw YAML data."""
    storage_dir = os.getenv(STORAGE_DIR_ENV_VAR)
    if storage_dir:
        raw_config.setdefault("storage", {})["directory"] = storage_dir

    log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if log_level:
        raw_config.setdefault("logging", {})["level"] = log_level

    return raw_config


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate settings from YAML configuration file.

    This function loads environment variables from .env file, then loads
    and validates the settings.yaml configuration.

    Args:
        config_path: Optional path to settings.yaml. Falls back to the
            DNA_SPECTRUM_CONFIG variable, then to the bundled default.

    Returns:
        Validated Settings object.

    Raises:
        ConfigurationError: If the configuration file cannot be loaded
            or validation fails.
    """
    # Load environment variables
    load_dotenv()

    # Determine config path
    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            details={"path": str(config_path)}
        )

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Failed to parse YAML configuration",
            details={"path": str(config_path), "error": str(e)}
        ) from e

    if raw_config is None:
        raw_config = {}

    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Configuration root must be a mapping",
            details={"path": str(config_path)}
        )

    try:
        settings = Settings(**_apply_env_overrides(raw_config))
        logger.info("Configuration loaded successfully from %s", config_path)
        return settings
    except Exception as e:
        raise ConfigurationError(
            "Configuration validation failed",
            details={"path": str(config_path), "error": str(e)}
        ) from e
