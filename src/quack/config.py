"""Configuration management for quack using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from quack.faults import Severity

CONFIG_FILE_NAME = ".quack.json"


class OutputFormat(str, Enum):
    """Output format types."""
    TABLE = "table"
    JSON = "json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationSettings(BaseModel):
    """Settings threaded through every validation call.

    Instances are immutable, so concurrent validations with different
    settings never interfere with one another.
    """
    reify_refs: bool = Field(alias="reifyRefs", default=False)
    reject_severity: Severity = Field(alias="rejectSeverity", default=Severity.MUST)
    fetch_timeout: float = Field(alias="fetchTimeout", default=10.0)
    max_reference_depth: int = Field(alias="maxReferenceDepth", default=8)

    @field_validator("fetch_timeout")
    @classmethod
    def validate_fetch_timeout(cls, v):
        if v <= 0:
            raise ValueError("fetch_timeout must be > 0")
        return v

    @field_validator("max_reference_depth")
    @classmethod
    def validate_max_reference_depth(cls, v):
        if v < 1:
            raise ValueError("max_reference_depth must be >= 1")
        return v

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.TABLE
    severity: Severity = Severity.INFO

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class QuackConfig(BaseModel):
    """Complete quack configuration model."""
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> QuackConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .quack.json

    Returns:
        QuackConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return QuackConfig.model_validate(config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e
    else:
        return QuackConfig()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .quack.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None
