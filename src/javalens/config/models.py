"""
Configuration Data Models.

Defines the configuration schema using Pydantic for validation
and type safety.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from javalens.models.base import AnalysisLevel


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AnalysisConfig(BaseModel):
    """Configuration for loading analyzer output.

    Attributes:
        level: Requested analysis depth
        analysis_file: File name of the analyzer JSON inside its output directory
    """

    level: AnalysisLevel = Field(
        default=AnalysisLevel.SYMBOL_TABLE,
        description="Analysis level (name such as 'call graph' or 1-3)",
    )
    analysis_file: str = Field(
        default="analysis.json",
        description="Analyzer JSON file name",
    )

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> AnalysisLevel:
        """Accept level names and numbers as well as level values."""
        return AnalysisLevel.from_name(v)

    @field_validator("analysis_file")
    @classmethod
    def validate_analysis_file(cls, v: str) -> str:
        """Validate that the file name is not empty."""
        if not v.strip():
            raise ValueError("Analysis file name cannot be empty")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Level applied to the javalens loggers
        format: Log record format
        file: Optional log file path
    """

    level: LogLevel = Field(default=LogLevel.WARNING, description="Log level")
    format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format",
    )
    file: str | None = Field(default=None, description="Log file path")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class JavalensConfig(BaseModel):
    """Root configuration.

    Attributes:
        analysis: Analyzer output settings
        logging: Logging settings
        debug: Enable debug mode
    """

    analysis: AnalysisConfig = Field(
        default_factory=AnalysisConfig,
        description="Analysis settings",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
