"""Configuration settings for penpoly."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class BooleanOp(str, Enum):
    """Boolean set operation."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"
    XOR = "xor"


class FillRule(str, Enum):
    """Rule deciding which regions of overlapping rings are filled."""

    EVEN_ODD = "even_odd"
    NON_ZERO = "non_zero"
    POSITIVE = "positive"
    NEGATIVE = "negative"


class FlattenConfig(BaseModel):
    """Configuration for curve flattening."""

    tolerance: float = Field(
        default=0.1,
        gt=0.0,
        description="Maximum distance between a curve and its straight-line approximation",
    )


class BooleanConfig(BaseModel):
    """Configuration for the boolean engine adapter.

    The engine works on integers, so coordinates are multiplied by
    scale_factor on the way in and divided by it on the way out. Larger
    factors keep more fractional precision.
    """

    scale_factor: float = Field(
        default=1000.0,
        gt=0.0,
        description="Multiplier applied to coordinates before integer clipping",
    )
    fill_rule: FillRule = Field(
        default=FillRule.EVEN_ODD,
        description="Fill rule for subject and clip rings",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PenpolySettings(BaseModel):
    """Main application settings."""

    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    boolean: BooleanConfig = Field(default_factory=BooleanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PenpolySettings:
    """Get default application settings."""
    return PenpolySettings()
