"""Configuration settings for Identitrace."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class BackgroundMode(str, Enum):
    """Complementary background colour scheme derived from the foreground."""

    BASIC = "basic"
    SPLIT1 = "split1"
    SPLIT2 = "split2"


class IdenticonConfig(BaseModel):
    """Configuration for identicon generation."""

    size: int = Field(
        default=5,
        ge=4,
        le=10,
        description="Number of cells per grid side",
    )
    background: BackgroundMode | str | None = Field(
        default=None,
        description="Background colour: None (transparent), a hex colour or a complementary mode",
    )
    opacity: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fill and stroke opacity of every layer",
    )
    padding: int = Field(
        default=0,
        ge=0,
        description="Blank margin around the grid, in SVG units",
    )
    scale: int = Field(
        default=20,
        gt=0,
        description="Side length of one grid cell in SVG units",
    )


class GeometryConfig(BaseModel):
    """Configuration for outline geometry."""

    split_pinch_vertices: bool = Field(
        default=True,
        description="Resolve diagonal cell contacts inside a component by splitting loops there",
    )
    merge_collinear: bool = Field(
        default=True,
        description="Drop path vertices where the outline continues straight",
    )


class ProcessingConfig(BaseModel):
    """Configuration for layer processing."""

    parallel: bool = Field(
        default=False,
        description="Outline components in worker processes",
    )
    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
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


class IdentitraceSettings(BaseModel):
    """Main application settings."""

    identicon: IdenticonConfig = Field(default_factory=IdenticonConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> IdentitraceSettings:
    """Get default application settings."""
    return IdentitraceSettings()
