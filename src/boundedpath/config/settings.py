"""Configuration settings for BoundedPath."""

from pathlib import Path

from pydantic import BaseModel, Field

from boundedpath.domain import Space


class SamplingConfig(BaseModel):
    """Host policy for boundary sample counts.

    The triangulator itself accepts boundaries down to 2 points; this floor
    is enforced when boundaries are loaded from files.
    """

    min_samples: int = Field(
        default=10,
        ge=2,
        description="Minimum number of samples per boundary",
    )
    close_open_boundaries: bool = Field(
        default=True,
        description="Append the first sample to boundaries whose ends do not coincide",
    )


class SmoothingConfig(BaseModel):
    """Configuration for centerline smoothing.

    The kernel weights are fixed; only scheduling and pass count are tunable.
    """

    enabled: bool = Field(
        default=True,
        description="Smooth the raw centerline",
    )
    batch_size: int = Field(
        default=32,
        ge=1,
        description="Parallel-for batch hint for each smoothing pass",
    )
    min_passes: int = Field(
        default=2,
        ge=1,
        description="Minimum number of smoothing passes",
    )
    points_per_pass: int = Field(
        default=100,
        ge=1,
        description="Centerline samples per additional smoothing pass",
    )


class ConversionConfig(BaseModel):
    """Configuration for centerline space conversion."""

    batch_size: int = Field(
        default=64,
        ge=1,
        description="Parallel-for batch hint for space conversion",
    )
    space: Space = Field(
        default=Space.LOCAL,
        description="Coordinate space of written centerlines",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes for multi-file runs (None = auto)",
    )
    thread_workers: int | None = Field(
        default=None,
        description="Threads for per-element parallel-for work (None = auto, 1 = inline)",
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


class BoundedPathSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BoundedPathSettings:
    """Get default application settings."""
    return BoundedPathSettings()
