"""Configuration settings for svg2pts."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SamplingConfig(BaseModel):
    """Configuration for curve flattening and point spacing.

    When no accuracy is given, it is derived from the target distance so that
    flattening error stays well below the resampling step.
    """

    distance: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Target distance between consecutive points (0 = no normalization)",
    )
    accuracy: float | None = Field(
        default=None,
        gt=0.0,
        description="Curve flattening tolerance (None = derived from distance)",
    )
    points: int | None = Field(
        default=None,
        ge=1,
        description="Target total number of points (derives the distance)",
    )
    default_accuracy: float = Field(
        default=0.1,
        gt=0.0,
        description="Flattening tolerance used when distance is 0",
    )
    accuracy_divisor: float = Field(
        default=25.0,
        gt=0.0,
        description="Derived accuracy is distance / accuracy_divisor",
    )
    accuracy_ceiling: float = Field(
        default=0.05,
        gt=0.0,
        description="Upper bound for derived accuracy",
    )

    @model_validator(mode="after")
    def _check_exclusive_targets(self) -> "SamplingConfig":
        if self.points is not None and self.distance > 0:
            raise ValueError("distance and points targets are mutually exclusive")
        return self

    def accuracy_for(self, distance: float) -> float:
        """Get the flattening tolerance to use with a target distance.

        Args:
            distance: Effective target distance (0 = no normalization)

        Returns:
            The explicit accuracy if one was set, otherwise
            min(distance / accuracy_divisor, accuracy_ceiling) for positive
            distances and default_accuracy for zero
        """
        if self.accuracy is not None:
            return self.accuracy
        if distance > 0:
            return min(distance / self.accuracy_divisor, self.accuracy_ceiling)
        return self.default_accuracy


class OutputConfig(BaseModel):
    """Configuration for point output."""

    flip_y: bool = Field(
        default=True,
        description="Mirror y about the document height so output is y-up",
    )


class ProcessingConfig(BaseModel):
    """Configuration for path processing."""

    max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker processes for path sampling (1 = in-process)",
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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r} (use {'|'.join(LOG_LEVELS)})")
        return level


class Svg2PtsSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Svg2PtsSettings:
    """Get default application settings."""
    return Svg2PtsSettings()
