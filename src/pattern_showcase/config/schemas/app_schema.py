"""Main application configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

DEFAULT_DEMO_ORDER = ["observer", "strategy", "singleton", "factory", "adapter", "decorator"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stderr", description="Log destination: stderr, file or both")
    file_path: str = Field("logs/pattern_showcase.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["stderr", "file", "both"]
        if v.lower() not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v.lower()


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo_order: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DEMO_ORDER),
        description="Order in which 'run all' executes the demos",
    )

    @field_validator("demo_order")
    @classmethod
    def validate_demo_order(cls, v: List[str]) -> List[str]:
        """Reject empty or duplicated demo orderings."""
        if not v:
            raise ValueError("demo_order must name at least one demo")
        if len(set(v)) != len(v):
            raise ValueError("demo_order must not contain duplicates")
        return v
