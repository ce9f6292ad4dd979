"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DESTINATIONS = ("stdout", "file", "both", "none")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stdout", description="Where log records go: stdout, file, both or none")
    file_path: str = Field("logs/onionarch.log", description="Log file used for file destinations")
    max_size_mb: int = Field(10, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(_LEVELS)}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v not in _DESTINATIONS:
            raise ValueError(f"Log destination must be one of {', '.join(_DESTINATIONS)}")
        return v
