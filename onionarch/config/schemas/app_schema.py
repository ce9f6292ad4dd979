"""Main application configuration schema."""

from pydantic import BaseModel, Field

from .architecture_schema import ArchitectureConfig
from .logging_schema import LoggingConfig
from .scan_schema import ScanConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    architecture: ArchitectureConfig
    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
