"""Configuration package."""
from .loader import ConfigurationLoader
from .schemas import (
    AdapterConfig,
    AppConfig,
    ArchitectureConfig,
    IgnoredDependencyConfig,
    LoggingConfig,
    ScanConfig,
)

__all__ = [
    "AdapterConfig",
    "AppConfig",
    "ArchitectureConfig",
    "ConfigurationLoader",
    "IgnoredDependencyConfig",
    "LoggingConfig",
    "ScanConfig",
]
