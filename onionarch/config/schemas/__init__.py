"""Configuration schemas."""
from .app_schema import AppConfig
from .architecture_schema import AdapterConfig, ArchitectureConfig, IgnoredDependencyConfig
from .logging_schema import LoggingConfig
from .scan_schema import ScanConfig

__all__ = [
    "AdapterConfig",
    "AppConfig",
    "ArchitectureConfig",
    "IgnoredDependencyConfig",
    "LoggingConfig",
    "ScanConfig",
]
