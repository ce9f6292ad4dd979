# onionarch/domain/exceptions.py
from pathlib import Path
from typing import List, Optional, Union


class DomainException(Exception):
    """Base exception for all onionarch errors."""
    pass


class ArchitectureDefinitionError(DomainException):
    """Raised when an architecture definition is incomplete or inconsistent."""
    def __init__(self, message: str, layer: Optional[str] = None):
        super().__init__(message)
        self.layer = layer


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class SourceParseError(DomainException):
    """Raised when a source file cannot be parsed."""
    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(f"Could not parse {path}: {message}")
        self.path = str(path)
        self.reason = message


class ModuleNotFoundInRootError(DomainException):
    """Raised when the source root to scan does not exist."""
    def __init__(self, root: Union[str, Path]):
        super().__init__(f"Source root {root} does not exist or is not a directory")
        self.root = str(root)
