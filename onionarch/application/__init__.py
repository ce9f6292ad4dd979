"""Application layer - use cases built on the domain rules."""
from .dto import CheckReport, CollectedSources, SkippedModule
from .service import ArchitectureCheckService

__all__ = ["ArchitectureCheckService", "CheckReport", "CollectedSources", "SkippedModule"]
