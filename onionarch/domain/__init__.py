"""Domain layer - layers, dependencies and the onion rules."""
from .architecture import OnionArchitecture
from .dependency import Dependency, DependencyKind
from .exceptions import (
    ArchitectureDefinitionError,
    ConfigurationError,
    DomainException,
    ModuleNotFoundInRootError,
    SourceParseError,
)
from .layer import Layer, LayerKind
from .pattern import PackagePattern
from .violation import EvaluationResult, Violation

__all__ = [
    "ArchitectureDefinitionError",
    "ConfigurationError",
    "Dependency",
    "DependencyKind",
    "DomainException",
    "EvaluationResult",
    "Layer",
    "LayerKind",
    "ModuleNotFoundInRootError",
    "OnionArchitecture",
    "PackagePattern",
    "SourceParseError",
    "Violation",
]
