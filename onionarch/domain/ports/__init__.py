"""Domain ports - interfaces implemented by infrastructure."""
from .dependency_reader_port import DependencyReaderPort
from .module_source_port import ModuleSourcePort

__all__ = ["DependencyReaderPort", "ModuleSourcePort"]
