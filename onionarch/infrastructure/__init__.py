"""Infrastructure adapters - filesystem scanning, import parsing and logging."""
from .import_reader import AstDependencyReader
from .scanner import FileSystemModuleSource

__all__ = ["AstDependencyReader", "FileSystemModuleSource"]
