"""Domain port for reading module dependencies."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Collection, List

from onionarch.domain.dependency import Dependency


class DependencyReaderPort(ABC):
    """Domain port for extracting the dependencies of one module."""

    @abstractmethod
    def read(self, module: str, path: Path, known_modules: Collection[str]) -> List[Dependency]:
        """Return the dependencies declared by the module at path."""
