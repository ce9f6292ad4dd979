"""Domain port for discovering modules."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict


class ModuleSourcePort(ABC):
    """Domain port for locating the modules below a source root."""

    @abstractmethod
    def discover(self, root: Path) -> Dict[str, Path]:
        """Map dotted module names to their source files."""
