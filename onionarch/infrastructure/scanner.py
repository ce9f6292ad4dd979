"""Filesystem module discovery."""
import fnmatch
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import structlog

from onionarch.domain.exceptions import ModuleNotFoundInRootError
from onionarch.domain.ports import ModuleSourcePort

logger = structlog.get_logger(__name__)

_SKIPPED_DIRECTORIES = {"__pycache__"}


class FileSystemModuleSource(ModuleSourcePort):
    """Finds Python modules below a root directory.

    Module names are the dotted path relative to the root, so
    ``shop/domain/model.py`` becomes ``shop.domain.model`` and
    ``shop/__init__.py`` becomes ``shop``.
    """

    def __init__(self, exclude: Optional[Iterable[str]] = None):
        self.exclude: List[str] = list(exclude or [])

    def discover(self, root: Path) -> Dict[str, Path]:
        root = Path(root)
        if not root.is_dir():
            raise ModuleNotFoundInRootError(root)

        modules: Dict[str, Path] = {}
        for path in sorted(root.rglob("*.py")):
            relative = path.relative_to(root)
            if self._is_skipped(relative):
                continue
            module = module_name(relative)
            if module:
                modules[module] = path

        logger.debug("Scanned source root", root=str(root), modules=len(modules))
        return modules

    def _is_skipped(self, relative: Path) -> bool:
        for part in relative.parts[:-1]:
            if part.startswith(".") or part in _SKIPPED_DIRECTORIES:
                return True
        posix = relative.as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self.exclude)


def module_name(relative: Path) -> Optional[str]:
    """Convert a path relative to the root into a dotted module name."""
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return ".".join(parts)
