"""Dependencies between modules."""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class DependencyKind(str, Enum):
    """How a dependency was expressed in source."""
    IMPORT = "import"
    IMPORT_FROM = "import_from"


class Dependency(BaseModel):
    """A single reference from one module to another."""
    model_config = ConfigDict(frozen=True)

    origin: str
    target: str
    line: int
    kind: DependencyKind = DependencyKind.IMPORT
    type_checking: bool = False

    def sort_key(self):
        return (self.origin, self.line, self.target)

    def __str__(self) -> str:
        return f"{self.origin}:{self.line} -> {self.target}"
