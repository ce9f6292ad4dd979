"""Findings produced when checking an architecture."""
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from onionarch.domain.dependency import Dependency


class Violation(BaseModel):
    """A dependency that points in a forbidden direction."""
    model_config = ConfigDict(frozen=True)

    origin: str
    target: str
    line: int
    origin_layer: str
    target_layer: str

    @classmethod
    def from_dependency(cls, dependency: Dependency, origin_layer: str, target_layer: str) -> "Violation":
        return cls(
            origin=dependency.origin,
            target=dependency.target,
            line=dependency.line,
            origin_layer=origin_layer,
            target_layer=target_layer,
        )

    @property
    def message(self) -> str:
        return (
            f"Module {self.origin} (line {self.line}) depends on {self.target}: "
            f"layer '{self.origin_layer}' may not depend on layer '{self.target_layer}'"
        )

    def sort_key(self):
        return (self.origin, self.line, self.target)


class EvaluationResult(BaseModel):
    """Outcome of evaluating dependencies against an architecture."""

    violations: List[Violation] = Field(default_factory=list)
    ambiguous_modules: Dict[str, List[str]] = Field(default_factory=dict)
    empty_layers: List[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not (self.violations or self.ambiguous_modules or self.empty_layers)
