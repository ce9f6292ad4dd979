"""Data transfer objects returned by the check service."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from onionarch.domain.dependency import Dependency
from onionarch.domain.violation import EvaluationResult, Violation


class SkippedModule(BaseModel):
    """A module that could not be analysed."""

    module: str
    path: str
    reason: str


class CheckReport(BaseModel):
    """Result of checking a source tree against an onion architecture."""

    rule: str
    root: str
    modules_scanned: int = 0
    dependencies_analysed: int = 0
    violations: List[Violation] = Field(default_factory=list)
    ambiguous_modules: Dict[str, List[str]] = Field(default_factory=dict)
    empty_layers: List[str] = Field(default_factory=list)
    skipped_modules: List[SkippedModule] = Field(default_factory=list)

    @classmethod
    def from_evaluation(
        cls,
        rule: str,
        root: str,
        modules_scanned: int,
        dependencies_analysed: int,
        evaluation: EvaluationResult,
        skipped_modules: Optional[List[SkippedModule]] = None,
    ) -> "CheckReport":
        return cls(
            rule=rule,
            root=root,
            modules_scanned=modules_scanned,
            dependencies_analysed=dependencies_analysed,
            violations=evaluation.violations,
            ambiguous_modules=evaluation.ambiguous_modules,
            empty_layers=evaluation.empty_layers,
            skipped_modules=skipped_modules or [],
        )

    @property
    def passed(self) -> bool:
        return not (self.violations or self.ambiguous_modules or self.empty_layers)

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json")
        data["passed"] = self.passed
        data["violations"] = [
            dict(item, message=violation.message)
            for item, violation in zip(data["violations"], self.violations)
        ]
        return data


class CollectedSources(BaseModel):
    """Modules and dependencies gathered from a source root."""

    modules: List[str] = Field(default_factory=list)
    dependencies: List[Dependency] = Field(default_factory=list)
    skipped_modules: List[SkippedModule] = Field(default_factory=list)
