"""Application service orchestrating architecture checks."""
from pathlib import Path
from typing import Dict, List, Optional, Union

import structlog

from onionarch.application.dto import CheckReport, CollectedSources, SkippedModule
from onionarch.domain.architecture import OnionArchitecture
from onionarch.domain.dependency import Dependency
from onionarch.domain.exceptions import SourceParseError
from onionarch.domain.ports import DependencyReaderPort, ModuleSourcePort


class ArchitectureCheckService:
    """
    Runs onion architecture checks over a source tree.

    Module discovery and dependency extraction are delegated to the injected
    ports, so the service itself never touches the filesystem.
    """

    def __init__(
        self,
        source: ModuleSourcePort,
        reader: DependencyReaderPort,
        fail_on_parse_error: bool = False,
        logger=None,
    ):
        self._source = source
        self._reader = reader
        self._fail_on_parse_error = fail_on_parse_error
        self._logger = logger or structlog.get_logger(__name__)

    def collect(self, root: Union[str, Path]) -> CollectedSources:
        """Discover modules below root and read their dependencies."""
        root = Path(root)
        modules = self._source.discover(root)
        self._logger.debug("Discovered modules", root=str(root), count=len(modules))

        known = set(modules)
        dependencies: List[Dependency] = []
        skipped: List[SkippedModule] = []
        for module, path in sorted(modules.items()):
            try:
                dependencies.extend(self._reader.read(module, path, known))
            except SourceParseError as e:
                if self._fail_on_parse_error:
                    raise
                self._logger.warning("Skipping module", module=module, path=str(path), reason=e.reason)
                skipped.append(SkippedModule(module=module, path=str(path), reason=e.reason))

        return CollectedSources(modules=sorted(known), dependencies=dependencies, skipped_modules=skipped)

    def check(self, root: Union[str, Path], architecture: OnionArchitecture) -> CheckReport:
        """Check every module below root against the architecture."""
        architecture.validate()
        sources = self.collect(root)
        evaluation = architecture.check(sources.modules, sources.dependencies)

        report = CheckReport.from_evaluation(
            rule=architecture.description(),
            root=str(root),
            modules_scanned=len(sources.modules),
            dependencies_analysed=len(sources.dependencies),
            evaluation=evaluation,
            skipped_modules=sources.skipped_modules,
        )

        for violation in report.violations:
            self._logger.info("Architecture violation", message=violation.message)
        self._logger.info(
            "Architecture check finished",
            passed=report.passed,
            violations=len(report.violations),
            modules=report.modules_scanned,
        )
        return report

    def assign_layers(self, root: Union[str, Path], architecture: OnionArchitecture) -> Dict[str, Optional[str]]:
        """Map each module below root to the name of its layer."""
        architecture.validate()
        layers = architecture.layers
        assignment: Dict[str, Optional[str]] = {}
        for module in sorted(self._source.discover(Path(root))):
            matches = architecture.matching_layers(module, layers)
            assignment[module] = ", ".join(layer.name for layer in matches) if matches else None
        return assignment

    def list_dependencies(self, root: Union[str, Path], internal_only: bool = True) -> List[Dependency]:
        """List dependencies below root, optionally only those between scanned modules."""
        sources = self.collect(root)
        known = set(sources.modules)
        dependencies = sources.dependencies
        if internal_only:
            dependencies = [dependency for dependency in dependencies if dependency.target in known]
        return sorted(dependencies, key=Dependency.sort_key)
