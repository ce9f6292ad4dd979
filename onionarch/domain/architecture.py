"""Onion architecture definition and rule evaluation.

Layers are arranged in rings around the domain core::

    adapters -> application services -> domain services -> domain models

A module may depend on modules of its own layer and on any layer closer to
the core. Adapters may not depend on each other. Dependencies from or to
modules outside every layer are not checked.
"""
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from onionarch.domain.dependency import Dependency
from onionarch.domain.exceptions import ArchitectureDefinitionError
from onionarch.domain.layer import (
    APPLICATION_SERVICES,
    DOMAIN_MODELS,
    DOMAIN_SERVICES,
    Layer,
    LayerKind,
    adapter_layer_name,
)
from onionarch.domain.pattern import PackagePattern, patterns_from
from onionarch.domain.violation import EvaluationResult, Violation

logger = structlog.get_logger(__name__)


class OnionArchitecture:
    """Fluent definition of an onion architecture.

    Example::

        architecture = (
            OnionArchitecture()
            .domain_models("..domain.model..")
            .domain_services("..domain.service..")
            .application_services("..application..")
            .adapter("cli", "..adapter.cli..")
            .adapter("persistence", "..adapter.persistence..")
            .adapter("rest", "..adapter.rest..")
        )
        result = architecture.check(modules, dependencies)
    """

    def __init__(self):
        # None until declared; a declared layer without patterns fails validation
        self._domain_models: Optional[Tuple[PackagePattern, ...]] = None
        self._domain_services: Optional[Tuple[PackagePattern, ...]] = None
        self._application_services: Optional[Tuple[PackagePattern, ...]] = None
        self._adapters: Dict[str, Tuple[PackagePattern, ...]] = {}
        self._optional_layers = False
        self._ignore_type_checking = False
        self._ignored: List[Tuple[PackagePattern, PackagePattern]] = []

    def domain_models(self, *patterns: str) -> "OnionArchitecture":
        self._domain_models = patterns_from(patterns)
        return self

    def domain_services(self, *patterns: str) -> "OnionArchitecture":
        self._domain_services = patterns_from(patterns)
        return self

    def application_services(self, *patterns: str) -> "OnionArchitecture":
        self._application_services = patterns_from(patterns)
        return self

    def adapter(self, name: str, *patterns: str) -> "OnionArchitecture":
        """Add a named adapter layer."""
        if not name or not name.strip():
            raise ArchitectureDefinitionError("Adapter name must not be empty")
        if name in self._adapters:
            raise ArchitectureDefinitionError(f"Adapter '{name}' is defined twice", layer=name)
        self._adapters[name] = patterns_from(patterns)
        return self

    def with_optional_layers(self, optional: bool = True) -> "OnionArchitecture":
        """Allow layers that contain no module."""
        self._optional_layers = optional
        return self

    def ignore_type_checking_imports(self, ignore: bool = True) -> "OnionArchitecture":
        """Skip imports guarded by ``if TYPE_CHECKING:``."""
        self._ignore_type_checking = ignore
        return self

    def ignore_dependency(self, origin: str, target: str) -> "OnionArchitecture":
        """Skip dependencies from modules matching origin to modules matching target."""
        self._ignored.append((PackagePattern(origin), PackagePattern(target)))
        return self

    @property
    def optional_layers(self) -> bool:
        return self._optional_layers

    @property
    def layers(self) -> List[Layer]:
        """Defined layers, innermost first."""
        layers = []
        if self._domain_models is not None:
            layers.append(Layer(name=DOMAIN_MODELS, kind=LayerKind.DOMAIN_MODEL, patterns=self._domain_models))
        if self._domain_services is not None:
            layers.append(Layer(name=DOMAIN_SERVICES, kind=LayerKind.DOMAIN_SERVICE, patterns=self._domain_services))
        if self._application_services is not None:
            layers.append(
                Layer(name=APPLICATION_SERVICES, kind=LayerKind.APPLICATION, patterns=self._application_services)
            )
        for name, patterns in self._adapters.items():
            layers.append(Layer(name=adapter_layer_name(name), kind=LayerKind.ADAPTER, patterns=patterns))
        return layers

    def validate(self) -> None:
        """Ensure the definition can be evaluated."""
        _validate_layers(self.layers)

    def matching_layers(self, module: str, layers: Optional[List[Layer]] = None) -> List[Layer]:
        layers = self.layers if layers is None else layers
        return [layer for layer in layers if layer.contains(module)]

    def layer_of(self, module: str, layers: Optional[List[Layer]] = None) -> Optional[Layer]:
        """Return the single layer a module belongs to, if any."""
        matches = self.matching_layers(module, layers)
        if len(matches) == 1:
            return matches[0]
        return None

    @staticmethod
    def is_allowed(origin: Layer, target: Layer) -> bool:
        """Check whether origin may depend on target."""
        if origin.name == target.name:
            return True
        return target.kind.rank < origin.kind.rank

    def is_ignored(self, dependency: Dependency) -> bool:
        if dependency.type_checking and self._ignore_type_checking:
            return True
        return any(
            origin.matches(dependency.origin) and target.matches(dependency.target)
            for origin, target in self._ignored
        )

    def check(self, modules: Iterable[str], dependencies: Iterable[Dependency]) -> EvaluationResult:
        """Evaluate dependencies of the given modules against the onion rules."""
        layers = self.layers
        _validate_layers(layers)

        populated = {layer.name: 0 for layer in layers}
        ambiguous: Dict[str, List[str]] = {}
        for module in modules:
            matches = [layer for layer in layers if layer.contains(module)]
            for layer in matches:
                populated[layer.name] += 1
            if len(matches) > 1:
                ambiguous[module] = [layer.name for layer in matches]

        empty_layers = []
        if not self._optional_layers:
            empty_layers = [name for name, count in populated.items() if count == 0]

        violations = []
        for dependency in dependencies:
            if dependency.origin in ambiguous or self.is_ignored(dependency):
                continue
            origin_layer = self.layer_of(dependency.origin, layers)
            target_layer = self.layer_of(dependency.target, layers)
            if origin_layer is None or target_layer is None:
                continue
            if not self.is_allowed(origin_layer, target_layer):
                violations.append(Violation.from_dependency(dependency, origin_layer.name, target_layer.name))

        violations.sort(key=Violation.sort_key)
        logger.debug(
            "Evaluated onion architecture",
            violations=len(violations),
            ambiguous=len(ambiguous),
            empty_layers=empty_layers,
        )
        return EvaluationResult(violations=violations, ambiguous_modules=ambiguous, empty_layers=empty_layers)

    def description(self) -> str:
        """Human readable summary of the rule."""
        layers = "; ".join(layer.describe() for layer in self.layers)
        return f"Onion architecture consisting of {layers}"

    def __str__(self) -> str:
        return self.description()


def _validate_layers(layers: List[Layer]) -> None:
    if not layers:
        raise ArchitectureDefinitionError("Onion architecture defines no layers")
    for layer in layers:
        if not layer.patterns:
            raise ArchitectureDefinitionError(f"Layer '{layer.name}' has no package patterns", layer=layer.name)
