"""Layers of an onion architecture."""
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from onionarch.domain.pattern import PackagePattern


class LayerKind(str, Enum):
    """Kinds of layer, from the innermost ring outwards."""
    DOMAIN_MODEL = "domain_model"
    DOMAIN_SERVICE = "domain_service"
    APPLICATION = "application"
    ADAPTER = "adapter"

    @property
    def rank(self) -> int:
        """Distance from the core; a layer may only depend on lower ranks."""
        return _RANKS[self]


_RANKS = {
    LayerKind.DOMAIN_MODEL: 0,
    LayerKind.DOMAIN_SERVICE: 1,
    LayerKind.APPLICATION: 2,
    LayerKind.ADAPTER: 3,
}

DOMAIN_MODELS = "domain models"
DOMAIN_SERVICES = "domain services"
APPLICATION_SERVICES = "application services"


def adapter_layer_name(name: str) -> str:
    return f"{name} adapter"


class Layer(BaseModel):
    """A named group of packages sharing one position in the onion."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    kind: LayerKind
    patterns: Tuple[PackagePattern, ...]

    def contains(self, module: str) -> bool:
        """Check whether a module belongs to this layer."""
        return any(pattern.matches(module) for pattern in self.patterns)

    def describe(self) -> str:
        joined = ", ".join(f"'{pattern}'" for pattern in self.patterns)
        return f"{self.name} ({joined})"
