"""Architecture definition schema."""
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from onionarch.domain.architecture import OnionArchitecture


class AdapterConfig(BaseModel):
    """A named adapter layer."""

    name: str
    packages: List[str]

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Adapter must list at least one package pattern")
        return v


class IgnoredDependencyConfig(BaseModel):
    """A dependency excluded from the check."""

    origin: str
    target: str


class ArchitectureConfig(BaseModel):
    """Onion architecture definition."""

    domain_models: List[str] = Field(default_factory=list)
    domain_services: List[str] = Field(default_factory=list)
    application_services: List[str] = Field(default_factory=list)
    adapters: List[AdapterConfig] = Field(default_factory=list)
    optional_layers: bool = Field(False, description="Tolerate layers that contain no module")
    ignore_type_checking_imports: bool = Field(False, description="Skip imports under TYPE_CHECKING")
    ignored_dependencies: List[IgnoredDependencyConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def ensure_layers(self) -> "ArchitectureConfig":
        """Ensure at least one layer is defined."""
        if not (self.domain_models or self.domain_services or self.application_services or self.adapters):
            raise ValueError("Architecture must define at least one layer")
        names = [adapter.name for adapter in self.adapters]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Adapter names must be unique: {', '.join(duplicates)}")
        return self

    def build(self) -> OnionArchitecture:
        """Create the domain architecture described by this configuration."""
        architecture = OnionArchitecture()
        if self.domain_models:
            architecture.domain_models(*self.domain_models)
        if self.domain_services:
            architecture.domain_services(*self.domain_services)
        if self.application_services:
            architecture.application_services(*self.application_services)
        for adapter in self.adapters:
            architecture.adapter(adapter.name, *adapter.packages)
        for ignored in self.ignored_dependencies:
            architecture.ignore_dependency(ignored.origin, ignored.target)
        return (
            architecture
            .with_optional_layers(self.optional_layers)
            .ignore_type_checking_imports(self.ignore_type_checking_imports)
        )
