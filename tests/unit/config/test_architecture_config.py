"""Tests for the architecture configuration schema."""
import pytest
from pydantic import ValidationError

from onionarch.config.schemas import ArchitectureConfig, LoggingConfig
from onionarch.domain.exceptions import ArchitectureDefinitionError


class TestArchitectureConfig:
    """Test architecture configuration."""

    def test_build_architecture(self):
        """Test building the domain architecture from configuration."""
        config = ArchitectureConfig(
            domain_models=["..domain.model.."],
            domain_services=["..domain.service.."],
            application_services=["..application.."],
            adapters=[{"name": "cli", "packages": ["..cli.."]}],
            optional_layers=True,
            ignore_type_checking_imports=True,
            ignored_dependencies=[{"origin": "..cli..", "target": "..domain.service.internal"}],
        )
        architecture = config.build()

        assert [layer.name for layer in architecture.layers] == [
            "domain models",
            "domain services",
            "application services",
            "cli adapter",
        ]
        assert architecture.optional_layers is True

    def test_requires_a_layer(self):
        """Test that an empty architecture is rejected."""
        with pytest.raises(ValidationError):
            ArchitectureConfig()

    def test_adapter_requires_packages(self):
        """Test that adapters need at least one package."""
        with pytest.raises(ValidationError):
            ArchitectureConfig(adapters=[{"name": "cli", "packages": []}])

    def test_duplicate_adapter_names(self):
        """Test that duplicated adapter names are rejected."""
        with pytest.raises(ValidationError) as exc:
            ArchitectureConfig(
                adapters=[
                    {"name": "cli", "packages": ["..cli.."]},
                    {"name": "cli", "packages": ["..console.."]},
                ]
            )
        assert "cli" in str(exc.value)

    def test_invalid_pattern_reported_on_build(self):
        """Test that malformed patterns fail when the architecture is built."""
        config = ArchitectureConfig(domain_models=["a....b"])
        with pytest.raises(ArchitectureDefinitionError):
            config.build()


class TestLoggingConfig:
    """Test logging configuration."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.destination == "stdout"

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")
        with pytest.raises(ValidationError):
            LoggingConfig(destination="syslog")
