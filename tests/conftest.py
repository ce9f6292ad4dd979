import textwrap
from pathlib import Path

import pytest

from onionarch.domain.architecture import OnionArchitecture

PROJECT_ROOT = Path(__file__).resolve().parent.parent
EXAMPLES_ROOT = PROJECT_ROOT / "examples"


@pytest.fixture
def examples_root() -> Path:
    """Source root holding the onion_example package."""
    return EXAMPLES_ROOT


@pytest.fixture
def make_tree(tmp_path):
    """Write a source tree from a mapping of relative path to source text."""
    def _make_tree(files):
        for relative, source in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        return tmp_path
    return _make_tree


@pytest.fixture
def onion():
    """Conventional onion architecture for the shop test package."""
    return (
        OnionArchitecture()
        .domain_models("..domain.model..")
        .domain_services("..domain.service..")
        .application_services("..application..")
        .adapter("cli", "..adapter.cli..")
        .adapter("persistence", "..adapter.persistence..")
        .adapter("rest", "..adapter.rest..")
    )


@pytest.fixture
def example_architecture():
    """Architecture of examples/onion_example."""
    return (
        OnionArchitecture()
        .domain_models("onion_example.domain.model")
        .domain_services("onion_example.domain.service")
        .application_services("onion_example.application")
        .adapter("cli", "onion_example.adapter.cli")
        .adapter("persistence", "onion_example.adapter.persistence")
        .adapter("rest", "onion_example.adapter.rest")
    )
