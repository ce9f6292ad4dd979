"""Default configuration used when no configuration file is found."""
from typing import Any, Dict

CONFIG_FILE_NAMES = ("onionarch.yml", "onionarch.yaml", "onionarch.json")

LOG_LEVEL_ENV = "ONIONARCH_LOG_LEVEL"

# Build output at the top of the source root
DEFAULT_EXCLUDES = ("build/*", "dist/*")

# Conventional onion layout: <root>.domain.model, <root>.domain.service,
# <root>.application and one package per adapter below <root>.adapter
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0",
    "architecture": {
        "domain_models": ["..domain.model.."],
        "domain_services": ["..domain.service.."],
        "application_services": ["..application.."],
        "adapters": [
            {"name": "cli", "packages": ["..adapter.cli.."]},
            {"name": "persistence", "packages": ["..adapter.persistence.."]},
            {"name": "rest", "packages": ["..adapter.rest.."]},
        ],
        "optional_layers": True,
    },
    "scan": {"exclude": list(DEFAULT_EXCLUDES), "fail_on_parse_error": False},
    "logging": {"level": "WARNING", "destination": "stdout"},
}
