"""Configuration loading from YAML or JSON files."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog
import yaml
from pydantic import ValidationError

from onionarch.config.defaults import CONFIG_FILE_NAMES, DEFAULT_CONFIG, LOG_LEVEL_ENV
from onionarch.config.schemas import AppConfig
from onionarch.config.utils.env_expansion import expand_env_vars
from onionarch.domain.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


class ConfigurationLoader:
    """
    Loads application configuration.

    Sources, in order of precedence:
    - environment overrides (ONIONARCH_LOG_LEVEL)
    - the given file, or the first of onionarch.yml / onionarch.yaml /
      onionarch.json found in the search directories (default: cwd)
    - built-in defaults
    """

    def __init__(self, *search_dirs: Union[str, Path]):
        self.search_dirs = [Path(d) for d in search_dirs] or [Path.cwd()]

    def find_config_file(self) -> Optional[Path]:
        for directory in self.search_dirs:
            for name in CONFIG_FILE_NAMES:
                candidate = directory / name
                if candidate.is_file():
                    return candidate
        return None

    def load(self, config_file: Optional[Union[str, Path]] = None) -> AppConfig:
        """Load and validate the application configuration."""
        path = Path(config_file) if config_file else self.find_config_file()
        if path is None:
            logger.debug("No configuration file found, using defaults", search_dirs=[str(d) for d in self.search_dirs])
            data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            data = self.read_file(path)

        data = expand_env_vars(data)
        self._apply_env_overrides(data)

        try:
            return AppConfig(**data)
        except ValidationError as e:
            missing = [".".join(str(p) for p in error["loc"]) for error in e.errors() if error["type"] == "missing"]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e

    def read_file(self, path: Path) -> Dict[str, Any]:
        """Read a YAML or JSON configuration file."""
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not parse configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration", path=str(path))
        return data

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any]) -> None:
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            data.setdefault("logging", {})["level"] = level
