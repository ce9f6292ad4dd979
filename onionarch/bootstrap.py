"""Application bootstrap - wires configuration, logging and the check service."""

from typing import Optional, Sequence

from onionarch.application.service import ArchitectureCheckService
from onionarch.config import AppConfig, ConfigurationLoader
from onionarch.domain.architecture import OnionArchitecture
from onionarch.infrastructure.import_reader import AstDependencyReader
from onionarch.infrastructure.logging.logger import get_logger, setup_logging
from onionarch.infrastructure.scanner import FileSystemModuleSource


class Application:
    """Application context holding the loaded configuration and services."""

    def __init__(self, config: AppConfig, log_level: Optional[str] = None) -> None:
        self.config = config
        if log_level:
            self.config.logging.level = log_level.upper()
        setup_logging(self.config.logging)
        self.logger = get_logger(__name__)

        self.architecture: OnionArchitecture = self.config.architecture.build()
        self.check_service = ArchitectureCheckService(
            source=FileSystemModuleSource(exclude=self.config.scan.exclude),
            reader=AstDependencyReader(),
            fail_on_parse_error=self.config.scan.fail_on_parse_error,
            logger=get_logger("onionarch.application"),
        )
        self.logger.debug("Application initialized", rule=self.architecture.description())


def create_application(
    config_file: Optional[str] = None,
    search_dirs: Sequence[str] = (),
    log_level: Optional[str] = None,
) -> Application:
    """Load configuration and build the application."""
    config = ConfigurationLoader(*search_dirs).load(config_file)
    return Application(config, log_level=log_level)
