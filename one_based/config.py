"""
Configuration management for one-based.

Handles loading and validating the library's ambient settings
(currently logging). The index types themselves have nothing to configure.

Sources, lowest precedence first:
1. Dataclass defaults
2. <project_root>/.one-based/config.yaml (supports ${VAR} values)
3. Environment variables ONE_BASED_LOG_LEVEL, ONE_BASED_LOG_FILE,
   ONE_BASED_LOG_CONSOLE, optionally loaded from <project_root>/.env
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from .utils.logger_setup import LoggerManager, get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console: bool = False

    def __post_init__(self):
        """Apply environment overrides."""
        self.level = os.getenv("ONE_BASED_LOG_LEVEL", self.level)

        log_file_env = os.getenv("ONE_BASED_LOG_FILE")
        if log_file_env:  # Only set if env var is not empty
            self.log_file = log_file_env

        console_env = os.getenv("ONE_BASED_LOG_CONSOLE")
        if console_env:
            self.console = console_env.strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    """Main configuration class."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary."""
        return cls(
            logging=LoggingConfig(**(data.get('logging') or {}))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            'logging': asdict(self.logging)
        }


class ConfigManager:
    """Manages configuration loading, validation, and resolution."""

    DEFAULT_CONFIG_DIR = ".one-based"
    DEFAULT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize ConfigManager.

        Args:
            project_root: Root directory of the project. If None, uses current directory.
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_dir = self.project_root / self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.DEFAULT_CONFIG_FILE
        self.env_file = self.project_root / ".env"

    def load(self) -> Config:
        """
        Load configuration from file or create default.

        A .env file in the project root is loaded first, without overriding
        variables that are already set.

        Returns:
            Loaded or default configuration
        """
        if self.env_file.exists():
            load_dotenv(self.env_file, override=False)

        if self.config_file.exists():
            return self._load_from_file()
        return Config()

    def _load_from_file(self) -> Config:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            if not isinstance(data, dict):
                raise TypeError(f"expected a mapping, got {type(data).__name__}")

            # Resolve environment variables
            data = self._resolve_env_vars(data)

            return Config.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.warning(f"Error loading config file: {e}")
            logger.info("Using default configuration.")
            return Config()

    def _resolve_env_vars(self, data: Any) -> Any:
        """
        Recursively resolve environment variables in configuration.

        Supports ${VAR_NAME} syntax.
        """
        if isinstance(data, dict):
            return {k: self._resolve_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):
            # Replace ${VAR_NAME} with environment variable value
            if data.startswith('${') and data.endswith('}'):
                var_name = data[2:-1]
                return os.environ.get(var_name, data)
        return data

    def validate(self, config: Config) -> List[str]:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if str(config.logging.level).upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {config.logging.level}")

        if not isinstance(config.logging.console, bool):
            errors.append(f"Invalid console flag: {config.logging.console!r}")

        log_file = config.logging.log_file
        if log_file is not None and not isinstance(log_file, str):
            errors.append(f"Invalid log file: {log_file!r}")

        return errors


def configure(project_root: Optional[str] = None) -> Config:
    """
    Load configuration for a project and apply it.

    Invalid settings are reported as warnings; logging then falls back to
    its defaults for those settings. A log file that cannot be opened is
    reported the same way and logging runs with its defaults.

    Args:
        project_root: Directory holding .one-based/ and .env. If None, uses
            current directory.

    Returns:
        Config: The configuration that was applied
    """
    manager = ConfigManager(project_root)
    config = manager.load()

    for error in manager.validate(config):
        logger.warning(error)

    level = str(config.logging.level)
    if level.upper() not in VALID_LOG_LEVELS:
        level = "WARNING"
    log_file = config.logging.log_file
    if not isinstance(log_file, str):
        log_file = None

    try:
        LoggerManager.setup_logging(
            log_file=log_file,
            level=level,
            console=config.logging.console is True,
            force=True,
        )
    except (OSError, TypeError) as e:
        LoggerManager.setup_logging(force=True)
        logger.warning(f"Could not apply logging configuration: {e}")
        logger.info("Using default logging configuration.")

    logger.debug(f"Configuration applied from {manager.project_root}")
    return config
