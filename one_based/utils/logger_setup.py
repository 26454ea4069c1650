"""
Centralized logging configuration for one-based.

Provides a simple, consistent logging interface across all modules. As a
library, nothing is emitted until an application configures handlers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = 'one_based'


class LoggerManager:
    """Manages logging configuration for the library."""

    _initialized = False
    _log_file = None

    @classmethod
    def setup_logging(
        cls,
        log_file: Optional[str] = None,
        level: str = "WARNING",
        console: bool = False,
        force: bool = False
    ):
        """
        Setup logging configuration.

        Args:
            log_file (Optional[str]): Path to log file. If None, no file is written.
            level (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console (bool): Enable console logging (default: False)
            force (bool): Reconfigure even if logging was already set up
        """
        if cls._initialized and not force:
            return

        # Convert string level to logging constant
        numeric_level = getattr(logging, level.upper(), logging.WARNING)

        # Create formatter
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(numeric_level)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        cls._log_file = None
        if log_file:
            cls._log_file = Path(log_file)
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file, encoding='utf-8')
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        # Library default: swallow records nobody asked for
        if not root_logger.handlers:
            root_logger.addHandler(logging.NullHandler())

        cls._initialized = True

    @classmethod
    def reset(cls):
        """Drop every configured handler and return to the library default."""
        cls._initialized = False
        cls.setup_logging()
        cls._initialized = False

    @classmethod
    def get_log_file(cls) -> Optional[Path]:
        """Return the active log file, if any."""
        return cls._log_file

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger for a specific module.

        Args:
            name (str): Module name (usually __name__)

        Returns:
            logging.Logger: Logger inside the one_based namespace
        """
        if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
            return logging.getLogger(name)
        return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger.

    Args:
        name (str): Module name (usually __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return LoggerManager.get_logger(name)
