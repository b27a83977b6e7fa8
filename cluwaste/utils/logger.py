import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME
from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False

# LogConfig spells warning the short way
_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified cluwaste logging.

    Args:
        home: Path to the cluwaste home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR
        max_bytes: Rotate the log file once it reaches this size
        backup_count: Number of rotated log files to keep
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE_NAME

    root_logger = logging.getLogger("cluwaste")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach and close handlers installed by configure_logging()."""
    global _CONFIGURED
    root_logger = logging.getLogger("cluwaste")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Loggers are children of ``cluwaste``; records propagate there once
    configure_logging() has run at the CLI entry point.
    """
    return logging.getLogger(f"cluwaste.{name}")
