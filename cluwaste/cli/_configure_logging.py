"""Configure logging from the user's config at CLI entry."""

from cluwaste.api.config.ClusterWasteConfig import ClusterWasteConfig
from cluwaste.api.config.LogConfig import LogConfig
from cluwaste.utils.logger import configure_logging


def _configure_logging() -> None:
    """Set up the log file; an unreadable config falls back to default log settings.

    The command itself reports the config error.
    """
    try:
        log_cfg = ClusterWasteConfig.load().log
    except ValueError:
        log_cfg = LogConfig()
    configure_logging(level=log_cfg.level, max_bytes=log_cfg.max_bytes, backup_count=log_cfg.backup_count)
