"""Config API module."""

from .ClusterWasteConfig import ClusterWasteConfig
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig

__all__ = ["ClusterWasteConfig", "LogConfig", "ScanConfig"]
