"""Scan API module."""

from .calculate_waste import calculate_waste
from .ConcurrencyMode import ConcurrencyMode
from .enumerate_tree import enumerate_tree
from .format_report import format_report
from .ScanStats import ScanStats

__all__ = [
    "ConcurrencyMode",
    "ScanStats",
    "calculate_waste",
    "enumerate_tree",
    "format_report",
]
