"""Disk geometry API module."""

from .DiskGeometry import DiskGeometry
from .DiskGeometryError import DiskGeometryError
from .get_disk_geometry import get_disk_geometry
from .get_volume_root import get_volume_root

__all__ = ["DiskGeometry", "DiskGeometryError", "get_disk_geometry", "get_volume_root"]
