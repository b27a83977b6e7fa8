"""Disk geometry query."""

from pathlib import Path

from ...utils.logger import get_logger
from ._detect_os import _detect_os
from .DiskGeometry import DiskGeometry
from .get_volume_root import get_volume_root

logger = get_logger("disk")


def get_disk_geometry(path: Path | str) -> DiskGeometry:
    """Report sectors per cluster, bytes per sector, free and total clusters.

    On Windows the query goes to the drive root of ``path``; elsewhere
    statvfs is asked about ``path`` itself so that mount points below the
    root report their own volume.

    Raises:
        DiskGeometryError: If the operating system call fails
    """
    if _detect_os() == "windows":
        from ._windows_geometry import _windows_geometry

        geometry = _windows_geometry(get_volume_root(path))
    else:
        from ._posix_geometry import _posix_geometry

        geometry = _posix_geometry(Path(path))

    logger.debug("Geometry for %s: %s (cluster size %d)", path, geometry, geometry.cluster_size)
    return geometry
