"""POSIX geometry query via statvfs."""

import os
from pathlib import Path

from .DiskGeometry import DiskGeometry
from .DiskGeometryError import DiskGeometryError

# statvfs reports a fragment size, not sectors; split it the way Windows does
_SECTOR_SIZE = 512


def _posix_geometry(path: Path) -> DiskGeometry:
    try:
        st = os.statvfs(path)
    except OSError as exc:
        raise DiskGeometryError(str(path), exc.strerror or str(exc)) from exc

    fragment = st.f_frsize or st.f_bsize
    if fragment and fragment % _SECTOR_SIZE == 0:
        bytes_per_sector = _SECTOR_SIZE
        sectors_per_cluster = fragment // _SECTOR_SIZE
    else:
        bytes_per_sector = fragment
        sectors_per_cluster = 1 if fragment else 0

    return DiskGeometry(
        sectors_per_cluster=sectors_per_cluster,
        bytes_per_sector=bytes_per_sector,
        free_clusters=st.f_bavail,
        total_clusters=st.f_blocks,
    )
