"""Windows geometry query via GetDiskFreeSpaceW."""

import ctypes
from pathlib import Path

from .DiskGeometry import DiskGeometry
from .DiskGeometryError import DiskGeometryError


def _windows_geometry(root: Path) -> DiskGeometry:
    sectors_per_cluster = ctypes.c_ulong(0)
    bytes_per_sector = ctypes.c_ulong(0)
    free_clusters = ctypes.c_ulong(0)
    total_clusters = ctypes.c_ulong(0)

    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    ok = kernel32.GetDiskFreeSpaceW(
        ctypes.c_wchar_p(str(root)),
        ctypes.byref(sectors_per_cluster),
        ctypes.byref(bytes_per_sector),
        ctypes.byref(free_clusters),
        ctypes.byref(total_clusters),
    )
    if not ok:
        raise DiskGeometryError(str(root), ctypes.FormatError().strip())  # type: ignore[attr-defined]

    return DiskGeometry(
        sectors_per_cluster=sectors_per_cluster.value,
        bytes_per_sector=bytes_per_sector.value,
        free_clusters=free_clusters.value,
        total_clusters=total_clusters.value,
    )
