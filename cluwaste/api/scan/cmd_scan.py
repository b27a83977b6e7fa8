"""Scan API function.

Measures the space wasted in the final cluster of every matching file under a
directory tree and puts it against the volume's capacity and usage.
Matches CLI: cluwaste [-s] [<rootpath> [<filespec>]]
"""

import os
import time
from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from .._output_schemas.scan import ScanRunOutput
from ..config.ClusterWasteConfig import ClusterWasteConfig
from ..disk.DiskGeometry import DiskGeometry
from ..disk.DiskGeometryError import DiskGeometryError
from ..disk.get_disk_geometry import get_disk_geometry
from ..StageResult import StageResult
from .ConcurrencyMode import ConcurrencyMode
from .enumerate_tree import enumerate_tree
from .ScanStats import ScanStats

logger = get_logger("scan")


def cmd_scan(
    root: str | None = None,
    pattern: str | None = None,
    sequential: bool = False,
) -> StageResult:
    """Scan a directory tree and total the slack in final clusters.

    Args:
        root: Directory to start from. Defaults to the root of the current drive.
        pattern: File name glob. Defaults to the configured default pattern.
        sequential: Use one worker instead of a pool

    Returns:
        StageResult with ScanRunOutput; success is False when the volume
        geometry is unavailable or the root is not a directory, in which case
        no traversal takes place.
    """
    root_path = Path(os.path.abspath(Path(root).expanduser())) if root else Path(Path.cwd().anchor)
    mode = ConcurrencyMode.SEQUENTIAL if sequential else ConcurrencyMode.PARALLEL

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        used_pattern: str,
        geometry: DiskGeometry | None = None,
        stats: ScanStats | None = None,
        elapsed_secs: float = 0.0,
        errors: list[str] | None = None,
    ) -> None:
        """Helper to build and assign the output result."""
        result_obj.output = ScanRunOutput(
            errors=errors or [],
            warnings=[],
            root=str(root_path),
            pattern=used_pattern,
            mode=mode.value,
            cluster_size=geometry.cluster_size if geometry else 0,
            capacity_bytes=geometry.capacity_bytes if geometry else 0,
            free_bytes=geometry.free_bytes if geometry else 0,
            in_use_bytes=geometry.in_use_bytes if geometry else 0,
            files_examined=stats.files_examined if stats else 0,
            space_in_use=stats.bytes_used if stats else 0,
            wasted_space=stats.bytes_wasted if stats else 0,
            percent_wasted=stats.percent_wasted if stats else None,
            elapsed_secs=elapsed_secs,
            success=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.1, "Loading configuration...")
        try:
            config = ClusterWasteConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _build_result(result_obj, False, "Failed to load configuration", pattern or "", errors=[str(e)])
            return
        scan_cfg = config.scan
        used_pattern = pattern or scan_cfg.default_pattern

        yield (0.2, "Checking root directory...")
        if not root_path.is_dir():
            yield (1.0, "Complete")
            _build_result(
                result_obj,
                False,
                f"Root path is not a directory: {root_path}",
                used_pattern,
                errors=[f"Not a directory: {root_path}"],
            )
            return

        yield (0.3, "Querying disk geometry...")
        try:
            geometry = get_disk_geometry(root_path)
        except DiskGeometryError as e:
            logger.error("Geometry query failed: %s", e)
            yield (1.0, "Complete")
            _build_result(
                result_obj, False, "unable to get disk geometry information", used_pattern, errors=[str(e)]
            )
            return

        if geometry.cluster_size == 0:
            logger.error("Zero cluster size reported for %s: %s", root_path, geometry)
            yield (1.0, "Complete")
            _build_result(
                result_obj,
                False,
                "disk geometry information is incorrect",
                used_pattern,
                geometry=geometry,
                errors=[f"Cluster size is 0 for {root_path}"],
            )
            return

        yield (0.4, f"Scanning {root_path} for {used_pattern} ({mode.value})...")
        stats = ScanStats(cluster_size=geometry.cluster_size)
        started = time.perf_counter()
        enumerate_tree(
            root_path,
            stats,
            pattern=used_pattern,
            mode=mode,
            max_workers=scan_cfg.max_workers,
            follow_symlinks=scan_cfg.follow_symlinks,
        )
        elapsed = time.perf_counter() - started
        logger.info(
            "Scanned %s (%s, %s): %d files, %d bytes used, %d bytes wasted in %.2fs",
            root_path,
            used_pattern,
            mode.value,
            stats.files_examined,
            stats.bytes_used,
            stats.bytes_wasted,
            elapsed,
        )

        yield (1.0, "Complete")
        _build_result(
            result_obj,
            True,
            f"Examined {stats.files_examined:,} file(s), {stats.bytes_wasted:,} bytes wasted in final clusters",
            used_pattern,
            geometry=geometry,
            stats=stats,
            elapsed_secs=elapsed,
        )

    return StageResult(
        announce=f"examining: {root_path}",
        progress_callback=do_work,
    )
