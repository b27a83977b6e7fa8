"""Concurrent directory tree traversal feeding a ScanStats."""

import os
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ...constants import SCAN_DIRECTORY_FANOUT, SCAN_FILE_BATCH
from ...utils.logger import get_logger
from ._TaskGroup import _TaskGroup
from .ConcurrencyMode import ConcurrencyMode
from .is_ignorable_error import is_ignorable_error
from .list_files import list_files
from .list_subdirectories import list_subdirectories
from .ListingResult import ListingResult
from .ScanStats import ScanStats

logger = get_logger("scan")


def _batches(paths: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(paths), size):
        yield paths[start : start + size]


def enumerate_tree(
    directory: Path | str,
    stats: ScanStats,
    pattern: str = "*",
    mode: ConcurrencyMode = ConcurrencyMode.PARALLEL,
    max_workers: int | None = None,
    follow_symlinks: bool = False,
) -> None:
    """Record every file under ``directory`` whose name matches ``pattern``.

    Each directory is listed in one task. Its sub-directories are handed to
    at most ``SCAN_DIRECTORY_FANOUT`` new tasks. Its first
    ``SCAN_FILE_BATCH`` matching files are measured in the same task and any
    further files are queued one task per batch, so a wide directory queues
    a bounded number of tasks rather than one per entry. The two listings are
    independent, so a failure in one does not stop the other. Unreadable
    directories and files that vanish before their length is read are
    skipped.

    Args:
        directory: Root of the subtree to scan
        stats: Counters that receive one record() per matching file
        pattern: Glob applied to file names (not directory names)
        mode: PARALLEL uses a pool of ``max_workers``; SEQUENTIAL a pool of one
        max_workers: Pool bound in parallel mode, None for the executor default
        follow_symlinks: Descend into linked directories and count linked files

    Raises:
        Exception: Any non-OSError raised while scanning, after the pool drains
    """
    workers = 1 if mode is ConcurrencyMode.SEQUENTIAL else max_workers

    def skip(listing: ListingResult, what: str) -> None:
        if listing.error is not None and not is_ignorable_error(listing.error):
            raise listing.error
        logger.debug("Skipping %s of %s: %s", what, listing.path, listing.error)

    def record_files(paths: list[str]) -> None:
        for path in paths:
            # Fresh stat: the entry may have changed since it was listed
            try:
                length = os.stat(path, follow_symlinks=follow_symlinks).st_size
            except Exception as exc:
                if not is_ignorable_error(exc):
                    raise
                logger.debug("Skipping file %s: %s", path, exc)
                continue
            stats.record(length)

    def visit_all(paths: list[str]) -> None:
        for path in paths:
            visit(path)

    def visit(path: str) -> None:
        subdirs = list_subdirectories(path, follow_symlinks)
        if subdirs.ok:
            children = [entry.path for entry in subdirs.entries]
            per_task = max(1, -(-len(children) // SCAN_DIRECTORY_FANOUT))
            for batch in _batches(children, per_task):
                group.submit(visit_all, batch)
        else:
            skip(subdirs, "sub-directories")

        files = list_files(path, pattern, follow_symlinks)
        if files.ok:
            batches = list(_batches([entry.path for entry in files.entries], SCAN_FILE_BATCH))
            for batch in batches[1:]:
                group.submit(record_files, batch)
            if batches:
                record_files(batches[0])
        else:
            skip(files, "files")

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="cluwaste-scan") as executor:
        group = _TaskGroup(executor)
        group.submit(visit, os.fspath(directory))
        group.wait()
