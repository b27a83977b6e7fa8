"""List the immediate files of a directory that match a pattern."""

import os

from .ListingResult import ListingResult
from .matches_pattern import matches_pattern


def list_files(directory: str, pattern: str = "*", follow_symlinks: bool = False) -> ListingResult:
    """List regular files in ``directory`` whose names match ``pattern``.

    Errors are returned in the result rather than raised, so the caller
    decides which ones to skip.
    """
    try:
        with os.scandir(directory) as it:
            entries = [
                entry
                for entry in it
                if entry.is_file(follow_symlinks=follow_symlinks) and matches_pattern(pattern, entry.name)
            ]
    except Exception as exc:
        return ListingResult(path=directory, error=exc)
    return ListingResult(path=directory, entries=entries)
