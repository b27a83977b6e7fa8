"""List the immediate sub-directories of a directory."""

import os

from .ListingResult import ListingResult


def list_subdirectories(directory: str, follow_symlinks: bool = False) -> ListingResult:
    """List sub-directories of ``directory``.

    Errors are returned in the result rather than raised, so the caller
    decides which ones to skip.
    """
    try:
        with os.scandir(directory) as it:
            entries = [entry for entry in it if entry.is_dir(follow_symlinks=follow_symlinks)]
    except Exception as exc:
        return ListingResult(path=directory, error=exc)
    return ListingResult(path=directory, entries=entries)
