"""File name pattern matching helper."""

import fnmatch

MATCH_ALL = ("*", "*.*")


def matches_pattern(pattern: str, name: str) -> bool:
    """Check if a file name matches a glob pattern.

    ``*`` and ``*.*`` match every name, including names without a dot.
    Otherwise case follows the host platform: insensitive on Windows,
    sensitive elsewhere.
    """
    if pattern in MATCH_ALL:
        return True
    return fnmatch.fnmatch(name, pattern)
