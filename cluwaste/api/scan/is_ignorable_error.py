"""Classify traversal errors."""


def is_ignorable_error(error: BaseException) -> bool:
    """Return True for errors that mean an entry is unreachable, not that the scan is broken.

    Access denied, an entry vanishing between listing and stat, a path that is
    no longer a directory and device I/O failures all surface as OSError.
    Anything else is a programming error and must propagate.
    """
    return isinstance(error, OSError)
