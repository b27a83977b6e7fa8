"""Detect operating system for the geometry query."""

import platform


def _detect_os() -> str:
    """Detect the current operating system family.

    Returns:
        "windows" or "posix"
    """
    if platform.system().lower() == "windows":
        return "windows"
    return "posix"
