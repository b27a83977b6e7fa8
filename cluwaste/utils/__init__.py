"""cluwaste utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version

__all__ = [
    "get_home_dir",
    "get_package_version",
]
