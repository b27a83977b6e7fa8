"""Traversal concurrency modes."""

from enum import Enum


class ConcurrencyMode(str, Enum):
    """How the traversal schedules its work."""

    PARALLEL = "parallel"
    SEQUENTIAL = "sequential"
