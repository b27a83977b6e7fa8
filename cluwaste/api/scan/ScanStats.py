"""Scan stats model."""

import threading
from dataclasses import dataclass, field

from .calculate_waste import calculate_waste


@dataclass
class ScanStats:
    """Counters for one scan, safe to update from any number of worker threads.

    Read the counters only after every worker has finished.
    """

    cluster_size: int
    files_examined: int = field(default=0, init=False)
    bytes_used: int = field(default=0, init=False)
    bytes_wasted: int = field(default=0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.cluster_size < 1:
            raise ValueError(f"cluster_size must be at least 1, got {self.cluster_size}")

    def record(self, file_length: int) -> None:
        """Count one file of ``file_length`` bytes."""
        waste = calculate_waste(file_length, self.cluster_size)
        with self._lock:
            self.files_examined += 1
            self.bytes_used += file_length
            self.bytes_wasted += waste

    @property
    def percent_wasted(self) -> float | None:
        if self.bytes_used == 0:
            return None
        return 100.0 * self.bytes_wasted / self.bytes_used

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {
                "files_examined": self.files_examined,
                "bytes_used": self.bytes_used,
                "bytes_wasted": self.bytes_wasted,
            }
