"""Volume geometry model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiskGeometry:
    """Allocation layout of one volume, as reported by the operating system."""

    sectors_per_cluster: int
    bytes_per_sector: int
    free_clusters: int
    total_clusters: int

    @property
    def cluster_size(self) -> int:
        return self.bytes_per_sector * self.sectors_per_cluster

    @property
    def capacity_bytes(self) -> int:
        return self.total_clusters * self.cluster_size

    @property
    def free_bytes(self) -> int:
        return self.free_clusters * self.cluster_size

    @property
    def in_use_bytes(self) -> int:
        return (self.total_clusters - self.free_clusters) * self.cluster_size
