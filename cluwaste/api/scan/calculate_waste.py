"""Slack calculation for a single file."""


def calculate_waste(file_length: int, cluster_size: int) -> int:
    """Return the unused bytes in the final cluster allocated to a file.

    Zero when the length is an exact multiple of the cluster size (an empty
    file included), otherwise the gap to the next cluster boundary.

    Args:
        file_length: File length in bytes, non-negative
        cluster_size: Allocation unit in bytes, at least 1

    Returns:
        Waste in bytes, in the range [0, cluster_size - 1]
    """
    return (cluster_size - file_length % cluster_size) % cluster_size
