"""Disk geometry query error."""


class DiskGeometryError(Exception):
    """Raised when the operating system cannot report a volume's geometry."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"unable to get disk geometry information for {path}: {reason}")
