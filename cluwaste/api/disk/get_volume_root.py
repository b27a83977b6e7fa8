"""Volume root lookup."""

from pathlib import Path


def get_volume_root(path: Path | str) -> Path:
    """Return the root of the volume holding ``path`` (``C:\\`` or ``/``)."""
    resolved = Path(path).expanduser().absolute()
    return Path(resolved.anchor)
