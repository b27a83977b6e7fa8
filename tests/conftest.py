"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from cluwaste.api.disk.DiskGeometry import DiskGeometry
from cluwaste.utils.logger import reset_logging

MARKERS = {
    "unit": "fast tests of a single module",
    "integration": "end-to-end tests through the CLI entry points",
    "scan": "aggregation and traversal",
    "disk": "volume geometry",
    "config": "configuration loading",
    "cli": "command line behaviour",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def cluwaste_home(tmp_path_factory, monkeypatch) -> Path:
    """Point CLUWASTE_HOME at an empty directory so no test reads the user's config."""
    home = tmp_path_factory.mktemp("cluwaste_home")
    monkeypatch.setenv("CLUWASTE_HOME", str(home))
    yield home
    reset_logging()


@pytest.fixture
def write_config(cluwaste_home: Path):
    """Write a config.json into the isolated home directory."""

    def _write(config: dict) -> Path:
        path = cluwaste_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_tree():
    """Create files of exact sizes under a root: ``{"a/b.txt": 100, "empty": None}``.

    A value of None creates a directory instead of a file.
    """

    def _make(root: Path, layout: dict[str, int | None]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel, size in layout.items():
            path = root / rel
            if size is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"x" * size)
        return root

    return _make


@pytest.fixture
def geometry_4k() -> DiskGeometry:
    """512-byte sectors, 8 per cluster: 4 KiB clusters, 1000 of 2500 free."""
    return DiskGeometry(sectors_per_cluster=8, bytes_per_sector=512, free_clusters=1000, total_clusters=2500)


@pytest.fixture
def fixed_geometry(monkeypatch, geometry_4k: DiskGeometry) -> DiskGeometry:
    """Make cmd_scan see the 4 KiB geometry regardless of the host volume."""
    monkeypatch.setattr("cluwaste.api.scan.cmd_scan.get_disk_geometry", lambda path: geometry_4k)
    return geometry_4k


# =============================================================================
# Test Helpers
# =============================================================================


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
