"""Unit tests for cluwaste.api.config.ClusterWasteConfig module."""

import pytest
from pydantic import ValidationError

from cluwaste.api.config.ClusterWasteConfig import ClusterWasteConfig
from cluwaste.api.config.LogConfig import LogConfig
from cluwaste.api.config.ScanConfig import ScanConfig

pytestmark = pytest.mark.config


class TestClusterWasteConfigLoad:
    """Test ClusterWasteConfig.load() method."""

    def test_load_without_file_gives_defaults(self, cluwaste_home):
        config = ClusterWasteConfig.load()

        assert config.scan == ScanConfig()
        assert config.scan.max_workers is None
        assert config.scan.follow_symlinks is False
        assert config.scan.default_pattern == "*"
        assert config.log.level == "INFO"

    def test_load_uses_home_dir(self, cluwaste_home):
        assert ClusterWasteConfig.get_config_path() == cluwaste_home / "config.json"

    def test_load_partial_file(self, write_config):
        write_config({"scan": {"max_workers": 4}, "log": {"level": "DEBUG"}})

        config = ClusterWasteConfig.load()

        assert config.scan.max_workers == 4
        assert config.scan.default_pattern == "*"
        assert config.log.level == "DEBUG"

    def test_load_invalid_json(self, cluwaste_home):
        (cluwaste_home / "config.json").write_text("{invalid json")

        with pytest.raises(ValueError) as exc_info:
            ClusterWasteConfig.load()
        assert "Invalid JSON" in str(exc_info.value)

    def test_load_non_object(self, write_config):
        write_config([1, 2, 3])

        with pytest.raises(ValueError, match="JSON object"):
            ClusterWasteConfig.load()

    def test_load_unknown_section(self, write_config):
        write_config({"scan": {}, "metrics": {}})

        with pytest.raises(ValueError, match="metrics"):
            ClusterWasteConfig.load()

    def test_load_names_bad_field(self, write_config):
        write_config({"scan": {"default_pattern": ""}})

        with pytest.raises(ValueError) as exc_info:
            ClusterWasteConfig.load()
        assert "scan.default_pattern" in str(exc_info.value)


class TestSectionModels:
    def test_scan_config_rejects_zero_workers(self):
        with pytest.raises(ValidationError):
            ScanConfig(max_workers=0)

    def test_log_config_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            LogConfig(level="TRACE")

    def test_to_dict(self):
        config = ClusterWasteConfig()

        assert config.to_dict() == {
            "scan": {"max_workers": None, "follow_symlinks": False, "default_pattern": "*"},
            "log": {"level": "INFO", "max_bytes": 5 * 1024 * 1024, "backup_count": 3},
        }
