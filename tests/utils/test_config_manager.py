"""Tests for config manager."""

import json
import logging

import pytest
from pydantic import ValidationError

from container_ps.models.config import PsDefaults
from container_ps.utils.config_manager import ConfigManager, default_config_dir


class TestConfigManager:
    """Test suite for ConfigManager."""

    def test_default_config_dir_from_env(self, isolated_config_dir):
        """Test the environment selects the config directory."""
        assert default_config_dir() == isolated_config_dir
        assert ConfigManager().config_file == isolated_config_dir / "config.json"

    def test_default_config_dir_fallback(self, monkeypatch):
        """Test the user config directory is used without the environment."""
        monkeypatch.delenv("CONTAINER_PS_CONFIG_DIR")

        assert default_config_dir().parts[-2:] == (".config", "container-ps")

    def test_load_missing_returns_defaults(self, tmp_path):
        """Test loading without a config file."""
        assert ConfigManager(tmp_path).load_defaults() == PsDefaults()

    def test_save_and_load(self, tmp_path):
        """Test defaults round-trip through the config file."""
        manager = ConfigManager(tmp_path / "nested")
        manager.save_defaults(PsDefaults(sort="size", no_trunc=True))

        assert manager.load_defaults() == PsDefaults(sort="size", no_trunc=True)
        assert json.loads(manager.config_file.read_text())["sort"] == "size"

    def test_load_corrupt_file(self, tmp_path, caplog):
        """Test a corrupt config falls back to defaults with a warning."""
        (tmp_path / "config.json").write_text("{not json")

        with caplog.at_level(logging.WARNING):
            defaults = ConfigManager(tmp_path).load_defaults()

        assert defaults == PsDefaults()
        assert "Ignoring unreadable config" in caplog.text

    def test_load_invalid_values(self, tmp_path):
        """Test invalid stored values fall back to defaults."""
        (tmp_path / "config.json").write_text(json.dumps({"format": "yaml"}))

        assert ConfigManager(tmp_path).load_defaults() == PsDefaults()

    def test_set_value(self, tmp_path):
        """Test updating a single default keeps the others."""
        manager = ConfigManager(tmp_path)
        manager.save_defaults(PsDefaults(sort="names"))

        defaults = manager.set_value("all", "yes")

        assert defaults.all is True
        assert manager.load_defaults().sort == "names"

    def test_set_value_empty_sort_unsets(self, tmp_path):
        """Test an empty sort clears the stored key."""
        manager = ConfigManager(tmp_path)
        manager.set_value("sort", "names")

        assert manager.set_value("sort", "").sort is None

    def test_set_value_unknown_key(self, tmp_path):
        """Test unknown keys raise KeyError."""
        with pytest.raises(KeyError):
            ConfigManager(tmp_path).set_value("color", "red")

    def test_set_value_invalid(self, tmp_path):
        """Test invalid values are rejected and not stored."""
        manager = ConfigManager(tmp_path)

        with pytest.raises(ValidationError):
            manager.set_value("format", "yaml")
        assert not manager.config_file.exists()

    def test_reset(self, tmp_path):
        """Test reset stores built-in defaults."""
        manager = ConfigManager(tmp_path)
        manager.save_defaults(PsDefaults(format="json"))

        assert manager.reset() == PsDefaults()
        assert manager.load_defaults().format == "table"
