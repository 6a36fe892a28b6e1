"""
Tests for configuration loading and saving

Run with: pytest tests/test_config.py -v
"""

import json
import logging
import sys
from pathlib import Path

import pytest
import yaml

sys.path.insert(0, str(Path(__file__).parent.parent))

from layout_core.config import (
    CodecConfig,
    FieldConfig,
    LayoutConfig,
    get_default_config,
    load_config,
    save_config,
    setup_logging,
)
from layout_core.layout import LayoutFieldSlot


class TestLayoutConfig:
    """Tests for the configuration dataclasses."""

    def test_defaults(self):
        """Defaults should match the standard layout field names and tags."""
        config = get_default_config()
        assert config.fields.shared_layout_field == "__Renderings"
        assert config.fields.final_layout_field == "__Final Renderings"
        assert config.codec.device_tag == "d"
        assert config.codec.rendering_tag == "r"
        assert config.log_level == "INFO"

    def test_field_for_slot(self):
        """Slots should resolve to their configured field names."""
        fields = FieldConfig(shared_layout_field="Shared", final_layout_field="Final")
        assert fields.field_for(LayoutFieldSlot.SHARED) == "Shared"
        assert fields.field_for(LayoutFieldSlot.FINAL) == "Final"
        assert fields.field_for("final") == "Final"

    def test_from_dict_partial(self):
        """Missing sections should keep their defaults."""
        config = LayoutConfig.from_dict({"codec": {"device_tag": "device"}, "log_level": "DEBUG"})
        assert config.codec.device_tag == "device"
        assert config.codec.rendering_tag == "r"
        assert config.fields == FieldConfig()
        assert config.log_level == "DEBUG"

    def test_dict_round_trip(self):
        """to_dict and from_dict should be inverses."""
        config = LayoutConfig(codec=CodecConfig(strip_whitespace=False), custom={"site": "web"})
        assert LayoutConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("data", [
        {"feilds": {}},
        {"fields": {"shared_field": "Layout"}},
        {"codec": {"root_tag": "layout"}},
        {"fields": ["__Renderings"]},
        {"log_level": "LOUD"},
        {"fields": {"shared_layout_field": "Layout", "final_layout_field": "Layout"}},
        {"codec": {"device_tag": "p"}},
        ["fields"],
    ])
    def test_from_dict_rejects_invalid(self, data):
        """Unknown keys and inconsistent layout settings should be rejected."""
        with pytest.raises(ValueError):
            LayoutConfig.from_dict(data)

    def test_log_level_is_normalized(self):
        """Log levels should be stored upper-cased."""
        assert LayoutConfig.from_dict({"log_level": "warning"}).log_level == "WARNING"



class TestConfigFiles:
    """Tests for load_config and save_config."""

    @pytest.mark.parametrize("suffix", [".json", ".yaml", ".yml"])
    def test_save_and_load(self, tmp_path, suffix):
        """Saved configuration should load back unchanged."""
        config = LayoutConfig()
        config.fields.final_layout_field = "Final Layout"
        path = tmp_path / "nested" / f"layout{suffix}"

        save_config(config, path)
        assert path.exists()
        assert load_config(path) == config

    def test_yaml_is_readable(self, tmp_path):
        """YAML output should be plain mappings."""
        path = tmp_path / "layout.yaml"
        save_config(LayoutConfig(), path)
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["fields"]["shared_layout_field"] == "__Renderings"

    def test_load_json_written_by_hand(self, tmp_path):
        """Hand-written JSON with only some keys should load."""
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"fields": {"shared_layout_field": "Layout"}}), encoding="utf-8")
        config = load_config(path)
        assert config.fields.shared_layout_field == "Layout"
        assert config.fields.final_layout_field == "__Final Renderings"

    def test_empty_yaml(self, tmp_path):
        """An empty YAML file should give the default configuration."""
        path = tmp_path / "layout.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == LayoutConfig()

    def test_invalid_file_is_rejected(self, tmp_path):
        """A file with unknown keys should fail to load."""
        path = tmp_path / "layout.yaml"
        path.write_text("fields:\n  shared: Layout\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_config_is_not_saved(self, tmp_path):
        """Saving a config load_config would reject should fail before writing."""
        config = LayoutConfig(fields=FieldConfig(final_layout_field="__Renderings"))
        path = tmp_path / "layout.json"
        with pytest.raises(ValueError):
            save_config(config, path)
        assert not path.exists()

    def test_missing_file(self, tmp_path):
        """Loading a missing file should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        """Unknown formats should be rejected."""
        path = tmp_path / "layout.ini"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)
        with pytest.raises(ValueError):
            save_config(LayoutConfig(), tmp_path / "out.ini")


class TestSetupLogging:
    """Tests for logging setup."""

    def test_level_from_config(self):
        """The package logger should take the configured level."""
        config = LayoutConfig(log_level="debug")
        logger = setup_logging(config=config)
        assert logger.name == "layout_core"
        assert logger.level == logging.DEBUG

    def test_explicit_level_wins(self):
        """An explicit level should override the configuration."""
        logger = setup_logging(logging.WARNING, config=LayoutConfig(log_level="DEBUG"))
        assert logger.level == logging.WARNING
