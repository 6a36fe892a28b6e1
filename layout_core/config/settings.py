"""
Configuration Settings
======================

Configuration dataclasses for the layout helpers.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

import yaml

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


@dataclass
class FieldConfig:
    """Names of the item fields holding layout XML."""

    shared_layout_field: str = "__Renderings"
    final_layout_field: str = "__Final Renderings"

    def field_for(self, slot: Any) -> str:
        """
        Resolve a layout slot to its field name.

        Args:
            slot: LayoutFieldSlot member

        Returns:
            Field name configured for the slot
        """
        # Local import, layout depends on config
        from layout_core.layout.enums import LayoutFieldSlot

        if LayoutFieldSlot(slot) is LayoutFieldSlot.SHARED:
            return self.shared_layout_field
        return self.final_layout_field


@dataclass
class CodecConfig:
    """Layout XML codec configuration."""

    device_tag: str = "d"
    rendering_tag: str = "r"
    placeholder_tag: str = "p"
    strip_whitespace: bool = True


@dataclass
class LayoutConfig:
    """
    Complete configuration for the layout helpers.

    Example:
        config = LayoutConfig()
        config.fields.final_layout_field = "Final Layout"
        save_config(config, Path("layout.yaml"))
    """

    fields: FieldConfig = field(default_factory=FieldConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)

    log_level: str = "INFO"

    # Host-specific extensions
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'fields': asdict(self.fields),
            'codec': asdict(self.codec),
            'log_level': self.log_level,
            'custom': self.custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LayoutConfig':
        """
        Create from dictionary.

        Raises:
            ValueError: On unknown keys, a non-mapping section, a bad log
                level or layout field names that collide
        """
        if not isinstance(data, dict):
            raise ValueError(f"Layout config must be a mapping, got {type(data).__name__}")
        _reject_unknown(data, {'fields', 'codec', 'log_level', 'custom'}, "layout config")

        config = cls()

        if 'fields' in data:
            config.fields = _build_section(FieldConfig, data['fields'], 'fields')
        if 'codec' in data:
            config.codec = _build_section(CodecConfig, data['codec'], 'codec')

        if 'log_level' in data:
            level = str(data['log_level']).upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"Unknown log level: {data['log_level']!r}")
            config.log_level = level
        if 'custom' in data:
            config.custom = dict(data['custom'] or {})

        if config.fields.shared_layout_field == config.fields.final_layout_field:
            raise ValueError(
                f"Shared and final layout fields must differ: "
                f"{config.fields.shared_layout_field!r}"
            )
        if config.codec.device_tag == config.codec.placeholder_tag:
            raise ValueError(f"Device and placeholder tags must differ: {config.codec.device_tag!r}")

        return config


def _reject_unknown(data: dict, allowed: set, where: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(f"Unknown keys in {where}: {', '.join(map(str, unknown))}")


def _build_section(section_cls: type, data: Any, name: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"Config section {name!r} must be a mapping")
    _reject_unknown(data, set(section_cls.__dataclass_fields__), f"section {name!r}")
    return section_cls(**data)


def load_config(config_path: Path) -> LayoutConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        LayoutConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the format is not supported or the content is invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if data is None:
        data = {}

    logger.info(f"Loaded configuration from {config_path}")
    return LayoutConfig.from_dict(data)


def save_config(config: LayoutConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: LayoutConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported or the config is invalid
    """
    suffix = config_path.suffix.lower()
    data = config.to_dict()

    # Refuse to write a file load_config would reject
    LayoutConfig.from_dict(data)

    if suffix not in ['.yaml', '.yml', '.json']:
        raise ValueError(f"Unsupported config format: {suffix}")

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> LayoutConfig:
    """Get default configuration."""
    return LayoutConfig()


def setup_logging(level: Union[str, int, None] = None,
                  config: Optional[LayoutConfig] = None) -> logging.Logger:
    """
    Configure root logging for hosts that embed the helpers in a script.

    Args:
        level: Log level name or number; overrides ``config.log_level``
        config: Optional configuration supplying the level

    Returns:
        The ``layout_core`` package logger
    """
    if level is None:
        level = config.log_level if config else "INFO"
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(level=level, format=LOG_FORMAT)
    package_logger = logging.getLogger("layout_core")
    package_logger.setLevel(level)
    return package_logger
