"""
Configuration Management
========================

Configuration utilities for the layout helpers.
"""

from layout_core.config.settings import (
    LayoutConfig,
    FieldConfig,
    CodecConfig,
    load_config,
    save_config,
    get_default_config,
    setup_logging,
)

__all__ = [
    "LayoutConfig",
    "FieldConfig",
    "CodecConfig",
    "load_config",
    "save_config",
    "get_default_config",
    "setup_logging",
]
