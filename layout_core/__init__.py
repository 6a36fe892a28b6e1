"""
Layout Core Library
===================

Helpers for the extensibility layer of a content-management system:

- Scoped switchers and disablers for suspending behavior within a block
- A layout-rendering transformer that walks the renderings of an item's
  Shared and Final layouts, applies an action to each and writes the
  layout back only when it changed

Architecture
------------

    layout_core/
    ├── switching/     - Switcher and Disabler scope primitives
    ├── layout/        - Layout model, XML codec, rendering transformer
    ├── items/         - Item interface, edit context, security bypass
    ├── config/        - Configuration management
    └── errors.py      - Exception taxonomy

Usage
-----

    from layout_core import (
        MemoryItem,
        RenderingActionResult,
        apply_action_to_all_renderings,
    )

    def drop_promo(rendering):
        if rendering.placeholder == "promo":
            return RenderingActionResult.DELETE
        return RenderingActionResult.KEEP

    result = apply_action_to_all_renderings(item, drop_promo)
    print(result.summary())

Extensibility
-------------

Subclass ``BaseItem`` to adapt a content store, ``BaseLayoutCodec`` to
support another layout format, and ``Disabler`` to gate your own
optional behavior.
"""

__version__ = "1.0.0"

from layout_core.errors import (
    LayoutError,
    LayoutParseError,
    PersistenceError,
    AccessDeniedError,
    EditStateError,
    SwitcherStateError,
)

from layout_core.switching import (
    Switcher,
    Disabler,
    DisablerState,
)

from layout_core.config import (
    LayoutConfig,
    FieldConfig,
    CodecConfig,
    load_config,
    save_config,
    setup_logging,
)

from layout_core.items import (
    BaseItem,
    EditContext,
    SecurityDisabler,
    LayoutFieldAccessor,
    MemoryItem,
)

from layout_core.layout import (
    RenderingActionResult,
    LayoutFieldSlot,
    LayoutDocument,
    Device,
    RenderingEntry,
    BaseLayoutCodec,
    XmlLayoutCodec,
    RenderingTransformer,
    TransformResult,
    apply_action_to_all_renderings,
    apply_action_to_all_shared_renderings,
    apply_action_to_all_final_renderings,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "LayoutError",
    "LayoutParseError",
    "PersistenceError",
    "AccessDeniedError",
    "EditStateError",
    "SwitcherStateError",
    # Switching
    "Switcher",
    "Disabler",
    "DisablerState",
    # Config
    "LayoutConfig",
    "FieldConfig",
    "CodecConfig",
    "load_config",
    "save_config",
    "setup_logging",
    # Items
    "BaseItem",
    "EditContext",
    "SecurityDisabler",
    "LayoutFieldAccessor",
    "MemoryItem",
    # Layout
    "RenderingActionResult",
    "LayoutFieldSlot",
    "LayoutDocument",
    "Device",
    "RenderingEntry",
    "BaseLayoutCodec",
    "XmlLayoutCodec",
    "RenderingTransformer",
    "TransformResult",
    "apply_action_to_all_renderings",
    "apply_action_to_all_shared_renderings",
    "apply_action_to_all_final_renderings",
]
