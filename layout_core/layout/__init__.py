"""
Layout Processing
=================

Layout document model, codec and the rendering transformer.

Components:
- LayoutDocument, Device, RenderingEntry: Parsed layout model
- BaseLayoutCodec / XmlLayoutCodec: Parse and serialize layout values
- RenderingTransformer: Applies actions to the renderings of an item
"""

from layout_core.layout.enums import (
    RenderingActionResult,
    LayoutFieldSlot,
)

from layout_core.layout.definition import (
    LayoutDocument,
    Device,
    RenderingEntry,
    PlaceholderEntry,
    make_device,
    make_rendering,
)

from layout_core.layout.base import (
    BaseLayoutCodec,
)

from layout_core.layout.xml_codec import (
    XmlLayoutCodec,
    local_name,
)

from layout_core.layout.transformer import (
    RenderingTransformer,
    RenderingAction,
    TransformResult,
    get_transformer,
    set_transformer,
    apply_action_to_all_renderings,
    apply_action_to_all_shared_renderings,
    apply_action_to_all_final_renderings,
)

__all__ = [
    # Enums
    "RenderingActionResult",
    "LayoutFieldSlot",
    # Model
    "LayoutDocument",
    "Device",
    "RenderingEntry",
    "PlaceholderEntry",
    "make_device",
    "make_rendering",
    # Codecs
    "BaseLayoutCodec",
    "XmlLayoutCodec",
    "local_name",
    # Transformer
    "RenderingTransformer",
    "RenderingAction",
    "TransformResult",
    "get_transformer",
    "set_transformer",
    "apply_action_to_all_renderings",
    "apply_action_to_all_shared_renderings",
    "apply_action_to_all_final_renderings",
]
