"""Enumerations shared by the layout helpers."""

from enum import Enum


class RenderingActionResult(str, Enum):
    """Outcome of a rendering action for one rendering entry."""
    KEEP = "keep"
    DELETE = "delete"


class LayoutFieldSlot(str, Enum):
    """Selects which layout field of an item is processed."""
    SHARED = "shared"
    FINAL = "final"
