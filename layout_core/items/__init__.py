"""
Item Collaborators
==================

Interfaces and reference implementations for the content items the
layout helpers read from and write to.

Components:
- BaseItem: Abstract item interface
- EditContext: Batches writes into one save
- SecurityDisabler: Permission bypass scope
- LayoutFieldAccessor: Inheritance-aware layout field reads and writes
- MemoryItem: Dictionary-backed item
"""

from layout_core.items.base import (
    BaseItem,
    EditContext,
)

from layout_core.items.security import (
    SecurityDisabler,
    security_enabled,
)

from layout_core.items.fields import (
    LayoutFieldAccessor,
)

from layout_core.items.memory import (
    MemoryItem,
)

__all__ = [
    "BaseItem",
    "EditContext",
    "SecurityDisabler",
    "security_enabled",
    "LayoutFieldAccessor",
    "MemoryItem",
]
