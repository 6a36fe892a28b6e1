"""
Switching Primitives
====================

Scoped, nestable overrides of a per-context current value.

Components:
- Switcher: generic stack-based override, one stack per subclass
- Disabler: boolean-style switcher for suppressing behavior in a block
- DisablerState: values pushed by a Disabler
"""

from layout_core.switching.switcher import (
    Switcher,
    Disabler,
    DisablerState,
)

__all__ = [
    "Switcher",
    "Disabler",
    "DisablerState",
]
