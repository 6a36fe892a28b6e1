"""
Exception Taxonomy
==================

Errors raised by the layout helpers. Everything derives from
``LayoutError`` so hosts can catch the whole family in one place.
"""

from typing import Optional


class LayoutError(Exception):
    """Base class for all layout_core errors."""
    pass


class LayoutParseError(LayoutError):
    """A layout field value is not well-formed layout XML."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message)
        self.field_name = field_name


class PersistenceError(LayoutError):
    """Saving an item failed."""
    pass


class AccessDeniedError(PersistenceError):
    """The current context is not allowed to write to the item."""
    pass


class EditStateError(PersistenceError):
    """A field was written outside an edit, or an edit was misused."""
    pass


class SwitcherStateError(LayoutError):
    """A switcher scope was exited out of order or entered twice."""
    pass
