"""
Layout Field Access
===================

Field-level reads and writes for layout fields.

Layout fields inherit from their standard value. Reading must return the
effective value, and writing a value identical to the inherited one must
reset the field instead of storing a copy, otherwise the item stops
following later changes to its base layout.
"""

import logging
from typing import Optional

from layout_core.items.base import BaseItem

logger = logging.getLogger(__name__)


class LayoutFieldAccessor:
    """Reads and writes layout field values through their inheritance."""

    def get_field_value(self, item: BaseItem, field_name: str) -> Optional[str]:
        """
        Return the effective value of a layout field.

        Args:
            item: Item to read
            field_name: Layout field name

        Returns:
            The item's own value, else the inherited value, else None
        """
        value = item.get_raw_value(field_name)
        if value:
            return value
        return item.get_standard_value(field_name)

    def set_field_value(self, item: BaseItem, field_name: str, value: Optional[str]) -> None:
        """
        Write the effective value of a layout field.

        Must be called inside an edit. Resets the field when ``value``
        matches the inherited value.

        Args:
            item: Item to write
            field_name: Layout field name
            value: New effective value
        """
        inherited = item.get_standard_value(field_name)
        if not value or value == inherited:
            logger.debug(f"Resetting {field_name!r} on {item!r} to inherited value")
            item.reset_field(field_name)
        else:
            item.set_raw_value(field_name, value)
