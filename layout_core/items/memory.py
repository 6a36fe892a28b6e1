"""
In-Memory Items
===============

Dictionary-backed ``BaseItem`` for tests, scripts and hosts that keep
layout values outside a content store.
"""

import logging
from typing import Callable, Dict, List, Optional

from layout_core.errors import AccessDeniedError, EditStateError
from layout_core.items.base import BaseItem
from layout_core.items.security import security_enabled

logger = logging.getLogger(__name__)

_RESET = object()


class MemoryItem(BaseItem):
    """
    Item whose fields live in a dictionary.

    Pending writes are buffered while editing and applied together by
    ``end_edit``. If ``on_save`` raises, nothing is applied.

    Attributes:
        fields: The item's own field values
        standard_values: Inherited values, used when a field has no own value
        writable: Whether writes are allowed without a SecurityDisabler
        on_save: Optional hook called with the pending changes before commit
        save_count: Number of committed saves
        history: Committed change sets, oldest first
    """

    def __init__(self,
                 item_id: str,
                 fields: Optional[Dict[str, str]] = None,
                 standard_values: Optional[Dict[str, str]] = None,
                 writable: bool = True,
                 on_save: Optional[Callable[['MemoryItem', Dict[str, Optional[str]]], None]] = None):
        self._item_id = item_id
        self.fields: Dict[str, str] = dict(fields or {})
        self.standard_values: Dict[str, str] = dict(standard_values or {})
        self.writable = writable
        self.on_save = on_save

        self.save_count = 0
        self.history: List[Dict[str, Optional[str]]] = []
        self._pending: Optional[Dict[str, object]] = None

    @property
    def item_id(self) -> str:
        return self._item_id

    @property
    def editing(self) -> bool:
        return self._pending is not None

    def can_write(self) -> bool:
        return self.writable or not security_enabled()

    def get_raw_value(self, field_name: str) -> Optional[str]:
        return self.fields.get(field_name)

    def get_standard_value(self, field_name: str) -> Optional[str]:
        return self.standard_values.get(field_name)

    def set_raw_value(self, field_name: str, value: str) -> None:
        self._require_edit(field_name)
        self._pending[field_name] = value

    def reset_field(self, field_name: str) -> None:
        self._require_edit(field_name)
        self._pending[field_name] = _RESET

    def begin_edit(self) -> None:
        if self.editing:
            raise EditStateError(f"{self!r} is already being edited")
        if not self.can_write():
            raise AccessDeniedError(f"No write access to {self!r}")
        self._pending = {}

    def end_edit(self) -> None:
        if not self.editing:
            raise EditStateError(f"{self!r} is not being edited")

        changes = {
            name: (None if value is _RESET else value)
            for name, value in self._pending.items()
        }
        if changes and self.on_save is not None:
            self.on_save(self, changes)

        for name, value in changes.items():
            if value is None:
                self.fields.pop(name, None)
            else:
                self.fields[name] = value

        self._pending = None
        if changes:
            self.save_count += 1
            self.history.append(changes)
            logger.debug(f"Saved {self!r}: {sorted(changes)}")

    def cancel_edit(self) -> None:
        self._pending = None

    def _require_edit(self, field_name: str) -> None:
        if not self.editing:
            raise EditStateError(
                f"Cannot write {field_name!r}: {self!r} is not in editing mode"
            )
