"""
Base Item Classes
=================

Abstract item interface the layout helpers depend on, plus the edit
context used to batch writes into one atomic save. Hosts adapt their
own content store by subclassing ``BaseItem``.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class BaseItem(ABC):
    """
    Abstract base class for content items.

    Writes made with ``set_raw_value``/``reset_field`` are only legal
    between ``begin_edit`` and ``end_edit`` and become visible as one
    save when ``end_edit`` is called.

    Example:
        class CmsItem(BaseItem):
            def __init__(self, record):
                self.record = record

            def get_raw_value(self, field_name):
                return self.record.fields.get(field_name)
            ...
    """

    @property
    @abstractmethod
    def item_id(self) -> str:
        """Unique identifier of the item."""
        pass

    @property
    def name(self) -> str:
        return self.item_id

    @abstractmethod
    def get_raw_value(self, field_name: str) -> Optional[str]:
        """
        Return the value stored on the item itself.

        Args:
            field_name: Field to read

        Returns:
            Stored value, or None when the field has no own value
        """
        pass

    @abstractmethod
    def get_standard_value(self, field_name: str) -> Optional[str]:
        """Return the value inherited by the field (template default)."""
        pass

    @abstractmethod
    def set_raw_value(self, field_name: str, value: str) -> None:
        """Store a value on the item. Requires an open edit."""
        pass

    @abstractmethod
    def reset_field(self, field_name: str) -> None:
        """Drop the item's own value so the field inherits again."""
        pass

    @abstractmethod
    def begin_edit(self) -> None:
        """Open an edit; raises AccessDeniedError without write access."""
        pass

    @abstractmethod
    def end_edit(self) -> None:
        """Commit pending writes as one save."""
        pass

    @abstractmethod
    def cancel_edit(self) -> None:
        """Discard pending writes."""
        pass

    @property
    @abstractmethod
    def editing(self) -> bool:
        """True between ``begin_edit`` and ``end_edit``/``cancel_edit``."""
        pass

    def can_write(self) -> bool:
        """Whether the current context may write to the item."""
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.item_id!r})"


class EditContext:
    """
    Context manager that wraps writes to an item in a single save.

    Commits on normal exit; cancels the edit and re-raises on failure.

    Example:
        with EditContext(item):
            item.set_raw_value("Title", "Home")
    """

    def __init__(self, item: BaseItem):
        self.item = item

    def __enter__(self) -> BaseItem:
        self.item.begin_edit()
        return self.item

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            logger.warning(f"Cancelling edit of {self.item!r}: {exc_val}")
            self.item.cancel_edit()
            return False

        try:
            self.item.end_edit()
        except Exception:
            if self.item.editing:
                self.item.cancel_edit()
            raise
        return False
