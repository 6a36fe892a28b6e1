"""
Base Codec Classes
==================

Abstract codec interface used by the rendering transformer. Extend it to
support a different layout storage format.
"""

from abc import ABC, abstractmethod
import logging

from layout_core.layout.definition import LayoutDocument

logger = logging.getLogger(__name__)


class BaseLayoutCodec(ABC):
    """
    Abstract base class for layout codecs.

    Example:
        class JsonLayoutCodec(BaseLayoutCodec):
            def parse(self, xml: str) -> LayoutDocument:
                ...

            def serialize(self, document: LayoutDocument) -> str:
                ...
    """

    @abstractmethod
    def parse(self, xml: str) -> LayoutDocument:
        """
        Parse a layout field value.

        Args:
            xml: Serialized layout

        Returns:
            Parsed LayoutDocument

        Raises:
            LayoutParseError: If the value is not a well-formed layout
        """
        pass

    @abstractmethod
    def serialize(self, document: LayoutDocument) -> str:
        """
        Serialize a layout document.

        Args:
            document: Document to serialize

        Returns:
            Serialized layout string
        """
        pass

    def normalize(self, xml: str) -> str:
        """Return ``serialize(parse(xml))``."""
        return self.serialize(self.parse(xml))

    @property
    def format_name(self) -> str:
        """Return the name of the storage format (e.g., 'XML')."""
        return "Unknown"
