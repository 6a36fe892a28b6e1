"""
XML Layout Codec
================

lxml-based parser and serializer for layout XML values.

Serialization is compact (no pretty printing, no XML declaration) and
blank text is dropped while parsing, so ``serialize(parse(x))`` is a
stable normalized form: comparing two normalized strings tells whether a
layout actually changed.
"""

import logging
from typing import Any, Iterable, Optional

from lxml import etree

from layout_core.config.settings import CodecConfig
from layout_core.errors import LayoutParseError
from layout_core.layout.base import BaseLayoutCodec
from layout_core.layout.definition import (
    Device,
    LayoutDocument,
    PlaceholderEntry,
    RenderingEntry,
    _ElementWrapper,
)

logger = logging.getLogger(__name__)


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace prefix.

    Comments and processing instructions yield an empty string.
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class XmlLayoutCodec(BaseLayoutCodec):
    """
    Layout codec for the ``<r><d><r/></d></r>`` layout XML convention.

    Example:
        codec = XmlLayoutCodec()
        document = codec.parse(field_value)
        del document.devices[0].renderings[0]
        new_value = codec.serialize(document)
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        # The value is always a decoded string, so any declared encoding is ignored
        self._parser = etree.XMLParser(
            encoding="utf-8",
            remove_blank_text=self.config.strip_whitespace,
            resolve_entities=False,
            load_dtd=False,
            no_network=True,
        )

    def parse(self, xml: str) -> LayoutDocument:
        if xml is None or not xml.strip():
            raise LayoutParseError("Layout value is empty")

        try:
            root = etree.fromstring(xml.encode("utf-8"), parser=self._parser)
        except etree.XMLSyntaxError as e:
            raise LayoutParseError(f"Malformed layout XML: {e}") from e

        # Serialization drops the DOCTYPE, so entities declared there would
        # leave unparseable references behind
        docinfo = root.getroottree().docinfo
        if docinfo.doctype or docinfo.internalDTD is not None:
            raise LayoutParseError("Layout XML must not contain a DOCTYPE")

        document = LayoutDocument(root)
        for child in root:
            name = local_name(child)
            if name == self.config.device_tag:
                document.devices.append(self._parse_device(child))
            elif name:
                document.extra.append(child)

        logger.debug(f"Parsed layout with {len(document.devices)} device(s)")
        return document

    def _parse_device(self, element: Any) -> Device:
        device = Device(element)
        for child in element:
            name = local_name(child)
            if name == self.config.rendering_tag:
                device.renderings.append(RenderingEntry(child))
            elif name == self.config.placeholder_tag:
                device.placeholders.append(PlaceholderEntry(child))
            elif name:
                device.extra.append(child)
        return device

    def serialize(self, document: LayoutDocument) -> str:
        root = document.element
        devices = []
        for device in document.devices:
            if not isinstance(device, Device):
                logger.debug(f"Skipping non-device member: {device!r}")
                continue
            self._rebuild(device.element,
                          device.renderings, device.placeholders, device.extra)
            devices.append(device.element)

        self._rebuild(root, devices, document.extra)
        return etree.tostring(root, encoding="unicode")

    def _rebuild(self, parent: Any, *groups: Iterable[Any]) -> None:
        """Replace the children of ``parent`` with ``groups`` in order."""
        for child in list(parent):
            parent.remove(child)

        for group in groups:
            for member in group:
                if isinstance(member, _ElementWrapper):
                    element = member.element
                elif etree.iselement(member):
                    element = member
                else:
                    logger.debug(f"Skipping unexpected layout member: {member!r}")
                    continue
                if self.config.strip_whitespace:
                    element.tail = None
                parent.append(element)

    @property
    def format_name(self) -> str:
        return "XML"
