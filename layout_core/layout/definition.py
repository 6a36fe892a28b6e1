"""
Layout Definition Model
=======================

In-memory representation of a layout XML value:

    <r xmlns:xsd="http://www.w3.org/2001/XMLSchema">
      <d id="{device-id}" l="{layout-id}">
        <r id="{rendering-id}" ph="main" uid="{unique-id}" ds="" par="" />
        <p key="main" md="{placeholder-settings-id}" uid="{unique-id}" />
      </d>
    </r>

Every model object wraps the lxml element it was parsed from. The Python
lists (``LayoutDocument.devices``, ``Device.renderings``, ...) are the
source of truth for membership and order; the codec rebuilds the element
tree from them on serialization. Attributes the helpers do not know about
(rules, caching flags, delta namespaces) pass through untouched.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from lxml import etree


class _ElementWrapper:
    """Attribute access helpers over a wrapped lxml element."""

    element: Any

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.element.get(name, default)

    def set(self, name: str, value: Optional[str]) -> None:
        """Set an attribute, removing it when ``value`` is None."""
        if value is None:
            if name in self.element.attrib:
                del self.element.attrib[name]
        else:
            self.element.set(name, value)

    @property
    def attributes(self) -> Dict[str, str]:
        """Copy of the element attributes."""
        return dict(self.element.attrib)


@dataclass(eq=False)
class RenderingEntry(_ElementWrapper):
    """
    One placed component inside a device.

    The named properties cover the common attributes; anything else is
    reachable through ``get``/``set`` or the raw ``element``.
    """

    element: Any = field(default_factory=lambda: etree.Element("r"))

    @property
    def item_id(self) -> Optional[str]:
        return self.get("id")

    @item_id.setter
    def item_id(self, value: Optional[str]) -> None:
        self.set("id", value)

    @property
    def placeholder(self) -> Optional[str]:
        return self.get("ph")

    @placeholder.setter
    def placeholder(self, value: Optional[str]) -> None:
        self.set("ph", value)

    @property
    def unique_id(self) -> Optional[str]:
        return self.get("uid")

    @unique_id.setter
    def unique_id(self, value: Optional[str]) -> None:
        self.set("uid", value)

    @property
    def datasource(self) -> Optional[str]:
        return self.get("ds")

    @datasource.setter
    def datasource(self, value: Optional[str]) -> None:
        self.set("ds", value)

    @property
    def parameters(self) -> Optional[str]:
        return self.get("par")

    @parameters.setter
    def parameters(self, value: Optional[str]) -> None:
        self.set("par", value)

    def __repr__(self) -> str:
        return (f"RenderingEntry(item_id={self.item_id!r}, "
                f"placeholder={self.placeholder!r}, unique_id={self.unique_id!r})")


@dataclass(eq=False)
class PlaceholderEntry(_ElementWrapper):
    """Placeholder settings attached to a device."""

    element: Any = field(default_factory=lambda: etree.Element("p"))

    @property
    def key(self) -> Optional[str]:
        return self.get("key")

    @property
    def metadata_item_id(self) -> Optional[str]:
        return self.get("md")


@dataclass(eq=False)
class Device(_ElementWrapper):
    """
    A target device and its ordered renderings.

    Attributes:
        element: The device element (``id``, ``l`` and any other attributes)
        renderings: Ordered rendering entries
        placeholders: Placeholder settings, serialized after renderings
        extra: Other child elements, serialized last
    """

    element: Any = field(default_factory=lambda: etree.Element("d"))
    renderings: List[Any] = field(default_factory=list)
    placeholders: List[Any] = field(default_factory=list)
    extra: List[Any] = field(default_factory=list)

    @property
    def device_id(self) -> Optional[str]:
        return self.get("id")

    @property
    def layout_id(self) -> Optional[str]:
        return self.get("l")

    def iter_renderings(self) -> Iterator[RenderingEntry]:
        """Iterate rendering entries, skipping anything of another shape."""
        for rendering in self.renderings:
            if isinstance(rendering, RenderingEntry):
                yield rendering

    def get_rendering(self, unique_id: str) -> Optional[RenderingEntry]:
        """Find a rendering by its ``uid`` attribute."""
        for rendering in self.iter_renderings():
            if rendering.unique_id == unique_id:
                return rendering
        return None

    def __repr__(self) -> str:
        return f"Device(device_id={self.device_id!r}, renderings={len(self.renderings)})"


@dataclass(eq=False)
class LayoutDocument(_ElementWrapper):
    """
    Parsed layout field value.

    Attributes:
        element: Root element (tag, attributes and namespace declarations)
        devices: Ordered devices; members of another type are ignored
        extra: Non-device child elements of the root, serialized last
    """

    element: Any = field(default_factory=lambda: etree.Element("r"))
    devices: List[Any] = field(default_factory=list)
    extra: List[Any] = field(default_factory=list)

    def iter_devices(self) -> Iterator[Device]:
        """Iterate devices, skipping anything of another shape."""
        for device in self.devices:
            if isinstance(device, Device):
                yield device

    def get_device(self, device_id: str) -> Optional[Device]:
        """Find a device by id (case-insensitive, as ids are GUID strings)."""
        wanted = device_id.lower()
        for device in self.iter_devices():
            if (device.device_id or "").lower() == wanted:
                return device
        return None

    def iter_renderings(self) -> Iterator[RenderingEntry]:
        """Iterate every rendering of every device in document order."""
        for device in self.iter_devices():
            yield from device.iter_renderings()

    @property
    def rendering_count(self) -> int:
        return sum(1 for _ in self.iter_renderings())

    def __repr__(self) -> str:
        return f"LayoutDocument(devices={len(self.devices)})"


def make_device(device_id: str, layout_id: Optional[str] = None,
                tag: str = "d") -> Device:
    """Build an empty device."""
    element = etree.Element(tag)
    element.set("id", device_id)
    if layout_id is not None:
        element.set("l", layout_id)
    return Device(element)


def make_rendering(item_id: str, placeholder: str = "",
                   unique_id: Optional[str] = None,
                   tag: str = "r", **attrib: str) -> RenderingEntry:
    """
    Build a new rendering entry.

    Args:
        item_id: Rendering definition item id
        placeholder: Placeholder key
        unique_id: Unique id of the placement
        tag: Rendering element tag
        **attrib: Additional attributes (``ds``, ``par``, ...)

    Returns:
        RenderingEntry wrapping a fresh element
    """
    element = etree.Element(tag)
    element.set("id", item_id)
    element.set("ph", placeholder)
    if unique_id is not None:
        element.set("uid", unique_id)
    for name, value in attrib.items():
        element.set(name, value)
    return RenderingEntry(element)
