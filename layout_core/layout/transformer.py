"""
Rendering Transformer
=====================

Applies a caller-supplied action to every rendering in an item's Shared
and Final layout fields. The action may request deletion of a rendering
by returning ``RenderingActionResult.DELETE``; it may also modify the
entry in place (e.g. point its datasource somewhere else).

A field is only written back when its serialized layout differs from the
normalized original, and the write happens inside a SecurityDisabler and
an EditContext so it is neither blocked by item permissions nor split
across several saves.

Example:
    def drop_obsolete(rendering):
        if rendering.item_id == OBSOLETE_RENDERING_ID:
            return RenderingActionResult.DELETE
        return RenderingActionResult.KEEP

    apply_action_to_all_renderings(item, drop_obsolete)
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import logging

from layout_core.config.settings import LayoutConfig
from layout_core.errors import LayoutParseError
from layout_core.items.base import BaseItem, EditContext
from layout_core.items.fields import LayoutFieldAccessor
from layout_core.items.security import SecurityDisabler
from layout_core.layout.base import BaseLayoutCodec
from layout_core.layout.definition import Device, RenderingEntry
from layout_core.layout.enums import LayoutFieldSlot, RenderingActionResult
from layout_core.layout.xml_codec import XmlLayoutCodec

logger = logging.getLogger(__name__)

RenderingAction = Callable[[RenderingEntry], Optional[RenderingActionResult]]


@dataclass
class TransformResult:
    """
    Outcome of applying an action to one or more layout fields.

    Attributes:
        fields_processed: Fields that held a layout and were parsed
        fields_changed: Fields that were written back
        renderings_visited: Renderings passed to the action
        renderings_deleted: Renderings removed on request of the action
        changed_fields: Names of the fields written back
    """
    fields_processed: int = 0
    fields_changed: int = 0
    renderings_visited: int = 0
    renderings_deleted: int = 0
    changed_fields: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.fields_changed > 0

    def merge(self, other: 'TransformResult') -> None:
        """Merge another result into this one."""
        self.fields_processed += other.fields_processed
        self.fields_changed += other.fields_changed
        self.renderings_visited += other.renderings_visited
        self.renderings_deleted += other.renderings_deleted
        self.changed_fields.extend(other.changed_fields)

    def summary(self) -> str:
        """Generate a text summary of the transformation."""
        lines = [
            f"Fields processed: {self.fields_processed}",
            f"Fields changed: {self.fields_changed}",
            f"Renderings visited: {self.renderings_visited}",
            f"Renderings deleted: {self.renderings_deleted}",
        ]
        if self.changed_fields:
            lines.append(f"Changed: {', '.join(self.changed_fields)}")
        return "\n".join(lines)


class RenderingTransformer:
    """
    Applies rendering actions to the layout fields of items.

    Args:
        codec: Layout codec, defaults to XmlLayoutCodec
        field_accessor: Layout field reader/writer
        config: Field names and codec settings
    """

    def __init__(self,
                 codec: Optional[BaseLayoutCodec] = None,
                 field_accessor: Optional[LayoutFieldAccessor] = None,
                 config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        self.codec = codec or XmlLayoutCodec(self.config.codec)
        self.field_accessor = field_accessor or LayoutFieldAccessor()

    def apply_action_to_all_renderings(self, item: BaseItem,
                                       action: RenderingAction) -> TransformResult:
        """Apply ``action`` to the Shared, then the Final renderings of ``item``."""
        result = self.apply_action_to_all_shared_renderings(item, action)
        result.merge(self.apply_action_to_all_final_renderings(item, action))
        return result

    def apply_action_to_all_shared_renderings(self, item: BaseItem,
                                              action: RenderingAction) -> TransformResult:
        return self.apply_action_to_field(item, LayoutFieldSlot.SHARED, action)

    def apply_action_to_all_final_renderings(self, item: BaseItem,
                                             action: RenderingAction) -> TransformResult:
        return self.apply_action_to_field(item, LayoutFieldSlot.FINAL, action)

    def apply_action_to_field(self, item: BaseItem, slot: LayoutFieldSlot,
                              action: RenderingAction) -> TransformResult:
        """
        Apply ``action`` to every rendering of one layout field.

        Args:
            item: Item owning the field
            slot: Which layout field to process
            action: Called once per rendering

        Returns:
            TransformResult for this field

        Raises:
            LayoutParseError: If the field value is malformed; nothing is written
            PersistenceError: If saving the item fails
        """
        field_name = self.config.fields.field_for(slot)
        result = TransformResult()

        # Field-level read so inherited values are materialized first
        current_xml = self.field_accessor.get_field_value(item, field_name)
        if not current_xml:
            logger.debug(f"{item!r}: {field_name!r} is empty, nothing to do")
            return result

        try:
            new_xml = self.apply_action_to_layout_xml(current_xml, action, result)
        except LayoutParseError as e:
            e.field_name = field_name
            logger.error(f"{item!r}: cannot parse {field_name!r}: {e}")
            raise
        result.fields_processed += 1

        if new_xml is None:
            logger.debug(f"{item!r}: {field_name!r} unchanged")
            return result

        with SecurityDisabler():
            with EditContext(item):
                self.field_accessor.set_field_value(item, field_name, new_xml)

        result.fields_changed += 1
        result.changed_fields.append(field_name)
        logger.info(
            f"{item!r}: updated {field_name!r} "
            f"({result.renderings_deleted} rendering(s) deleted)"
        )
        return result

    def apply_action_to_layout_xml(self, xml: str, action: RenderingAction,
                                   result: Optional[TransformResult] = None) -> Optional[str]:
        """
        Apply ``action`` to every rendering of a serialized layout.

        Args:
            xml: Layout value
            action: Called once per rendering
            result: Optional result to accumulate counters into

        Returns:
            The new serialized layout, or None if nothing changed

        Raises:
            LayoutParseError: If ``xml`` is malformed
        """
        if result is None:
            result = TransformResult()

        layout = self.codec.parse(xml)

        # Compare against the normalized form, not the raw input
        original_xml = self.codec.serialize(layout)

        # Reverse order so removals don't shift entries still to be visited
        for device_index in range(len(layout.devices) - 1, -1, -1):
            device = layout.devices[device_index]
            if not isinstance(device, Device):
                continue

            for rendering_index in range(len(device.renderings) - 1, -1, -1):
                rendering = device.renderings[rendering_index]
                if not isinstance(rendering, RenderingEntry):
                    continue

                result.renderings_visited += 1
                if action(rendering) == RenderingActionResult.DELETE:
                    del device.renderings[rendering_index]
                    result.renderings_deleted += 1

        layout_xml = self.codec.serialize(layout)
        return layout_xml if layout_xml != original_xml else None


_default_transformer: Optional[RenderingTransformer] = None


def get_transformer() -> RenderingTransformer:
    """Get or create the default transformer instance."""
    global _default_transformer
    if _default_transformer is None:
        _default_transformer = RenderingTransformer()
    return _default_transformer


def set_transformer(transformer: Optional[RenderingTransformer]) -> None:
    """Replace the default transformer (None restores a fresh default)."""
    global _default_transformer
    _default_transformer = transformer


def apply_action_to_all_renderings(item: BaseItem, action: RenderingAction) -> TransformResult:
    """Apply ``action`` to all Shared and Final renderings of ``item``."""
    return get_transformer().apply_action_to_all_renderings(item, action)


def apply_action_to_all_shared_renderings(item: BaseItem, action: RenderingAction) -> TransformResult:
    """Apply ``action`` to all Shared renderings of ``item``."""
    return get_transformer().apply_action_to_all_shared_renderings(item, action)


def apply_action_to_all_final_renderings(item: BaseItem, action: RenderingAction) -> TransformResult:
    """Apply ``action`` to all Final renderings of ``item``."""
    return get_transformer().apply_action_to_all_final_renderings(item, action)
