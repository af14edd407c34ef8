"""
Composite value resolver

Resolves the value of a composite (Archetype) property by running each of
its nested properties through the generic resolution pipeline, as if every
nested property were the only property of a content item of its own.

The synthetic request adapter (build_nested_item / harvest_nested_item)
builds that one-property item and copies its results back:

- dependencies and resources are merged into the real item
- the resolved value is written back into the nested property

Only the root composite is serialized to JSON text. Nested composites are
returned as CompositeValue objects so their parent serializes once.
"""

from typing import Any, Optional

from ..core.converter import CompositeValueConverter
from ..core.diagnostics import DiagnosticKind, DiagnosticSink, emit
from ..core.direction import Direction, IdentifierKind
from ..core.items import ContentItem, ContentProperty
from ..core.models import PropertyInstance
from ..core.protocols import IdentifierMap, ResolutionPipeline, ValueConverter
from ..exceptions.errors import CourierError, MissingMappingError, PipelineError
from ..types.common import DataTypeReference
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EDITOR_ALIAS = "Imulus.Archetype"


def nested_item_name(
    item: ContentItem, editor_alias: str, nested_property: PropertyInstance
) -> str:
    """Display name of the synthetic item built for nested_property"""
    return (
        f"{item.name} [{editor_alias}: Nested "
        f"{nested_property.editor_kind} ({nested_property.alias})]"
    )


def build_nested_item(
    item: ContentItem,
    nested_property: PropertyInstance,
    data_type: Optional[DataTypeReference],
    editor_alias: str,
) -> ContentItem:
    """
    Build a one-property content item for nested_property

    The item shares the real item's id, is one level deeper and holds a
    single ContentProperty carrying the nested property's alias, data type
    reference, editor alias and current value. Its dependency and resource
    collections start empty so harvest_nested_item can collect exactly what
    the pipeline attached.
    """
    return ContentItem(
        item_id=item.item_id,
        name=nested_item_name(item, editor_alias, nested_property),
        data=[
            ContentProperty(
                alias=nested_property.alias,
                data_type=data_type,
                property_editor_alias=nested_property.editor_kind,
                value=nested_property.value,
            )
        ],
        depth=item.depth + 1,
    )


def harvest_nested_item(item: ContentItem, nested_item: ContentItem) -> Any:
    """
    Merge nested_item's dependencies and resources into item

    Returns:
        The resolved value of the nested item's single property
    """
    item.dependencies.extend(nested_item.dependencies)
    item.resources.extend(nested_item.resources)
    if not nested_item.data:
        return None
    return nested_item.data[0].value


class CompositeValueResolver:
    """
    Resolves composite property values in either direction

    Args:
        identifier_map: Data type id <-> stable key lookups
        pipeline: Generic pipeline used for every nested property
        converter: Raw value <-> CompositeValue converter
        editor_alias: Alias of the composite property editor
        on_diagnostic: Optional sink for skipped values and missing mappings
    """

    def __init__(
        self,
        identifier_map: IdentifierMap,
        pipeline: ResolutionPipeline,
        converter: Optional[ValueConverter] = None,
        editor_alias: str = DEFAULT_EDITOR_ALIAS,
        on_diagnostic: Optional[DiagnosticSink] = None,
    ):
        self.identifier_map = identifier_map
        self.pipeline = pipeline
        self.converter = converter or CompositeValueConverter()
        self.editor_alias = editor_alias
        self.on_diagnostic = on_diagnostic

    def resolve(
        self, item: ContentItem, occurrence: ContentProperty, direction: Direction
    ) -> None:
        """
        Resolve occurrence.value in place

        Raises:
            PipelineError: A nested property failed to resolve
        """
        if occurrence.value is None:
            return
        if isinstance(occurrence.value, str) and not occurrence.value.strip():
            return

        local_type_id = self._local_type_id(item, occurrence)
        composite = self.converter.decode(
            occurrence.value, local_type_id, self.editor_alias
        )
        if composite is None:
            logger.debug(
                "Composite value could not be decoded, passing through",
                item=item.name,
                property_alias=occurrence.alias,
            )
            emit(
                self.on_diagnostic,
                DiagnosticKind.MALFORMED_PAYLOAD,
                "Composite value could not be decoded",
                item_id=item.item_id,
                item=item.name,
                property_alias=occurrence.alias,
            )
            return

        for nested_property in composite.iter_properties():
            self._resolve_nested(item, nested_property, direction)

        if item.is_nested:
            occurrence.value = composite
        else:
            occurrence.value = self.converter.encode(composite)

    def _resolve_nested(
        self, item: ContentItem, nested_property: PropertyInstance, direction: Direction
    ) -> None:
        nested_item = build_nested_item(
            item,
            nested_property,
            self._data_type_reference(item, nested_property),
            self.editor_alias,
        )

        logger.debug(
            "Resolving nested property",
            item=nested_item.name,
            direction=direction.value,
            depth=nested_item.depth,
        )

        try:
            if direction == Direction.PACKAGING:
                self.pipeline.packaging_item(nested_item)
            elif direction == Direction.EXTRACTING:
                self.pipeline.extracting_item(nested_item)
        except CourierError:
            raise
        except Exception as e:
            raise PipelineError(
                f"Failed to resolve nested property '{nested_property.alias}' "
                f"of {item.name!r}: {e}",
                {
                    "item_id": item.item_id,
                    "item": nested_item.name,
                    "property_alias": nested_property.alias,
                    "direction": direction.value,
                },
            ) from e

        nested_property.value = harvest_nested_item(item, nested_item)

    def _local_type_id(
        self, item: ContentItem, occurrence: ContentProperty
    ) -> Optional[int]:
        reference = occurrence.data_type
        if reference is None or isinstance(reference, int):
            return reference
        try:
            return int(self.identifier_map.to_local_id(reference, IdentifierKind.DATA_TYPE))
        except (MissingMappingError, TypeError, ValueError):
            self._missing(item, occurrence.alias, f"No local data type for {reference!r}")
            return None

    def _data_type_reference(
        self, item: ContentItem, nested_property: PropertyInstance
    ) -> Optional[DataTypeReference]:
        try:
            stable_key = self.identifier_map.to_stable_key(
                nested_property.type_local_id, IdentifierKind.DATA_TYPE
            )
        except MissingMappingError:
            stable_key = None

        if stable_key:
            return stable_key
        self._missing(
            item,
            nested_property.alias,
            f"No stable key for data type {nested_property.type_local_id}",
        )
        return nested_property.type_local_id

    def _missing(self, item: ContentItem, property_alias: str, message: str) -> None:
        logger.warning(message, item=item.name, property_alias=property_alias)
        emit(
            self.on_diagnostic,
            DiagnosticKind.MISSING_MAPPING,
            message,
            item_id=item.item_id,
            item=item.name,
            property_alias=property_alias,
        )
