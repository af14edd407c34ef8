"""
Property data resolver providers

A provider handles one property editor. The resolution manager calls its
hooks for every data type using the editor and for every property value
stored with it, in the packaging or extracting direction.
"""

from typing import Optional

from ..core.diagnostics import DiagnosticSink
from ..core.direction import DATA_TYPE_PROVIDER, Direction
from ..core.items import ContentItem, ContentProperty, DataType
from ..core.protocols import IdentifierMap, ResolutionPipeline, ValueConverter
from .composite import DEFAULT_EDITOR_ALIAS, CompositeValueResolver
from .type_rewriter import DEFAULT_PREVALUE_ALIAS, TypeReferenceRewriter


class PropertyDataResolverProvider:
    """
    Base provider

    Every hook is a pass-through; subclasses override the ones their editor
    needs.
    """

    editor_alias: str = ""

    def packaging_data_type(self, data_type: DataType) -> None:
        pass

    def extracting_data_type(self, data_type: DataType) -> None:
        pass

    def packaging_property(self, item: ContentItem, property_data: ContentProperty) -> None:
        pass

    def extracting_property(self, item: ContentItem, property_data: ContentProperty) -> None:
        pass


class ArchetypeDataResolver(PropertyDataResolverProvider):
    """
    Provider for the composite (Archetype) property editor

    Data types go through TypeReferenceRewriter, property values through
    CompositeValueResolver.
    """

    def __init__(
        self,
        identifier_map: IdentifierMap,
        pipeline: ResolutionPipeline,
        converter: Optional[ValueConverter] = None,
        editor_alias: str = DEFAULT_EDITOR_ALIAS,
        prevalue_alias: str = DEFAULT_PREVALUE_ALIAS,
        json_indent: Optional[int] = 2,
        provider_kind: str = DATA_TYPE_PROVIDER,
        on_diagnostic: Optional[DiagnosticSink] = None,
    ):
        self.editor_alias = editor_alias
        self.rewriter = TypeReferenceRewriter(
            identifier_map,
            prevalue_alias=prevalue_alias,
            indent=json_indent,
            provider_kind=provider_kind,
            on_diagnostic=on_diagnostic,
        )
        self.resolver = CompositeValueResolver(
            identifier_map,
            pipeline,
            converter=converter,
            editor_alias=editor_alias,
            on_diagnostic=on_diagnostic,
        )

    def packaging_data_type(self, data_type: DataType) -> None:
        self.rewriter.rewrite(data_type, Direction.PACKAGING)

    def extracting_data_type(self, data_type: DataType) -> None:
        self.rewriter.rewrite(data_type, Direction.EXTRACTING)

    def packaging_property(self, item: ContentItem, property_data: ContentProperty) -> None:
        self.resolver.resolve(item, property_data, Direction.PACKAGING)

    def extracting_property(self, item: ContentItem, property_data: ContentProperty) -> None:
        self.resolver.resolve(item, property_data, Direction.EXTRACTING)
