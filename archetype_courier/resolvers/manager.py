"""
Resolution manager

Generic resolution pipeline: dispatches data types and property values to
the provider registered for their property editor. Properties of editors
without a provider pass through unchanged.
"""

from typing import Dict, List, Optional

from ..config import CourierConfig
from ..core.diagnostics import DiagnosticSink
from ..core.direction import Direction
from ..core.items import ContentItem, DataType
from ..core.protocols import IdentifierMap, ValueConverter
from ..core.converter import CompositeValueConverter
from ..utils.logging import get_logger
from .provider import ArchetypeDataResolver, PropertyDataResolverProvider

logger = get_logger(__name__)


class ResolutionManager:
    """
    Provider registry and ResolutionPipeline implementation

    Keeps no per-call state, so providers may call back into it while
    resolving (the composite provider does so for every nested property).

    Example:
        >>> manager = ResolutionManager()
        >>> manager.register(ArchetypeDataResolver(ids, manager))
        >>> manager.packaging_item(item)
    """

    def __init__(self, providers: Optional[List[PropertyDataResolverProvider]] = None):
        self._providers: Dict[str, PropertyDataResolverProvider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: PropertyDataResolverProvider) -> "ResolutionManager":
        """
        Register a provider for its editor alias, replacing any previous one

        Returns:
            self, supports method chaining
        """
        self._providers[provider.editor_alias.lower()] = provider
        return self

    def get_provider(self, editor_alias: Optional[str]) -> Optional[PropertyDataResolverProvider]:
        if not editor_alias:
            return None
        return self._providers.get(editor_alias.lower())

    @property
    def editor_aliases(self) -> List[str]:
        return [provider.editor_alias for provider in self._providers.values()]

    def packaging_item(self, item: ContentItem) -> None:
        self.resolve_item(item, Direction.PACKAGING)

    def extracting_item(self, item: ContentItem) -> None:
        self.resolve_item(item, Direction.EXTRACTING)

    def resolve_item(self, item: ContentItem, direction: Direction) -> None:
        """Run every property of item through its editor's provider"""
        for property_data in item.data:
            provider = self.get_provider(property_data.property_editor_alias)
            if provider is None:
                continue
            logger.debug(
                "Resolving property",
                item=item.name,
                property_alias=property_data.alias,
                editor=property_data.property_editor_alias,
                direction=direction.value,
            )
            if direction == Direction.PACKAGING:
                provider.packaging_property(item, property_data)
            else:
                provider.extracting_property(item, property_data)

    def packaging_data_type(self, data_type: DataType) -> None:
        self.resolve_data_type(data_type, Direction.PACKAGING)

    def extracting_data_type(self, data_type: DataType) -> None:
        self.resolve_data_type(data_type, Direction.EXTRACTING)

    def resolve_data_type(self, data_type: DataType, direction: Direction) -> None:
        provider = self.get_provider(data_type.editor_alias)
        if provider is None:
            return
        if direction == Direction.PACKAGING:
            provider.packaging_data_type(data_type)
        else:
            provider.extracting_data_type(data_type)


def create_manager(
    identifier_map: IdentifierMap,
    config: Optional[CourierConfig] = None,
    converter: Optional[ValueConverter] = None,
    on_diagnostic: Optional[DiagnosticSink] = None,
) -> ResolutionManager:
    """
    Build a manager with the composite editor's provider registered

    Args:
        identifier_map: Identifier map of the current environment
        config: Editor/prevalue aliases and JSON formatting
        converter: Value converter, CompositeValueConverter by default
        on_diagnostic: Optional diagnostic sink

    Returns:
        ResolutionManager instance
    """
    config = config or CourierConfig()
    manager = ResolutionManager()
    manager.register(
        ArchetypeDataResolver(
            identifier_map,
            manager,
            converter=converter or CompositeValueConverter(indent=config.json_indent),
            editor_alias=config.editor_alias,
            prevalue_alias=config.prevalue_alias,
            json_indent=config.json_indent,
            provider_kind=config.dependency_provider_kind,
            on_diagnostic=on_diagnostic,
        )
    )
    return manager
