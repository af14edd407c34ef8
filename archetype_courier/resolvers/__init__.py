"""Archetype Courier resolvers

Provides the packaging/extracting logic for the composite editor and the
generic pipeline it plugs into
"""

from .type_rewriter import TypeReferenceRewriter
from .composite import (
    CompositeValueResolver,
    build_nested_item,
    harvest_nested_item,
    nested_item_name,
)
from .provider import ArchetypeDataResolver, PropertyDataResolverProvider
from .manager import ResolutionManager, create_manager
from .identifiers import InMemoryIdentifierMap

__all__ = [
    "TypeReferenceRewriter",
    "CompositeValueResolver",
    "build_nested_item",
    "harvest_nested_item",
    "nested_item_name",
    "ArchetypeDataResolver",
    "PropertyDataResolverProvider",
    "ResolutionManager",
    "create_manager",
    "InMemoryIdentifierMap",
]
