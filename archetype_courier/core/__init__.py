"""Archetype Courier core components

Provides the building blocks shared by the resolvers:
- Composite schema and value models
- Data type and content item records
- Collaborator protocols and the default value converter
- Diagnostics
"""

from .direction import Direction, IdentifierKind, DATA_TYPE_PROVIDER
from .models import (
    CompositeSchema,
    SchemaFieldset,
    SchemaProperty,
    CompositeValue,
    FieldsetInstance,
    PropertyInstance,
)
from .items import (
    ContentItem,
    ContentProperty,
    DataType,
    Dependency,
    DependencyCollection,
    PreValue,
    Resource,
    ResourceCollection,
)
from .protocols import IdentifierMap, ResolutionPipeline, ValueConverter
from .converter import CompositeValueConverter
from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind, DiagnosticSink

__all__ = [
    # Direction
    "Direction",
    "IdentifierKind",
    "DATA_TYPE_PROVIDER",
    # Models
    "CompositeSchema",
    "SchemaFieldset",
    "SchemaProperty",
    "CompositeValue",
    "FieldsetInstance",
    "PropertyInstance",
    # Items
    "ContentItem",
    "ContentProperty",
    "DataType",
    "Dependency",
    "DependencyCollection",
    "PreValue",
    "Resource",
    "ResourceCollection",
    # Collaborators
    "IdentifierMap",
    "ResolutionPipeline",
    "ValueConverter",
    "CompositeValueConverter",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "DiagnosticSink",
]
