"""
Archetype Courier

Moves composite (Archetype) property data between environments:
translates data type references in composite schemas and resolves every
nested property value through the generic resolution pipeline.
"""

__version__ = "0.1.0"

from .config import CourierConfig, load_config_from_env, load_config_from_file
from .core import (
    CompositeSchema,
    CompositeValue,
    CompositeValueConverter,
    ContentItem,
    ContentProperty,
    DataType,
    Dependency,
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    Direction,
    IdentifierKind,
    PreValue,
    Resource,
)
from .exceptions import (
    CourierError,
    MissingMappingError,
    MalformedPayloadError,
    PipelineError,
    ConfigurationError,
)
from .resolvers import (
    ArchetypeDataResolver,
    CompositeValueResolver,
    InMemoryIdentifierMap,
    PropertyDataResolverProvider,
    ResolutionManager,
    TypeReferenceRewriter,
    create_manager,
)

__all__ = [
    "__version__",
    # Configuration
    "CourierConfig",
    "load_config_from_env",
    "load_config_from_file",
    # Core
    "CompositeSchema",
    "CompositeValue",
    "CompositeValueConverter",
    "ContentItem",
    "ContentProperty",
    "DataType",
    "Dependency",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "Direction",
    "IdentifierKind",
    "PreValue",
    "Resource",
    # Exceptions
    "CourierError",
    "MissingMappingError",
    "MalformedPayloadError",
    "PipelineError",
    "ConfigurationError",
    # Resolvers
    "ArchetypeDataResolver",
    "CompositeValueResolver",
    "InMemoryIdentifierMap",
    "PropertyDataResolverProvider",
    "ResolutionManager",
    "TypeReferenceRewriter",
    "create_manager",
]
