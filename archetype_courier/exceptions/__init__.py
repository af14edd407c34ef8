"""Archetype Courier exceptions

Provides all exception classes used by the resolvers
"""

from .errors import (
    CourierError,
    MissingMappingError,
    MalformedPayloadError,
    PipelineError,
    ConfigurationError,
)

__all__ = [
    "CourierError",
    "MissingMappingError",
    "MalformedPayloadError",
    "PipelineError",
    "ConfigurationError",
]
