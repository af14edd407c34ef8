"""
Archetype Courier Exception Definitions

Error types raised while translating composite property data between
environments: MissingMappingError, MalformedPayloadError, PipelineError and
ConfigurationError.
"""

from typing import Any, Dict, Optional


class CourierError(Exception):
    """Archetype Courier base exception"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingMappingError(CourierError):
    """
    Identifier mapping miss

    Raised by an identifier map when a local id has no stable key (or the
    reverse) in the current environment. Resolvers degrade gracefully and
    leave the untranslated field as-is.
    """

    pass


class MalformedPayloadError(CourierError):
    """
    Malformed payload

    A type definition's schema or a property value could not be parsed into
    the composite structure. Treated as a no-op for that single payload.
    """

    pass


class PipelineError(CourierError):
    """
    Nested resolution failure

    The resolution pipeline raised while resolving a nested property. Always
    propagated to the caller of the resolver.
    """

    pass


class ConfigurationError(CourierError):
    """
    Configuration error

    Invalid configuration values, identifier map files or CLI input.
    """

    pass
