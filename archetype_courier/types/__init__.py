"""Archetype Courier type aliases"""

from .common import (
    LocalId,
    StableKey,
    DataTypeReference,
    IdentifierTable,
    StableKeyIndex,
    LocalIdIndex,
)

__all__ = [
    "LocalId",
    "StableKey",
    "DataTypeReference",
    "IdentifierTable",
    "StableKeyIndex",
    "LocalIdIndex",
]
