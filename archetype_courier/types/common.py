"""
Archetype Courier shared type definitions

Type aliases shared across the records, collaborators and resolvers
"""

from typing import Dict, Mapping, Tuple, Union

# Identifier types
LocalId = int
StableKey = str

# Reference to a data type: its stable key, or its local id when unmapped
DataTypeReference = Union[StableKey, LocalId]

# Identifier map file shape: {kind: {local_id: stable_key}}
IdentifierTable = Mapping[str, Union[Mapping[Union[str, int], str], str]]

# (kind, identifier) lookup tables
StableKeyIndex = Dict[Tuple[str, LocalId], StableKey]
LocalIdIndex = Dict[Tuple[str, StableKey], LocalId]
