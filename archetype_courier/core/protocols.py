"""
Collaborator protocols

The resolvers own no storage and no generic resolution logic. They are
handed these collaborators explicitly:

- IdentifierMap: local id <-> stable key lookups per object kind
- ResolutionPipeline: resolves every property of a content item
- ValueConverter: raw editor value <-> CompositeValue
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .direction import IdentifierKind
from .items import ContentItem
from .models import CompositeValue


@runtime_checkable
class IdentifierMap(Protocol):
    """
    Bidirectional identifier map

    Lookups raise MissingMappingError (or return None) when the identifier is
    unknown in this environment.
    """

    def to_stable_key(self, local_id: int, kind: IdentifierKind) -> Optional[str]:
        """Environment-local id -> stable key"""
        ...

    def to_local_id(self, stable_key: str, kind: IdentifierKind) -> Optional[Any]:
        """Stable key -> environment-local id"""
        ...


@runtime_checkable
class ResolutionPipeline(Protocol):
    """
    Generic property resolution pipeline

    Both calls mutate property values of the item in place and attach
    dependencies/resources to it. Implementations must be re-entrant.
    """

    def packaging_item(self, item: ContentItem) -> None:
        ...

    def extracting_item(self, item: ContentItem) -> None:
        ...


@runtime_checkable
class ValueConverter(Protocol):
    """Composite editor value converter"""

    def decode(
        self, raw: Any, local_type_id: Optional[int], editor_alias: str
    ) -> Optional[CompositeValue]:
        """Raw editor value -> CompositeValue, None when nothing usable"""
        ...

    def encode(self, value: CompositeValue) -> str:
        """CompositeValue -> canonical JSON text"""
        ...
