"""
Courier item records

Records handed to the resolvers by the host: data types with their
prevalues, content items with their properties, and the dependency/resource
collections accumulated on them while packaging.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..types.common import DataTypeReference


@dataclass(frozen=True)
class Dependency:
    """Item another item needs at the destination"""

    stable_key: str
    provider_kind: str
    name: Optional[str] = None


@dataclass(frozen=True)
class Resource:
    """External resource (file, media asset) bundled with an item"""

    path: str
    name: Optional[str] = None


class _RecordSet:
    """
    Append-only record set

    Insertion order is kept for readability only; duplicates are collapsed
    and nothing is ever removed.
    """

    def __init__(self, records: Optional[Iterable[Any]] = None):
        self._records: Dict[Any, None] = {}
        if records:
            self.extend(records)

    def extend(self, records: Iterable[Any]) -> None:
        for record in records:
            self._records[record] = None

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record: object) -> bool:
        return record in self._records

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._records)!r})"


class DependencyCollection(_RecordSet):
    def add(
        self, stable_key: str, provider_kind: str, name: Optional[str] = None
    ) -> Dependency:
        dependency = Dependency(stable_key, provider_kind, name)
        self._records[dependency] = None
        return dependency

    def keys(self) -> List[str]:
        return [dependency.stable_key for dependency in self]


class ResourceCollection(_RecordSet):
    def add(self, path: str, name: Optional[str] = None) -> Resource:
        resource = Resource(path, name)
        self._records[resource] = None
        return resource


@dataclass
class PreValue:
    """Single configuration entry of a data type"""

    alias: str
    value: Optional[str] = None
    id: Optional[int] = None
    sort_order: int = 0


@dataclass
class DataType:
    """
    Data type (type definition) being packaged or extracted

    For the composite editor, prevalue 0 holds the JSON schema listing the
    allowed fieldsets and the data type of each property.
    """

    unique_id: str
    name: str = ""
    editor_alias: str = ""
    prevalues: List[PreValue] = field(default_factory=list)
    dependencies: DependencyCollection = field(default_factory=DependencyCollection)


@dataclass
class ContentProperty:
    """
    Property occurrence on a content item

    data_type is the stable key of the property's data type, or its local id
    when no stable key is known.
    """

    alias: str
    data_type: Optional[DataTypeReference] = None
    property_editor_alias: str = ""
    value: Any = None


@dataclass
class ContentItem:
    """
    Content item (container) processed by the resolution pipeline

    depth is 0 for real content and grows by one for every synthetic item the
    composite resolver builds while recursing into nested properties.
    """

    item_id: str
    name: str = ""
    data: List[ContentProperty] = field(default_factory=list)
    dependencies: DependencyCollection = field(default_factory=DependencyCollection)
    resources: ResourceCollection = field(default_factory=ResourceCollection)
    depth: int = 0

    @property
    def is_nested(self) -> bool:
        return self.depth > 0
