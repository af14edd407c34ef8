"""
Shared fixtures and fake collaborators
"""

import json
from typing import Any, Callable, Dict, List, Optional

import pytest

from archetype_courier.core.diagnostics import DiagnosticCollector
from archetype_courier.core.direction import IdentifierKind
from archetype_courier.core.items import ContentItem, DataType, PreValue
from archetype_courier.resolvers.identifiers import InMemoryIdentifierMap
from archetype_courier.resolvers.provider import PropertyDataResolverProvider

ARCHETYPE = "Imulus.Archetype"


class RecordingPipeline:
    """Pipeline double that records every item and optionally acts on it"""

    def __init__(self, action: Optional[Callable[[ContentItem, str], None]] = None):
        self.action = action
        self.calls: List[tuple] = []

    def packaging_item(self, item: ContentItem) -> None:
        self.calls.append(("packaging", item))
        if self.action:
            self.action(item, "packaging")

    def extracting_item(self, item: ContentItem) -> None:
        self.calls.append(("extracting", item))
        if self.action:
            self.action(item, "extracting")

    @property
    def items(self) -> List[ContentItem]:
        return [item for _, item in self.calls]


class DependencyProvider(PropertyDataResolverProvider):
    """Adds one document dependency per property it sees"""

    editor_alias = "Test.Dependency"

    def packaging_property(self, item, property_data):
        item.dependencies.add(f"doc-{property_data.alias}", "document")


class MediaPickerProvider(PropertyDataResolverProvider):
    """Translates media ids and reports the media file as a resource"""

    editor_alias = "Umbraco.MediaPicker"

    def __init__(self, identifier_map: InMemoryIdentifierMap):
        self.identifier_map = identifier_map

    def packaging_property(self, item, property_data):
        stable_key = self.identifier_map.to_stable_key(
            property_data.value, IdentifierKind.MEDIA
        )
        item.dependencies.add(stable_key, "media")
        item.resources.add(f"/media/{stable_key}.jpg")
        property_data.value = stable_key

    def extracting_property(self, item, property_data):
        property_data.value = self.identifier_map.to_local_id(
            property_data.value, IdentifierKind.MEDIA
        )


@pytest.fixture
def ids() -> InMemoryIdentifierMap:
    """Source environment identifiers"""
    return (
        InMemoryIdentifierMap()
        .register(5, "guid-5")
        .register(9, "guid-9")
        .register(10, "guid-10")
        .register(11, "guid-11")
        .register(1200, "media-1200", IdentifierKind.MEDIA)
    )


@pytest.fixture
def destination_ids() -> InMemoryIdentifierMap:
    """Destination environment identifiers for the same stable keys"""
    return (
        InMemoryIdentifierMap()
        .register(105, "guid-5")
        .register(109, "guid-9")
        .register(110, "guid-10")
        .register(111, "guid-11")
        .register(3400, "media-1200", IdentifierKind.MEDIA)
    )


@pytest.fixture
def diagnostics() -> DiagnosticCollector:
    return DiagnosticCollector()


def make_schema(*definitions: Dict[str, Any]) -> Dict[str, Any]:
    return {"fieldsets": [{"alias": "main", "properties": list(definitions)}]}


def make_data_type(schema: Any, alias: str = "archetypeConfig") -> DataType:
    value = schema if isinstance(schema, str) else json.dumps(schema)
    return DataType(
        unique_id="dt-archetype",
        name="Slides",
        editor_alias=ARCHETYPE,
        prevalues=[PreValue(alias=alias, value=value)],
    )


def make_value(*properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"fieldsets": [{"alias": "slide", "properties": list(properties)}]}
