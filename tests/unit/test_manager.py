"""
ResolutionManager and Provider Unit Tests
"""

import json

from archetype_courier.config import CourierConfig
from archetype_courier.core.direction import Direction
from archetype_courier.core.items import ContentItem, ContentProperty, DataType
from archetype_courier.core.protocols import ResolutionPipeline
from archetype_courier.resolvers.manager import ResolutionManager, create_manager
from archetype_courier.resolvers.provider import (
    ArchetypeDataResolver,
    PropertyDataResolverProvider,
)

from conftest import ARCHETYPE, DependencyProvider, make_data_type, make_schema


class RecordingProvider(PropertyDataResolverProvider):
    def __init__(self, editor_alias):
        self.editor_alias = editor_alias
        self.calls = []

    def packaging_data_type(self, data_type):
        self.calls.append(("packaging_data_type", data_type.unique_id))

    def extracting_data_type(self, data_type):
        self.calls.append(("extracting_data_type", data_type.unique_id))

    def packaging_property(self, item, property_data):
        self.calls.append(("packaging_property", property_data.alias))

    def extracting_property(self, item, property_data):
        self.calls.append(("extracting_property", property_data.alias))


def make_item(*properties):
    return ContentItem(item_id="1", name="Home", data=list(properties))


class TestDispatch:
    """Test routing by editor alias"""

    def test_satisfies_pipeline_protocol(self):
        assert isinstance(ResolutionManager(), ResolutionPipeline)

    def test_property_dispatch(self):
        provider = RecordingProvider("My.Editor")
        manager = ResolutionManager([provider])
        item = make_item(
            ContentProperty(alias="a", property_editor_alias="My.Editor"),
            ContentProperty(alias="b", property_editor_alias="Other.Editor"),
            ContentProperty(alias="c", property_editor_alias="my.editor"),
        )

        manager.packaging_item(item)
        manager.extracting_item(item)

        assert provider.calls == [
            ("packaging_property", "a"),
            ("packaging_property", "c"),
            ("extracting_property", "a"),
            ("extracting_property", "c"),
        ]

    def test_unknown_editor_passes_through(self):
        manager = ResolutionManager()
        prop = ContentProperty(alias="a", property_editor_alias="Umbraco.Textbox", value="x")

        manager.packaging_item(make_item(prop))

        assert prop.value == "x"

    def test_data_type_dispatch(self):
        provider = RecordingProvider("My.Editor")
        manager = ResolutionManager().register(provider)

        manager.packaging_data_type(DataType(unique_id="dt-1", editor_alias="My.Editor"))
        manager.extracting_data_type(DataType(unique_id="dt-2", editor_alias="My.Editor"))
        manager.packaging_data_type(DataType(unique_id="dt-3", editor_alias="Other"))

        assert provider.calls == [
            ("packaging_data_type", "dt-1"),
            ("extracting_data_type", "dt-2"),
        ]

    def test_register_replaces(self):
        first = RecordingProvider("My.Editor")
        second = RecordingProvider("My.Editor")
        manager = ResolutionManager([first, second])

        manager.packaging_item(make_item(ContentProperty(alias="a", property_editor_alias="My.Editor")))

        assert first.calls == []
        assert second.calls == [("packaging_property", "a")]
        assert manager.editor_aliases == ["My.Editor"]

    def test_get_provider_without_alias(self):
        assert ResolutionManager([DependencyProvider()]).get_provider(None) is None

    def test_base_provider_is_pass_through(self):
        provider = PropertyDataResolverProvider()
        prop = ContentProperty(alias="a", value="x")
        data_type = make_data_type(make_schema())
        before = data_type.prevalues[0].value

        provider.packaging_property(make_item(prop), prop)
        provider.extracting_property(make_item(prop), prop)
        provider.packaging_data_type(data_type)
        provider.extracting_data_type(data_type)

        assert prop.value == "x"
        assert data_type.prevalues[0].value == before


class TestCreateManager:
    """Test the composite provider wiring"""

    def test_registers_archetype_provider(self, ids):
        manager = create_manager(ids)

        assert isinstance(manager.get_provider(ARCHETYPE), ArchetypeDataResolver)
        assert manager.get_provider(ARCHETYPE).resolver.pipeline is manager

    def test_config_aliases(self, ids):
        config = CourierConfig(editor_alias="Custom.Nested", prevalue_alias="nestedConfig")
        manager = create_manager(ids, config)
        data_type = make_data_type(make_schema({"alias": "a", "typeLocalId": 5}), alias="nestedConfig")
        data_type.editor_alias = "Custom.Nested"

        manager.resolve_data_type(data_type, Direction.PACKAGING)

        stored = json.loads(data_type.prevalues[0].value)
        assert stored["fieldsets"][0]["properties"][0]["typeStableKey"] == "guid-5"
        assert manager.get_provider(ARCHETYPE) is None

    def test_provider_kind_from_config(self, ids):
        manager = create_manager(ids, CourierConfig(dependency_provider_kind="dataTypeProvider"))
        data_type = make_data_type(make_schema({"alias": "a", "typeLocalId": 5}))

        manager.packaging_data_type(data_type)

        assert [d.provider_kind for d in data_type.dependencies] == ["dataTypeProvider"]

    def test_data_type_round_trip(self, ids, destination_ids):
        data_type = make_data_type(make_schema({"alias": "a", "typeLocalId": 5}))

        create_manager(ids).packaging_data_type(data_type)
        create_manager(destination_ids).extracting_data_type(data_type)

        stored = json.loads(data_type.prevalues[0].value)
        assert stored["fieldsets"][0]["properties"][0]["typeLocalId"] == 105
