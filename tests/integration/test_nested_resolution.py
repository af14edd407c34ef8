"""
Nested Resolution Integration Tests

Runs composites nested inside composites through the full ResolutionManager,
in both directions
"""

import json

import pytest

from archetype_courier.core.direction import Direction
from archetype_courier.core.items import ContentItem, ContentProperty, Dependency, Resource
from archetype_courier.exceptions.errors import MissingMappingError, PipelineError
from archetype_courier.resolvers.manager import create_manager

from conftest import ARCHETYPE, DependencyProvider, MediaPickerProvider, make_value


def inner_value():
    return make_value(
        {"alias": "title", "typeLocalId": 9, "editorKind": "Umbraco.Textbox", "value": "Hello"},
        {"alias": "image", "typeLocalId": 11, "editorKind": "Umbraco.MediaPicker", "value": 1200},
    )


def outer_value(inner):
    return make_value(
        {"alias": "heading", "typeLocalId": 9, "editorKind": "Umbraco.Textbox", "value": "Top"},
        {"alias": "slide", "typeLocalId": 10, "editorKind": ARCHETYPE, "value": inner},
    )


def make_item(value):
    prop = ContentProperty(
        alias="slides",
        data_type="guid-10",
        property_editor_alias=ARCHETYPE,
        value=json.dumps(value),
    )
    return ContentItem(item_id="1001", name="Home", data=[prop]), prop


def build_manager(identifier_map):
    manager = create_manager(identifier_map)
    manager.register(MediaPickerProvider(identifier_map))
    manager.register(DependencyProvider())
    return manager


def props(data):
    return {p["alias"]: p for fs in data["fieldsets"] for p in fs["properties"]}


class TestNestedPackaging:
    """Test a composite holding a composite"""

    def test_single_root_string_with_nested_object(self, ids):
        item, prop = make_item(outer_value(inner_value()))

        build_manager(ids).packaging_item(item)

        assert isinstance(prop.value, str)
        outer = json.loads(prop.value)
        slide = props(outer)["slide"]["value"]
        assert isinstance(slide, dict)
        assert props(slide)["title"]["value"] == "Hello"
        assert props(outer)["heading"]["value"] == "Top"

    def test_nested_json_string_value_becomes_object(self, ids):
        """Test an inner composite stored as text is not double encoded"""
        item, prop = make_item(outer_value(json.dumps(inner_value())))

        build_manager(ids).packaging_item(item)

        slide = props(json.loads(prop.value))["slide"]["value"]
        assert isinstance(slide, dict)

    def test_deep_resources_reach_root(self, ids):
        item, prop = make_item(outer_value(inner_value()))

        build_manager(ids).packaging_item(item)

        slide = props(json.loads(prop.value))["slide"]["value"]
        assert props(slide)["image"]["value"] == "media-1200"
        assert Dependency("media-1200", "media") in item.dependencies
        assert Resource("/media/media-1200.jpg") in item.resources

    def test_three_levels(self, ids):
        deepest = make_value(
            {"alias": "caption", "typeLocalId": 9, "editorKind": "Umbraco.Textbox", "value": "c"}
        )
        middle = make_value(
            {"alias": "inner", "typeLocalId": 10, "editorKind": ARCHETYPE, "value": deepest}
        )
        item, prop = make_item(outer_value(middle))

        build_manager(ids).packaging_item(item)

        outer = json.loads(prop.value)
        level2 = props(outer)["slide"]["value"]
        level3 = props(level2)["inner"]["value"]
        assert props(level3)["caption"]["value"] == "c"

    def test_dependencies_from_plain_properties(self, ids):
        properties = [
            {"alias": f"link{i}", "typeLocalId": 5, "editorKind": "Test.Dependency", "value": i}
            for i in range(5)
        ]
        item, _ = make_item(make_value(*properties))

        build_manager(ids).packaging_item(item)

        assert len(item.dependencies) >= 5
        assert {f"doc-link{i}" for i in range(5)} <= set(item.dependencies.keys())

    def test_other_root_properties_untouched(self, ids):
        item, prop = make_item(outer_value(inner_value()))
        text = ContentProperty(alias="bodyText", data_type="guid-9", property_editor_alias="Umbraco.Textbox", value="<p/>")
        item.data.append(text)

        build_manager(ids).packaging_item(item)

        assert text.value == "<p/>"
        assert isinstance(prop.value, str)

    def test_malformed_nested_composite_passes_through(self, ids):
        item, prop = make_item(outer_value("not a composite"))

        build_manager(ids).packaging_item(item)

        assert props(json.loads(prop.value))["slide"]["value"] == "not a composite"

    def test_nested_failure_propagates(self, ids):
        """Test a media miss deep inside reaches the caller"""
        inner = make_value(
            {"alias": "image", "typeLocalId": 11, "editorKind": "Umbraco.MediaPicker", "value": 9999}
        )
        item, _ = make_item(outer_value(inner))

        with pytest.raises(MissingMappingError):
            build_manager(ids).packaging_item(item)

    def test_unexpected_failure_is_wrapped(self, ids):
        inner = make_value(
            {"alias": "image", "typeLocalId": 11, "editorKind": "Umbraco.MediaPicker", "value": {"id": 1}}
        )
        item, _ = make_item(outer_value(inner))

        class BrokenMediaPicker(MediaPickerProvider):
            def packaging_property(self, item, property_data):
                raise KeyError("id")

        manager = build_manager(ids)
        manager.register(BrokenMediaPicker(ids))

        with pytest.raises(PipelineError):
            manager.packaging_item(item)


class TestNestedRoundTrip:
    """Test packaging at the source then extracting at the destination"""

    def test_media_ids_translate(self, ids, destination_ids):
        item, prop = make_item(outer_value(inner_value()))
        build_manager(ids).packaging_item(item)

        imported = ContentItem(item_id="1001", name="Home", data=[
            ContentProperty(
                alias="slides",
                data_type="guid-10",
                property_editor_alias=ARCHETYPE,
                value=prop.value,
            )
        ])
        build_manager(destination_ids).extracting_item(imported)

        outer = json.loads(imported.data[0].value)
        slide = props(outer)["slide"]["value"]
        assert props(slide)["image"]["value"] == 3400
        assert props(slide)["title"]["value"] == "Hello"

    def test_manager_direction_argument(self, ids):
        item, prop = make_item(outer_value(inner_value()))

        build_manager(ids).resolve_item(item, Direction.PACKAGING)

        assert isinstance(prop.value, str)
