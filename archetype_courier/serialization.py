"""
Document loading for the CLI

Reads data types, content items and identifier maps from JSON/YAML files
and writes the resolved records back out.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .core.items import ContentItem, ContentProperty, DataType, PreValue
from .core.models import CompositeValue
from .exceptions.errors import ConfigurationError, MalformedPayloadError
from .resolvers.identifiers import InMemoryIdentifierMap


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a JSON or YAML document

    Raises:
        MalformedPayloadError: File content is not an object
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix.lower() in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (ValueError, yaml.YAMLError) as e:
            raise MalformedPayloadError(f"Cannot parse {path}: {e}", {"path": str(path)})

    if not isinstance(data, dict):
        raise MalformedPayloadError(f"{path} must contain an object", {"path": str(path)})
    return data


def load_identifier_map(path: Union[str, Path]) -> InMemoryIdentifierMap:
    """Load an identifier map file ({kind: {local_id: stable_key}})"""
    try:
        data = load_document(path)
    except MalformedPayloadError as e:
        raise ConfigurationError(e.message, e.details)
    return InMemoryIdentifierMap.from_dict(data)


def data_type_from_dict(data: Mapping[str, Any]) -> DataType:
    try:
        prevalues = [
            PreValue(
                alias=entry.get("alias", ""),
                value=entry.get("value"),
                id=entry.get("id"),
                sort_order=entry.get("sortOrder", index),
            )
            for index, entry in enumerate(data.get("prevalues") or [])
        ]
    except AttributeError:
        raise MalformedPayloadError("Data type prevalues must be objects")

    return DataType(
        unique_id=str(data.get("uniqueId", "")),
        name=data.get("name", ""),
        editor_alias=data.get("editorAlias", ""),
        prevalues=prevalues,
    )


def data_type_to_dict(data_type: DataType) -> Dict[str, Any]:
    return {
        "uniqueId": data_type.unique_id,
        "name": data_type.name,
        "editorAlias": data_type.editor_alias,
        "prevalues": [
            {
                "alias": prevalue.alias,
                "value": prevalue.value,
                "id": prevalue.id,
                "sortOrder": prevalue.sort_order,
            }
            for prevalue in data_type.prevalues
        ],
        "dependencies": _dependencies_to_list(data_type.dependencies),
    }


def content_item_from_dict(data: Mapping[str, Any]) -> ContentItem:
    try:
        properties = [
            ContentProperty(
                alias=entry.get("alias", ""),
                data_type=entry.get("dataType"),
                property_editor_alias=entry.get("editorAlias", ""),
                value=entry.get("value"),
            )
            for entry in data.get("properties") or []
        ]
    except AttributeError:
        raise MalformedPayloadError("Content properties must be objects")

    return ContentItem(
        item_id=str(data.get("itemId", "")),
        name=data.get("name", ""),
        data=properties,
    )


def content_item_to_dict(item: ContentItem) -> Dict[str, Any]:
    return {
        "itemId": item.item_id,
        "name": item.name,
        "properties": [
            {
                "alias": property_data.alias,
                "dataType": property_data.data_type,
                "editorAlias": property_data.property_editor_alias,
                "value": _plain_value(property_data.value),
            }
            for property_data in item.data
        ],
        "dependencies": _dependencies_to_list(item.dependencies),
        "resources": [
            {"path": resource.path, "name": resource.name} for resource in item.resources
        ],
    }


def _dependencies_to_list(dependencies) -> list:
    return [
        {
            "stableKey": dependency.stable_key,
            "providerKind": dependency.provider_kind,
            "name": dependency.name,
        }
        for dependency in dependencies
    ]


def _plain_value(value: Any) -> Any:
    if isinstance(value, CompositeValue):
        return value.to_dict()
    return value
