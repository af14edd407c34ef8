"""
Composite payload models

JSON shapes persisted by the composite (Archetype) editor:

- CompositeSchema: the data type configuration stored in prevalue 0,
  fieldsets -> property definitions carrying the type reference
- CompositeValue: the content value, fieldsets -> property instances
  carrying their own value (possibly another composite)

Both are read permissively: unknown fields are kept and written back.
"""

import json
import logging
from typing import Annotated, Any, Iterator, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


def _lenient_local_id(value: Any) -> Optional[int]:
    """Integer or integer text; anything else reads as no reference"""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-integer typeLocalId: {value!r}")
        return None


LocalTypeId = Annotated[Optional[int], BeforeValidator(_lenient_local_id)]


class _CompositeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_dict(self) -> dict:
        """Dump using wire field names"""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


class SchemaProperty(_CompositeModel):
    """
    Property definition inside a composite schema

    Exactly one of type_local_id / type_stable_key is authoritative for a
    given direction; the other is derived and written back.
    """

    alias: str = ""
    type_local_id: LocalTypeId = Field(default=0, alias="typeLocalId")
    type_stable_key: Optional[str] = Field(default=None, alias="typeStableKey")


class SchemaFieldset(_CompositeModel):
    properties: List[SchemaProperty] = Field(default_factory=list)


class CompositeSchema(_CompositeModel):
    """Allowed fieldsets and property types of a composite data type"""

    fieldsets: List[SchemaFieldset] = Field(default_factory=list)

    def iter_properties(self) -> Iterator[SchemaProperty]:
        """All property definitions, fieldset by fieldset"""
        for fieldset in self.fieldsets:
            yield from fieldset.properties

    @classmethod
    def from_json(cls, text: Optional[str]) -> Optional["CompositeSchema"]:
        """
        Parse schema text

        Returns None for blank text, invalid JSON or a payload that is not a
        schema object.
        """
        if text is None or not text.strip():
            return None
        try:
            data = json.loads(text)
        except ValueError:
            logger.debug("Schema text is not valid JSON")
            return None
        if not isinstance(data, dict):
            return None
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.debug(f"Schema payload rejected: {e.error_count()} errors")
            return None


class PropertyInstance(_CompositeModel):
    """
    Property inside a composite value

    value may be a primitive, a resource reference, a nested composite (as a
    CompositeValue, a dict or a JSON string) or None.
    """

    alias: str = ""
    type_local_id: LocalTypeId = Field(default=0, alias="typeLocalId")
    editor_kind: str = Field(default="", alias="editorKind")
    value: Any = None


class FieldsetInstance(_CompositeModel):
    properties: List[PropertyInstance] = Field(default_factory=list)


class CompositeValue(_CompositeModel):
    """Runtime value of a composite property"""

    fieldsets: List[FieldsetInstance] = Field(default_factory=list)

    def iter_properties(self) -> Iterator[PropertyInstance]:
        """All property instances, fieldset by fieldset"""
        for fieldset in self.fieldsets:
            yield from fieldset.properties
