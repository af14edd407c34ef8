"""
Type reference rewriter

Rewrites the data type references in a composite data type's schema
(prevalue 0):

- Packaging: typeLocalId -> typeStableKey, recording a dataType dependency
  on the data type for every translated reference
- Extracting: typeStableKey -> typeLocalId

Lookup misses leave the derived field untouched. The schema is written back
even when only part of it could be translated.
"""

from typing import Optional

from ..core.diagnostics import DiagnosticKind, DiagnosticSink, emit
from ..core.direction import DATA_TYPE_PROVIDER, Direction, IdentifierKind
from ..core.items import DataType
from ..core.models import CompositeSchema, SchemaProperty
from ..core.protocols import IdentifierMap
from ..exceptions.errors import MissingMappingError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PREVALUE_ALIAS = "archetypeConfig"


class TypeReferenceRewriter:
    """
    Rewrites the type references of a composite data type in place

    Example:
        >>> rewriter = TypeReferenceRewriter(ids)
        >>> rewriter.rewrite(data_type, Direction.PACKAGING)
        >>> data_type.dependencies.keys()
        ['guid-5']
    """

    def __init__(
        self,
        identifier_map: IdentifierMap,
        prevalue_alias: str = DEFAULT_PREVALUE_ALIAS,
        indent: Optional[int] = 2,
        provider_kind: str = DATA_TYPE_PROVIDER,
        on_diagnostic: Optional[DiagnosticSink] = None,
    ):
        self.identifier_map = identifier_map
        self.prevalue_alias = prevalue_alias
        self.indent = indent
        self.provider_kind = provider_kind
        self.on_diagnostic = on_diagnostic

    def package(self, data_type: DataType) -> None:
        self.rewrite(data_type, Direction.PACKAGING)

    def extract(self, data_type: DataType) -> None:
        self.rewrite(data_type, Direction.EXTRACTING)

    def rewrite(self, data_type: DataType, direction: Direction) -> None:
        """
        Rewrite the schema stored on data_type

        Silently does nothing when the data type has no prevalues, prevalue 0
        is not the composite schema, or the schema cannot be parsed.
        """
        if not data_type.prevalues:
            return

        prevalue = data_type.prevalues[0]
        if (prevalue.alias or "").lower() != self.prevalue_alias.lower():
            return
        if prevalue.value is None or not prevalue.value.strip():
            return

        schema = CompositeSchema.from_json(prevalue.value)
        if schema is None or not schema.fieldsets:
            if schema is None:
                emit(
                    self.on_diagnostic,
                    DiagnosticKind.MALFORMED_PAYLOAD,
                    "Composite schema could not be parsed",
                    data_type=data_type.unique_id,
                )
            return

        for definition in schema.iter_properties():
            if direction == Direction.PACKAGING:
                self._package_definition(data_type, definition)
            elif direction == Direction.EXTRACTING:
                self._extract_definition(data_type, definition)

        prevalue.value = schema.to_json(indent=self.indent)

    def _package_definition(self, data_type: DataType, definition: SchemaProperty) -> None:
        stable_key = self._lookup_stable_key(data_type, definition)
        if not stable_key:
            return

        data_type.dependencies.add(stable_key, self.provider_kind)
        definition.type_stable_key = stable_key

    def _extract_definition(self, data_type: DataType, definition: SchemaProperty) -> None:
        local_id = None
        if definition.type_stable_key:
            try:
                local_id = self.identifier_map.to_local_id(
                    definition.type_stable_key, IdentifierKind.DATA_TYPE
                )
            except MissingMappingError:
                local_id = None

        try:
            definition.type_local_id = int(local_id)
        except (TypeError, ValueError):
            self._missing(
                data_type,
                definition,
                f"No local data type for {definition.type_stable_key!r}",
            )

    def _lookup_stable_key(
        self, data_type: DataType, definition: SchemaProperty
    ) -> Optional[str]:
        try:
            stable_key = self.identifier_map.to_stable_key(
                definition.type_local_id, IdentifierKind.DATA_TYPE
            )
        except MissingMappingError:
            stable_key = None

        if not stable_key:
            self._missing(
                data_type,
                definition,
                f"No stable key for data type {definition.type_local_id}",
            )
        return stable_key

    def _missing(self, data_type: DataType, definition: SchemaProperty, message: str) -> None:
        logger.warning(
            message,
            data_type=data_type.unique_id,
            property_alias=definition.alias,
        )
        emit(
            self.on_diagnostic,
            DiagnosticKind.MISSING_MAPPING,
            message,
            data_type=data_type.unique_id,
            property_alias=definition.alias,
            type_local_id=definition.type_local_id,
            type_stable_key=definition.type_stable_key,
        )
