"""
Composite value converter

Turns whatever a content property holds for the composite editor into a
CompositeValue and back into its persisted JSON text.
"""

import json
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .models import CompositeValue

logger = logging.getLogger(__name__)


class CompositeValueConverter:
    """
    Default ValueConverter

    decode accepts a CompositeValue, a mapping or JSON text. Values that are
    blank, not JSON, or lack a fieldsets list decode to None so callers can
    pass them through untouched.
    """

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def decode(
        self,
        raw: Any,
        local_type_id: Optional[int] = None,
        editor_alias: str = "",
    ) -> Optional[CompositeValue]:
        if raw is None:
            return None
        if isinstance(raw, CompositeValue):
            return raw

        data = raw
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8", errors="replace")
        if isinstance(raw, str):
            if not raw.strip():
                return None
            try:
                data = json.loads(raw)
            except ValueError:
                logger.debug(
                    f"Value for data type {local_type_id} ({editor_alias}) is not JSON"
                )
                return None

        if not isinstance(data, Mapping) or not isinstance(data.get("fieldsets"), list):
            return None

        try:
            return CompositeValue.model_validate(dict(data))
        except ValidationError as e:
            logger.debug(
                f"Value for data type {local_type_id} ({editor_alias}) rejected: "
                f"{e.error_count()} errors"
            )
            return None

    def encode(self, value: CompositeValue) -> str:
        return value.to_json(indent=self.indent)
