"""
Resolution direction and identifier kinds
"""

from enum import Enum


class Direction(str, Enum):
    """Direction of a resolution pass"""

    # stable keys -> local ids (import)
    EXTRACTING = "extracting"
    # local ids -> stable keys (export)
    PACKAGING = "packaging"


class IdentifierKind(str, Enum):
    """Object kinds an identifier map can translate"""

    DATA_TYPE = "dataType"
    DOCUMENT = "document"
    MEDIA = "media"


# Provider kind recorded on dependencies discovered from a schema
DATA_TYPE_PROVIDER = IdentifierKind.DATA_TYPE.value
