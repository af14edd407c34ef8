"""
In-memory identifier map

Bidirectional local id <-> stable key table per IdentifierKind. Hosts
usually back IdentifierMap with their own persistence; this implementation
serves the CLI, loaded from a YAML/JSON file, and the tests.
"""

from typing import Mapping, Optional, Union

from ..core.direction import IdentifierKind
from ..exceptions.errors import ConfigurationError, MissingMappingError
from ..types.common import IdentifierTable, LocalIdIndex, StableKeyIndex


class InMemoryIdentifierMap:
    """
    Identifier map held in two dictionaries

    Example:
        >>> ids = InMemoryIdentifierMap()
        >>> ids.register(5, "guid-5")
        >>> ids.to_stable_key(5, IdentifierKind.DATA_TYPE)
        'guid-5'
    """

    def __init__(self):
        self._stable_keys: StableKeyIndex = {}
        self._local_ids: LocalIdIndex = {}

    def register(
        self,
        local_id: int,
        stable_key: str,
        kind: IdentifierKind = IdentifierKind.DATA_TYPE,
    ) -> "InMemoryIdentifierMap":
        """
        Register a pair of identifiers

        Returns:
            self, supports method chaining
        """
        kind = IdentifierKind(kind)
        local_id = int(local_id)
        self._stable_keys[(kind, local_id)] = stable_key
        self._local_ids[(kind, stable_key.lower())] = local_id
        return self

    def to_stable_key(self, local_id: int, kind: IdentifierKind) -> str:
        try:
            return self._stable_keys[(IdentifierKind(kind), int(local_id))]
        except (KeyError, TypeError, ValueError):
            raise MissingMappingError(
                f"No stable key for {IdentifierKind(kind).value} {local_id!r}",
                {"local_id": local_id, "kind": IdentifierKind(kind).value},
            )

    def to_local_id(self, stable_key: str, kind: IdentifierKind) -> int:
        key = (IdentifierKind(kind), str(stable_key or "").lower())
        if not stable_key or key not in self._local_ids:
            raise MissingMappingError(
                f"No local id for {IdentifierKind(kind).value} {stable_key!r}",
                {"stable_key": stable_key, "kind": IdentifierKind(kind).value},
            )
        return self._local_ids[key]

    def inverse(self) -> "InMemoryIdentifierMap":
        """
        Map built from the stable key -> local id side of this one

        Each stable key keeps the local id it was last registered with, so
        a key re-registered under a new local id maps back to that id only.
        The result is detached: later registrations do not reach it.

        Returns:
            InMemoryIdentifierMap holding one local id per stable key
        """
        inverted = type(self)()
        for (kind, local_id), stable_key in self._stable_keys.items():
            if self._local_ids.get((kind, stable_key.lower())) == local_id:
                inverted.register(local_id, stable_key, kind)
        return inverted

    def __len__(self) -> int:
        return len(self._stable_keys)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(key == item.lower() for _, key in self._local_ids)
        return any(local_id == item for _, local_id in self._stable_keys)

    @classmethod
    def from_dict(cls, data: Optional[IdentifierTable]) -> "InMemoryIdentifierMap":
        """
        Load from a {kind: {local_id: stable_key}} mapping

        A flat {local_id: stable_key} mapping is read as data type ids.

        Raises:
            ConfigurationError: Unknown kind or non-integer local id
        """
        ids = cls()
        if not data:
            return ids

        if all(not isinstance(value, Mapping) for value in data.values()):
            data = {IdentifierKind.DATA_TYPE.value: data}

        for kind_name, pairs in data.items():
            try:
                kind = IdentifierKind(kind_name)
            except ValueError:
                raise ConfigurationError(
                    f"Unknown identifier kind: {kind_name}",
                    {"valid": [k.value for k in IdentifierKind]},
                )
            if not isinstance(pairs, Mapping):
                raise ConfigurationError(f"Identifiers for {kind_name} must be a mapping")
            for local_id, stable_key in pairs.items():
                try:
                    ids.register(_as_int(local_id), str(stable_key), kind)
                except ValueError:
                    raise ConfigurationError(
                        f"Local id must be an integer: {local_id!r}",
                        {"kind": kind_name},
                    )
        return ids


def _as_int(value: Union[str, int]) -> int:
    if isinstance(value, bool):
        raise ValueError(value)
    return int(value)
