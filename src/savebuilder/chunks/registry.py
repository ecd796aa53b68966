"""Type-keyed registry holding one value per type.

Similar to the EventBus listener map, but each type maps to exactly one value.
SaveChunk uses it to store child chunks under their declared data type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from savebuilder.errors import DuplicateKeyError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def type_name(key: object) -> str:
    """Readable name of a registry key."""
    return getattr(key, "__qualname__", None) or repr(key)


class TypeKeyedRegistry:
    """Map from a type to exactly one value.

    Values are keyed by their concrete type unless an explicit key is given.
    Lookups match the key exactly; subclasses of a registered type are not
    found under their base type.

    Example usage:
        registry = TypeKeyedRegistry()
        registry.set(PlayerData(name="Ada"))

        player = registry.get(PlayerData)

        registry.overwrite(PlayerData(name="Grace"))
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._entries: dict[type, Any] = {}

    def set(self, value: Any, key: type | None = None) -> None:  # noqa: ANN401
        """Store a value, refusing to replace an existing entry.

        Args:
            value: Value to store.
            key: Type to store the value under. Defaults to type(value).

        Raises:
            DuplicateKeyError: If an entry for the key already exists.
        """
        key = type(value) if key is None else key
        if key in self._entries:
            msg = f"An entry of type {type_name(key)} is already registered"
            raise DuplicateKeyError(msg)
        self._entries[key] = value
        logger.debug("Registered entry: %s", type_name(key))

    def overwrite(self, value: Any, key: type | None = None) -> None:  # noqa: ANN401
        """Store a value, replacing any existing entry for its type.

        Args:
            value: Value to store.
            key: Type to store the value under. Defaults to type(value).
        """
        key = type(value) if key is None else key
        if key in self._entries:
            logger.debug("Overwriting entry: %s", type_name(key))
        self._entries[key] = value

    def get(self, key: type) -> Any:  # noqa: ANN401
        """Get the value stored under a type.

        Args:
            key: Type the value was stored under.

        Returns:
            The stored value.

        Raises:
            NotFoundError: If nothing is stored under the key.
        """
        try:
            return self._entries[key]
        except KeyError:
            msg = f"No entry of type {type_name(key)} is registered"
            raise NotFoundError(msg) from None

    def has(self, key: type) -> bool:
        """Check if a value is stored under a type."""
        return key in self._entries

    def remove(self, key: type) -> None:
        """Remove the value stored under a type, if any."""
        if key in self._entries:
            del self._entries[key]
            logger.debug("Removed entry: %s", type_name(key))

    def keys(self) -> list[type]:
        """Get all registered types."""
        return list(self._entries)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[type]:
        return iter(self._entries)
