"""JSON serializer backed by pydantic type adapters.

The declared type drives both directions: values are dumped with the type's
serialization schema and validated back into instances of that type. Any type
pydantic understands works, including dataclasses, BaseModel subclasses,
TypedDicts and builtin containers.

JSON null and an empty payload both deserialize to None, so a missing save
(for example an HTTP 404 mapped to an empty stream) loads as "no data" while
malformed JSON raises pydantic.ValidationError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

from pydantic import TypeAdapter

from savebuilder.conf import settings
from savebuilder.serialization.base import BaseAsyncStreamSerializer, BaseStreamSerializer

if TYPE_CHECKING:
    from typing import BinaryIO

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class JsonStreamSerializer(BaseStreamSerializer, BaseAsyncStreamSerializer):
    """Serializes values to and from JSON streams.

    Attributes:
        indent: Indentation of the JSON output, or None for compact output.
        by_alias: Whether fields are written under their aliases.
        exclude_none: Whether fields whose value is None are omitted.
    """

    def __init__(
        self,
        *,
        indent: int | None = _UNSET,
        by_alias: bool = _UNSET,
        exclude_none: bool = _UNSET,
    ) -> None:
        """Initialize the serializer.

        Options left unset fall back to settings.JSON_INDENT,
        settings.JSON_BY_ALIAS and settings.JSON_EXCLUDE_NONE.
        """
        self.indent = settings.JSON_INDENT if indent is _UNSET else indent
        self.by_alias = settings.JSON_BY_ALIAS if by_alias is _UNSET else by_alias
        self.exclude_none = settings.JSON_EXCLUDE_NONE if exclude_none is _UNSET else exclude_none
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def serialize(self, stream: BinaryIO, value: Any, declared_type: Any) -> None:  # noqa: ANN401
        payload = self._adapter(declared_type).dump_json(
            value,
            indent=self.indent,
            by_alias=self.by_alias,
            exclude_none=self.exclude_none,
        )
        stream.write(payload)
        logger.debug("Serialized %d bytes of JSON", len(payload))

    def deserialize(self, stream: BinaryIO, declared_type: Any) -> Any | None:  # noqa: ANN401
        payload = stream.read()
        if not payload.strip():
            logger.debug("Empty JSON payload")
            return None
        return self._adapter(declared_type).validate_json(payload)

    async def serialize_async(self, stream: BinaryIO, value: Any, declared_type: Any) -> None:  # noqa: ANN401
        await asyncio.to_thread(self.serialize, stream, value, declared_type)

    async def deserialize_async(self, stream: BinaryIO, declared_type: Any) -> Any | None:  # noqa: ANN401
        return await asyncio.to_thread(self.deserialize, stream, declared_type)

    def _adapter(self, declared_type: Any) -> TypeAdapter[Any]:  # noqa: ANN401
        adapter = self._adapters.get(declared_type)
        if adapter is None:
            adapter = TypeAdapter(Optional[declared_type])  # noqa: UP007
            self._adapters[declared_type] = adapter
        return adapter

    def __repr__(self) -> str:
        return f"JsonStreamSerializer(indent={self.indent!r})"
