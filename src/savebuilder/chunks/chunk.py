"""Callback-driven save chunk."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from savebuilder.chunks.base import BaseSaveChunk, TChild, TData
from savebuilder.chunks.registry import TypeKeyedRegistry, type_name

if TYPE_CHECKING:
    from collections.abc import Callable


class SaveChunk(BaseSaveChunk[TData]):
    """Save chunk that delegates to a pair of callbacks.

    The chunk holds behavior, not data: save data is produced on demand by
    on_save and handed to on_load when loading. Child chunks are stored in a
    TypeKeyedRegistry under their data type, so a parent may hold at most one
    child per data type.

    Attributes:
        children: Registry of child chunks keyed by data type.
    """

    def __init__(
        self,
        data_type: type[TData],
        on_save: Callable[[BaseSaveChunk[TData]], TData],
        on_load: Callable[[BaseSaveChunk[TData], TData], None],
    ) -> None:
        """Create a new save chunk.

        Args:
            data_type: Declared type of the chunk's data. Used as the key when
                this chunk is added to a parent and as the type handed to the
                serializer when this chunk is the root of a save file.
            on_save: Receives this chunk and returns its save data.
            on_load: Receives this chunk and freshly loaded data.
        """
        self._data_type = data_type
        self._on_save = on_save
        self._on_load = on_load
        self.children = TypeKeyedRegistry()

    @property
    def data_type(self) -> type[TData]:
        return self._data_type

    @property
    def on_save(self) -> Callable[[BaseSaveChunk[TData]], TData]:
        return self._on_save

    @property
    def on_load(self) -> Callable[[BaseSaveChunk[TData], TData], None]:
        return self._on_load

    def get_save_data(self) -> TData:
        return self._on_save(self)

    def load_save_data(self, data: TData) -> None:
        self._on_load(self, data)

    def add_chunk(self, child: BaseSaveChunk[Any]) -> None:
        self.children.set(child, key=child.data_type)

    def overwrite_chunk(self, child: BaseSaveChunk[Any]) -> None:
        self.children.overwrite(child, key=child.data_type)

    def get_chunk(self, data_type: type[TChild]) -> BaseSaveChunk[TChild]:
        return self.children.get(data_type)

    def get_chunk_save_data(self, data_type: type[TChild]) -> TChild:
        return self.get_chunk(data_type).get_save_data()

    def load_chunk_save_data(self, data: TChild, data_type: type[TChild] | None = None) -> None:
        self.get_chunk(type(data) if data_type is None else data_type).load_save_data(data)

    def __repr__(self) -> str:
        return f"SaveChunk({type_name(self._data_type)}, children={len(self.children)})"
