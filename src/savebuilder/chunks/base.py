"""Base class for save chunks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

TData = TypeVar("TData")
TChild = TypeVar("TChild")


class BaseSaveChunk(ABC, Generic[TData]):
    """Abstract base class for save chunks.

    A save chunk is one section of a save file. Each chunk knows how to produce
    its data when saving and how to consume it when loading, and may own child
    chunks keyed by their data type. Chunks form a tree that composes the
    contents of a save file.

    Chunks never recurse into their children on their own. A parent's callbacks
    decide which children to query on save and which to feed on load.

    Example:
        def on_save(chunk: BaseSaveChunk[GameData]) -> GameData:
            return GameData(player=chunk.get_chunk_save_data(PlayerData))

        def on_load(chunk: BaseSaveChunk[GameData], data: GameData) -> None:
            chunk.load_chunk_save_data(data.player)

        root = SaveChunk(GameData, on_save, on_load)
        root.add_chunk(player_chunk)
    """

    @property
    @abstractmethod
    def data_type(self) -> type[TData]:
        """Declared type of the data produced and consumed by this chunk."""

    @property
    @abstractmethod
    def on_save(self) -> Callable[[BaseSaveChunk[TData]], TData]:
        """Callback that produces the chunk's save data.

        Only call this directly for testing. Prefer get_save_data().
        """

    @property
    @abstractmethod
    def on_load(self) -> Callable[[BaseSaveChunk[TData], TData], None]:
        """Callback that consumes loaded save data.

        Only call this directly for testing. Prefer load_save_data().
        """

    @abstractmethod
    def get_save_data(self) -> TData:
        """Get the data associated with this chunk.

        Returns:
            Data returned by the on_save callback.
        """

    @abstractmethod
    def load_save_data(self, data: TData) -> None:
        """Load the data associated with this chunk.

        Args:
            data: Freshly deserialized data handed to the on_load callback.
        """

    @abstractmethod
    def add_chunk(self, child: BaseSaveChunk[Any]) -> None:
        """Add a child chunk, keyed by its data type.

        Args:
            child: Chunk to add.

        Raises:
            DuplicateKeyError: If a child with the same data type already exists.
        """

    @abstractmethod
    def overwrite_chunk(self, child: BaseSaveChunk[Any]) -> None:
        """Add a child chunk or replace the existing child with the same data type.

        Args:
            child: Chunk to add.
        """

    @abstractmethod
    def get_chunk(self, data_type: type[TChild]) -> BaseSaveChunk[TChild]:
        """Get a child chunk by its data type.

        Args:
            data_type: Data type of the child chunk.

        Returns:
            The child chunk.

        Raises:
            NotFoundError: If no child with that data type was added.
        """

    @abstractmethod
    def get_chunk_save_data(self, data_type: type[TChild]) -> TChild:
        """Get the save data of a child chunk.

        Args:
            data_type: Data type of the child chunk.

        Returns:
            Data returned by the child's on_save callback.
        """

    @abstractmethod
    def load_chunk_save_data(self, data: TChild, data_type: type[TChild] | None = None) -> None:
        """Load save data into a child chunk.

        Args:
            data: Data to hand to the child's on_load callback.
            data_type: Data type of the child chunk. Defaults to type(data).
        """
