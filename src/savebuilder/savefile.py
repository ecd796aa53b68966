"""Save file orchestration.

A SaveFile saves and loads the data of a root SaveChunk as one unit. It pipes
the root's data through a serializer, an optional compressor and an I/O
provider, and reverses the pipeline when loading.

Providers come in synchronous and asynchronous flavors and a SaveFile accepts
any mix of them. Which operations are available depends on what is present:

- save / load: synchronous I/O and synchronous serializer required
- exists / delete: synchronous I/O required
- save_async / load_async / exists_async / delete_async: always available;
  asynchronous providers are preferred and synchronous ones used as a fallback

Stream ownership:
- Streams handed out by the I/O provider are closed by the SaveFile on every
  exit path, innermost wrapper first.
- When saving through asynchronous I/O, the payload is first serialized into an
  in-memory buffer owned by the SaveFile, so transports that need the full
  payload size up front (such as HTTP) receive a complete, rewound stream.

Loading treats a None result from the serializer as "nothing saved yet" and
leaves the chunk tree untouched. Provider failures (missing file, malformed
payload, transport errors, cancellation) propagate unchanged.

Example usage:
    root = SaveChunk(GameData, on_save=gather_game, on_load=restore_game)
    save_file = SaveFile(
        root,
        FileStreamIO("saves/slot_1.json.gz"),
        JsonStreamSerializer(),
        GZipStreamCompressor(),
    )

    save_file.save()
    if save_file.exists():
        save_file.load()
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, nullcontext
from io import BytesIO
from typing import TYPE_CHECKING, Any, Generic

from savebuilder.chunks.base import TData
from savebuilder.conf import settings
from savebuilder.errors import UnsupportedOperationError
from savebuilder.io.base import BaseAsyncStreamIO, BaseStreamIO
from savebuilder.serialization.base import BaseAsyncStreamSerializer, BaseStreamSerializer
from savebuilder.types import CompressionLevel

if TYPE_CHECKING:
    from contextlib import AbstractContextManager
    from typing import BinaryIO

    from savebuilder.chunks.base import BaseSaveChunk
    from savebuilder.compression.base import BaseStreamCompressor

logger = logging.getLogger(__name__)


class SaveFile(Generic[TData]):
    """Save file composed of a tree of save chunks.

    Attributes:
        root: Root chunk from which the save file contents are composed.
        compressor: Compressor wrapping the I/O streams, or None.
    """

    def __init__(
        self,
        root: BaseSaveChunk[TData],
        io: BaseStreamIO | BaseAsyncStreamIO,
        serializer: BaseStreamSerializer | BaseAsyncStreamSerializer,
        compressor: BaseStreamCompressor | None = None,
    ) -> None:
        """Initialize the save file.

        Args:
            root: Root chunk of the chunk tree.
            io: I/O provider the save file reads from and writes to. May be
                synchronous, asynchronous or both.
            serializer: Serializer for the root chunk's data. May be
                synchronous, asynchronous or both.
            compressor: Optional compressor applied between serializer and I/O.

        Raises:
            TypeError: If io or serializer implements neither contract.
        """
        self._io = io if isinstance(io, BaseStreamIO) else None
        self._async_io = io if isinstance(io, BaseAsyncStreamIO) else None
        if self._io is None and self._async_io is None:
            msg = f"{type(io).__name__} is neither a BaseStreamIO nor a BaseAsyncStreamIO"
            raise TypeError(msg)

        self._serializer = serializer if isinstance(serializer, BaseStreamSerializer) else None
        self._async_serializer = serializer if isinstance(serializer, BaseAsyncStreamSerializer) else None
        if self._serializer is None and self._async_serializer is None:
            msg = f"{type(serializer).__name__} is neither a BaseStreamSerializer nor a BaseAsyncStreamSerializer"
            raise TypeError(msg)

        self.root = root
        self.compressor = compressor

    @property
    def can_save_synchronously(self) -> bool:
        """Whether save() and load() are supported.

        Check this before calling the synchronous methods; they raise
        UnsupportedOperationError when either the I/O provider or the
        serializer is asynchronous only.
        """
        return self._io is not None and self._serializer is not None

    def save(self, level: CompressionLevel | str | None = None) -> None:
        """Collect save data from the root chunk tree and save it.

        Args:
            level: Compression level. Defaults to settings.DEFAULT_COMPRESSION_LEVEL.

        Raises:
            UnsupportedOperationError: If synchronous I/O or serialization is unavailable.
        """
        io_provider, serializer = self._require_synchronous()
        level = self._resolve_level(level)

        with io_provider.write() as io_stream, self._compression(io_stream, level) as stream:
            serializer.serialize(stream, self.root.get_save_data(), self.root.data_type)

        logger.info("Saved %s", self._describe())

    def load(self) -> None:
        """Load save data and restore the root chunk tree.

        Does nothing to the chunk tree if the serializer yields no data.

        Raises:
            UnsupportedOperationError: If synchronous I/O or serialization is unavailable.
        """
        io_provider, serializer = self._require_synchronous()

        with io_provider.read() as io_stream, self._decompression(io_stream) as stream:
            data = serializer.deserialize(stream, self.root.data_type)

        self._restore(data)

    def exists(self) -> bool:
        """Check if the save file exists.

        Raises:
            UnsupportedOperationError: If synchronous I/O is unavailable.
        """
        return self._require_synchronous_io().exists()

    def delete(self) -> None:
        """Delete the save file. Does nothing if it does not exist.

        Raises:
            UnsupportedOperationError: If synchronous I/O is unavailable.
        """
        self._require_synchronous_io().delete()
        logger.info("Deleted %s", self._describe())

    async def save_async(self, level: CompressionLevel | str | None = None) -> None:
        """Collect save data from the root chunk tree and save it asynchronously.

        Args:
            level: Compression level. Defaults to settings.DEFAULT_COMPRESSION_LEVEL.
        """
        level = self._resolve_level(level)

        if self._async_io is not None:
            with BytesIO() as buffer:
                with self._compression(buffer, level, leave_open=True) as stream:
                    await self._serialize_async(stream)
                logger.debug("Buffered %d bytes for asynchronous write", buffer.tell())
                buffer.seek(0)
                await self._async_io.write_async(buffer)
        else:
            io_provider = self._require_synchronous_io()
            with io_provider.write() as io_stream, self._compression(io_stream, level) as stream:
                await self._serialize_async(stream)

        logger.info("Saved %s", self._describe())

    async def load_async(self) -> None:
        """Load save data and restore the root chunk tree asynchronously.

        Does nothing to the chunk tree if the serializer yields no data.
        """
        with ExitStack() as stack:
            if self._async_io is not None:
                io_stream = stack.enter_context(await self._async_io.read_async())
            else:
                io_stream = stack.enter_context(self._require_synchronous_io().read())
            stream = stack.enter_context(self._decompression(io_stream))

            if self._async_serializer is not None:
                data = await self._async_serializer.deserialize_async(stream, self.root.data_type)
            else:
                data = self._require_synchronous_serializer().deserialize(stream, self.root.data_type)

        self._restore(data)

    async def exists_async(self) -> bool:
        """Check if the save file exists."""
        if self._async_io is not None:
            return await self._async_io.exists_async()
        return self._require_synchronous_io().exists()

    async def delete_async(self) -> bool:
        """Delete the save file.

        Returns:
            True if the save file was deleted, False otherwise.
        """
        if self._async_io is not None:
            deleted = await self._async_io.delete_async()
        else:
            self._require_synchronous_io().delete()
            deleted = True
        logger.info("Deleted %s: %s", self._describe(), deleted)
        return deleted

    async def _serialize_async(self, stream: BinaryIO) -> None:
        data = self.root.get_save_data()
        if self._async_serializer is not None:
            await self._async_serializer.serialize_async(stream, data, self.root.data_type)
        else:
            self._require_synchronous_serializer().serialize(stream, data, self.root.data_type)

    def _compression(
        self,
        stream: BinaryIO,
        level: CompressionLevel,
        *,
        leave_open: bool = False,
    ) -> AbstractContextManager[BinaryIO]:
        if self.compressor is None:
            return nullcontext(stream)
        return self.compressor.compress(stream, level, leave_open=leave_open)

    def _decompression(self, stream: BinaryIO) -> AbstractContextManager[BinaryIO]:
        if self.compressor is None:
            return nullcontext(stream)
        return self.compressor.decompress(stream)

    def _restore(self, data: Any) -> None:  # noqa: ANN401
        if data is None:
            logger.info("No save data found for %s; chunk tree left untouched", self._describe())
            return
        self.root.load_save_data(data)
        logger.info("Loaded %s", self._describe())

    def _require_synchronous(self) -> tuple[BaseStreamIO, BaseStreamSerializer]:
        if self._io is None or self._serializer is None:
            msg = (
                "Synchronous operation is not allowed because either the I/O provider "
                "or the serializer of the SaveFile is asynchronous only"
            )
            raise UnsupportedOperationError(msg)
        return self._io, self._serializer

    def _require_synchronous_io(self) -> BaseStreamIO:
        if self._io is None:
            msg = "Synchronous operation is not allowed because the I/O provider of the SaveFile is asynchronous only"
            raise UnsupportedOperationError(msg)
        return self._io

    def _require_synchronous_serializer(self) -> BaseStreamSerializer:
        if self._serializer is None:
            msg = "Synchronous operation is not allowed because the serializer of the SaveFile is asynchronous only"
            raise UnsupportedOperationError(msg)
        return self._serializer

    @staticmethod
    def _resolve_level(level: CompressionLevel | str | None) -> CompressionLevel:
        return CompressionLevel.parse(settings.DEFAULT_COMPRESSION_LEVEL if level is None else level)

    def _describe(self) -> str:
        return f"save file {self._io or self._async_io!r}"
