"""Base class for stream compressors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from savebuilder.types import CompressionLevel

if TYPE_CHECKING:
    from typing import BinaryIO


class BaseStreamCompressor(ABC):
    """Abstract base class for stream compressors.

    A compressor wraps a base stream with a compressing writer or a
    decompressing reader. Closing the wrapper finishes the compressed output
    and, unless leave_open is set, closes the base stream as well.

    Example:
        with compressor.compress(buffer, CompressionLevel.FASTEST, leave_open=True) as stream:
            stream.write(payload)
        buffer.seek(0)  # buffer is still usable
    """

    @abstractmethod
    def compress(
        self,
        stream: BinaryIO,
        level: CompressionLevel = CompressionLevel.OPTIMAL,
        *,
        leave_open: bool = False,
    ) -> BinaryIO:
        """Wrap a writable stream with a compressing writer.

        Args:
            stream: Base stream receiving compressed bytes.
            level: Whether to emphasize speed or output size.
            leave_open: True to leave the base stream open after the writer is closed.

        Returns:
            Writable stream; bytes written to it are compressed into the base stream.
        """

    @abstractmethod
    def decompress(self, stream: BinaryIO, *, leave_open: bool = False) -> BinaryIO:
        """Wrap a readable stream with a decompressing reader.

        Args:
            stream: Base stream holding compressed bytes.
            leave_open: True to leave the base stream open after the reader is closed.

        Returns:
            Readable stream yielding the decompressed bytes.
        """
