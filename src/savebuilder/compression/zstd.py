"""Zstandard compressor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import zstandard

from savebuilder.compression.base import BaseStreamCompressor
from savebuilder.compression.streams import DecompressingReader
from savebuilder.conf import settings
from savebuilder.types import CompressionLevel

if TYPE_CHECKING:
    from typing import BinaryIO


class ZstdStreamCompressor(BaseStreamCompressor):
    """Provides Zstandard compression and decompression streams.

    Compression levels are mapped through settings.ZSTD_LEVELS. Zstandard has
    no stored mode, so NO_COMPRESSION maps to its fastest level by default.

    Reading accepts several concatenated frames. A stream ending inside a
    frame raises EOFError.
    """

    def compress(
        self,
        stream: BinaryIO,
        level: CompressionLevel = CompressionLevel.OPTIMAL,
        *,
        leave_open: bool = False,
    ) -> BinaryIO:
        native_level = settings.ZSTD_LEVELS[CompressionLevel.parse(level).value]
        compressor = zstandard.ZstdCompressor(level=native_level)
        return compressor.stream_writer(stream, closefd=not leave_open)  # type: ignore[return-value]

    def decompress(self, stream: BinaryIO, *, leave_open: bool = False) -> BinaryIO:
        decompressor = zstandard.ZstdDecompressor()
        return DecompressingReader(  # type: ignore[return-value]
            stream,
            decompressor.decompressobj,
            multi_member=True,
            leave_open=leave_open,
        )

    def __repr__(self) -> str:
        return "ZstdStreamCompressor()"
