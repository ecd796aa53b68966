"""GZip, Deflate and ZLib compressors built on the standard library's zlib.

The three formats share the DEFLATE algorithm and differ only in their
container, which zlib selects through its window bits:
- GZip: RFC 1952 header and CRC32 trailer; several members may follow each other
- Deflate: raw RFC 1951 stream without container
- ZLib: RFC 1950 header and Adler-32 trailer
"""

from __future__ import annotations

import zlib
from functools import partial
from typing import TYPE_CHECKING, ClassVar

from savebuilder.compression.base import BaseStreamCompressor
from savebuilder.compression.streams import CompressingWriter, DecompressingReader
from savebuilder.types import CompressionLevel

if TYPE_CHECKING:
    from typing import BinaryIO

ZLIB_LEVELS: dict[CompressionLevel, int] = {
    CompressionLevel.OPTIMAL: 6,
    CompressionLevel.FASTEST: zlib.Z_BEST_SPEED,
    CompressionLevel.NO_COMPRESSION: zlib.Z_NO_COMPRESSION,
    CompressionLevel.SMALLEST_SIZE: zlib.Z_BEST_COMPRESSION,
}


class ZlibFamilyCompressor(BaseStreamCompressor):
    """Base class for compressors of the zlib family.

    Class Attributes:
        wbits: zlib window bits selecting the container format.
        multi_member: Whether the container allows concatenated members.
    """

    wbits: ClassVar[int]
    multi_member: ClassVar[bool] = False

    def compress(
        self,
        stream: BinaryIO,
        level: CompressionLevel = CompressionLevel.OPTIMAL,
        *,
        leave_open: bool = False,
    ) -> BinaryIO:
        native_level = ZLIB_LEVELS[CompressionLevel.parse(level)]
        return CompressingWriter(stream, native_level, self.wbits, leave_open=leave_open)  # type: ignore[return-value]

    def decompress(self, stream: BinaryIO, *, leave_open: bool = False) -> BinaryIO:
        return DecompressingReader(  # type: ignore[return-value]
            stream,
            partial(zlib.decompressobj, self.wbits),
            multi_member=self.multi_member,
            leave_open=leave_open,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GZipStreamCompressor(ZlibFamilyCompressor):
    """Provides GZip compression and decompression streams."""

    wbits: ClassVar[int] = zlib.MAX_WBITS | 16
    multi_member: ClassVar[bool] = True


class DeflateStreamCompressor(ZlibFamilyCompressor):
    """Provides raw Deflate compression and decompression streams."""

    wbits: ClassVar[int] = -zlib.MAX_WBITS


class ZLibStreamCompressor(ZlibFamilyCompressor):
    """Provides ZLib compression and decompression streams."""

    wbits: ClassVar[int] = zlib.MAX_WBITS
