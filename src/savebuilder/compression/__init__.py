"""Stream compressors wrapping save file streams."""

from savebuilder.compression.base import BaseStreamCompressor
from savebuilder.compression.zlib_family import (
    DeflateStreamCompressor,
    GZipStreamCompressor,
    ZLibStreamCompressor,
)
from savebuilder.compression.zstd import ZstdStreamCompressor

__all__ = [
    "BaseStreamCompressor",
    "DeflateStreamCompressor",
    "GZipStreamCompressor",
    "ZLibStreamCompressor",
    "ZstdStreamCompressor",
]
