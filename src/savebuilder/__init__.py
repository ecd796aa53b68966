"""savebuilder - compose save files from loosely-coupled chunks of state.

This package provides:
- Save chunks that form a tree, each producing and consuming its own data
- A SaveFile orchestrating serialization, compression and I/O
- File and HTTP I/O providers
- GZip, Deflate, ZLib and Zstandard compressors
- A JSON serializer driven by the declared data type

Quick start:
    from dataclasses import dataclass

    from savebuilder import SaveChunk, create_gzip_json_file

    @dataclass
    class PlayerData:
        name: str = ""
        level: int = 1

    chunk = SaveChunk(
        PlayerData,
        on_save=lambda chunk: PlayerData(player.name, player.level),
        on_load=lambda chunk, data: player.restore(data),
    )
    save_file = create_gzip_json_file(chunk, "saves/player.json.gz")
    save_file.save()
    save_file.load()

Settings:
    from savebuilder.conf import settings

    settings.configure(DEFAULT_COMPRESSION_LEVEL="smallest_size", JSON_INDENT=2)
"""

__version__ = "0.1.0"

from savebuilder.chunks import BaseSaveChunk, SaveChunk, TypeKeyedRegistry
from savebuilder.compression import (
    BaseStreamCompressor,
    DeflateStreamCompressor,
    GZipStreamCompressor,
    ZLibStreamCompressor,
    ZstdStreamCompressor,
)
from savebuilder.conf import settings
from savebuilder.errors import DuplicateKeyError, NotFoundError, SaveFileError, UnsupportedOperationError
from savebuilder.helpers import create_gzip_json_file, create_http_json_file, setup_logging
from savebuilder.io import BaseAsyncStreamIO, BaseStreamIO, FileStreamIO, HttpRequestUris, HttpStreamIO
from savebuilder.savefile import SaveFile
from savebuilder.serialization import BaseAsyncStreamSerializer, BaseStreamSerializer, JsonStreamSerializer
from savebuilder.types import CompressionLevel

__all__ = [
    "BaseAsyncStreamIO",
    "BaseAsyncStreamSerializer",
    "BaseSaveChunk",
    "BaseStreamCompressor",
    "BaseStreamIO",
    "BaseStreamSerializer",
    "CompressionLevel",
    "DeflateStreamCompressor",
    "DuplicateKeyError",
    "FileStreamIO",
    "GZipStreamCompressor",
    "HttpRequestUris",
    "HttpStreamIO",
    "JsonStreamSerializer",
    "NotFoundError",
    "SaveChunk",
    "SaveFile",
    "SaveFileError",
    "TypeKeyedRegistry",
    "UnsupportedOperationError",
    "ZLibStreamCompressor",
    "ZstdStreamCompressor",
    "__version__",
    "create_gzip_json_file",
    "create_http_json_file",
    "settings",
]
