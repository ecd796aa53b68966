"""Helper functions for setting up logging and creating common save files.

This module provides high-level functions to simplify save file creation.
Users can choose one of the factory functions for the usual configurations or
build a SaveFile from individual providers for more control.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.logging import RichHandler

from savebuilder.compression import GZipStreamCompressor
from savebuilder.conf import settings
from savebuilder.io import FileStreamIO, HttpStreamIO
from savebuilder.savefile import SaveFile
from savebuilder.serialization import JsonStreamSerializer

if TYPE_CHECKING:
    import os

    from savebuilder.chunks.base import BaseSaveChunk, TData
    from savebuilder.compression.base import BaseStreamCompressor
    from savebuilder.io.http import HttpRequestUris


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for save file operations.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_gzip_json_file(
    root: BaseSaveChunk[TData],
    file_path: str | os.PathLike[str],
    **json_options: Any,  # noqa: ANN401
) -> SaveFile[TData]:
    """Create a save file that stores GZip-compressed JSON on disk.

    Args:
        root: Root chunk of the chunk tree.
        file_path: Location of the save file.
        **json_options: Options for JsonStreamSerializer (indent, by_alias, exclude_none).

    Returns:
        SaveFile supporting both synchronous and asynchronous operations.

    Example:
        >>> save_file = create_gzip_json_file(root, "saves/slot_1.json.gz", indent=2)
        >>> save_file.save()
    """
    return SaveFile(
        root,
        FileStreamIO(file_path),
        JsonStreamSerializer(**json_options),
        GZipStreamCompressor(),
    )


def create_http_json_file(
    root: BaseSaveChunk[TData],
    base_url: str,
    request_uris: HttpRequestUris | None = None,
    compressor: BaseStreamCompressor | None = None,
    **json_options: Any,  # noqa: ANN401
) -> SaveFile[TData]:
    """Create a save file that stores JSON through a web service.

    The returned save file only supports the asynchronous operations.

    Args:
        root: Root chunk of the chunk tree.
        base_url: Base address of the web service.
        request_uris: Relative addresses for read/write/exists/delete requests.
        compressor: Optional compressor applied to the payload.
        **json_options: Options for JsonStreamSerializer (indent, by_alias, exclude_none).

    Returns:
        SaveFile backed by an HttpStreamIO.
    """
    return SaveFile(
        root,
        HttpStreamIO(base_url, request_uris),
        JsonStreamSerializer(**json_options),
        compressor,
    )
