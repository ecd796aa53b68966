"""I/O providers handing out the streams a save file is read from and written to."""

from savebuilder.io.base import BaseAsyncStreamIO, BaseStreamIO
from savebuilder.io.file import FileStreamIO
from savebuilder.io.http import HttpRequestUris, HttpStreamIO

__all__ = ["BaseAsyncStreamIO", "BaseStreamIO", "FileStreamIO", "HttpRequestUris", "HttpStreamIO"]
