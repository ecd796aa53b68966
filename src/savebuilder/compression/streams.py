"""Compressing and decompressing stream wrappers.

CompressingWriter drives a zlib compressor. DecompressingReader drives any
incremental decompressor exposing decompress(), eof and unused_data, which
covers both zlib and zstandard decompression objects.
"""

from __future__ import annotations

import io
import zlib
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import BinaryIO

READ_CHUNK_SIZE = 64 * 1024


class CompressingWriter(io.RawIOBase):
    """Writable stream compressing everything written to it into a base stream.

    Attributes:
        leave_open: Whether the base stream stays open when this writer closes.
    """

    def __init__(self, base: BinaryIO, level: int, wbits: int, *, leave_open: bool = False) -> None:
        """Initialize the writer.

        Args:
            base: Stream receiving compressed bytes.
            level: zlib compression level (0-9).
            wbits: zlib window bits selecting the container format.
            leave_open: True to leave the base stream open on close.
        """
        super().__init__()
        self.base = base
        self.leave_open = leave_open
        self._compressor = zlib.compressobj(level, zlib.DEFLATED, wbits)

    def writable(self) -> bool:
        return True

    def write(self, data: bytes | bytearray | memoryview) -> int:  # type: ignore[override]
        if self.closed:
            msg = "I/O operation on closed stream"
            raise ValueError(msg)
        view = memoryview(data)
        chunk = self._compressor.compress(view)
        if chunk:
            self.base.write(chunk)
        return view.nbytes

    def flush(self) -> None:
        if not self.closed:
            self.base.flush()

    def close(self) -> None:
        if self.closed:
            return
        try:
            self.base.write(self._compressor.flush())
            super().close()
        finally:
            if not self.leave_open:
                self.base.close()


class DecompressingReader(io.RawIOBase):
    """Readable stream decompressing the content of a base stream.

    A base stream holding nothing at all reads as an empty payload. A base
    stream ending inside a compressed member raises EOFError. Bytes after the
    end of the compressed data raise ValueError, unless the format allows
    several members, in which case they are decoded as the next member.

    Attributes:
        leave_open: Whether the base stream stays open when this reader closes.
        multi_member: Whether further members may follow the first one.
    """

    def __init__(
        self,
        base: BinaryIO,
        new_decompressor: Callable[[], Any],
        *,
        multi_member: bool = False,
        leave_open: bool = False,
    ) -> None:
        """Initialize the reader.

        Args:
            base: Stream holding compressed bytes.
            new_decompressor: Factory returning a fresh incremental decompressor
                for each member.
            multi_member: True if the format allows concatenated members.
            leave_open: True to leave the base stream open on close.
        """
        super().__init__()
        self.base = base
        self.multi_member = multi_member
        self.leave_open = leave_open
        self._new_decompressor = new_decompressor
        self._decompressor = new_decompressor()
        self._pending = bytearray()
        self._unused = b""
        self._in_member = False
        self._finished = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        if self.closed:
            msg = "I/O operation on closed stream"
            raise ValueError(msg)
        while not self._pending and not self._finished:
            self._fill()
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        del self._pending[:size]
        return size

    def close(self) -> None:
        if self.closed:
            return
        try:
            super().close()
        finally:
            if not self.leave_open:
                self.base.close()

    def _fill(self) -> None:
        chunk = self._unused or self.base.read(READ_CHUNK_SIZE)
        self._unused = b""
        if not chunk:
            self._finished = True
            if self._in_member:
                msg = "Compressed file ended before the end-of-stream marker was reached"
                raise EOFError(msg)
            return

        self._in_member = True
        self._pending += self._decompressor.decompress(chunk)
        if not self._decompressor.eof:
            return

        self._in_member = False
        unused = self._decompressor.unused_data
        if self.multi_member:
            self._decompressor = self._new_decompressor()
            self._unused = unused
        elif unused or self.base.read(1):
            self._finished = True
            msg = "Trailing data after the end of the compressed stream"
            raise ValueError(msg)
        else:
            self._finished = True
