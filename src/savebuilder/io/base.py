"""Base classes for input/output stream providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import BinaryIO


class BaseStreamIO(ABC):
    """Abstract base class for synchronous I/O providers.

    An I/O provider hands out binary streams for reading from and writing to a
    single io source, such as a file. The caller owns every stream it receives
    and is responsible for closing it.
    """

    @abstractmethod
    def read(self) -> BinaryIO:
        """Open a read-only stream from the io source.

        Returns:
            A new readable binary stream.

        Raises:
            FileNotFoundError: If the io source does not exist (or the
                provider's equivalent error).
        """

    @abstractmethod
    def write(self) -> BinaryIO:
        """Open a write-only stream to the io source.

        Creates the io source, including any missing parent containers, and
        truncates existing content.

        Returns:
            A new writable binary stream.
        """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the io source exists."""

    @abstractmethod
    def delete(self) -> None:
        """Permanently delete the io source.

        Does nothing if the io source does not exist.
        """


class BaseAsyncStreamIO(ABC):
    """Abstract base class for asynchronous I/O providers.

    Asynchronous transports often need the full payload up front (for example
    to send a Content-Length), so write_async() receives a fully buffered
    stream instead of handing one out.
    """

    @abstractmethod
    async def read_async(self) -> BinaryIO:
        """Read the io source and return a readable binary stream over its content."""

    @abstractmethod
    async def write_async(self, stream: BinaryIO) -> None:
        """Write the content of a stream to the io source.

        Args:
            stream: Fully buffered stream, positioned at the start of the payload.
        """

    @abstractmethod
    async def exists_async(self) -> bool:
        """Check if the io source exists."""

    @abstractmethod
    async def delete_async(self) -> bool:
        """Delete the io source.

        Returns:
            True if the io source was deleted, False otherwise.
        """
