"""Base classes for stream serializers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import BinaryIO


class BaseStreamSerializer(ABC):
    """Abstract base class for synchronous stream serializers.

    Deserializing may yield None, meaning the stream holds no data. That
    outcome is not an error and must stay distinguishable from malformed
    input, which raises.
    """

    @abstractmethod
    def serialize(self, stream: BinaryIO, value: Any, declared_type: Any) -> None:  # noqa: ANN401
        """Serialize a value into a stream.

        Args:
            stream: Writable binary stream.
            value: Value to serialize.
            declared_type: Declared type of the value.
        """

    @abstractmethod
    def deserialize(self, stream: BinaryIO, declared_type: Any) -> Any | None:  # noqa: ANN401
        """Deserialize a value of the declared type from a stream.

        Args:
            stream: Readable binary stream.
            declared_type: Type to deserialize into.

        Returns:
            The deserialized value, or None if the stream holds no data.
        """


class BaseAsyncStreamSerializer(ABC):
    """Abstract base class for asynchronous stream serializers."""

    @abstractmethod
    async def serialize_async(self, stream: BinaryIO, value: Any, declared_type: Any) -> None:  # noqa: ANN401
        """Serialize a value into a stream asynchronously."""

    @abstractmethod
    async def deserialize_async(self, stream: BinaryIO, declared_type: Any) -> Any | None:  # noqa: ANN401
        """Deserialize a value of the declared type from a stream asynchronously.

        Returns:
            The deserialized value, or None if the stream holds no data.
        """
