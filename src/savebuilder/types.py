"""Custom types and enumerations."""

from __future__ import annotations

from enum import Enum


class CompressionLevel(Enum):
    """Compression level hint passed to stream compressors.

    The hint states whether to emphasize speed or output size; each compressor
    maps it onto the native levels of its codec.
    """

    OPTIMAL = "optimal"
    FASTEST = "fastest"
    NO_COMPRESSION = "no_compression"
    SMALLEST_SIZE = "smallest_size"

    @classmethod
    def parse(cls, value: CompressionLevel | str) -> CompressionLevel:
        """Resolve a level from an enum member or its (case-insensitive) name or value.

        Args:
            value: Enum member, or a string such as "fastest" or "SMALLEST_SIZE".

        Returns:
            The matching CompressionLevel member.

        Raises:
            ValueError: If the string names no compression level.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        msg = f"Unknown compression level: {value!r}"
        raise ValueError(msg)
