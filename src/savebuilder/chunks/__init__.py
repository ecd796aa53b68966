"""Save chunks composing the contents of a save file."""

from savebuilder.chunks.base import BaseSaveChunk
from savebuilder.chunks.chunk import SaveChunk
from savebuilder.chunks.registry import TypeKeyedRegistry

__all__ = ["BaseSaveChunk", "SaveChunk", "TypeKeyedRegistry"]
