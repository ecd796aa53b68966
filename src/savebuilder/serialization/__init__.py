"""Serializers turning save data into bytes and back."""

from savebuilder.serialization.base import BaseAsyncStreamSerializer, BaseStreamSerializer
from savebuilder.serialization.json_serializer import JsonStreamSerializer

__all__ = ["BaseAsyncStreamSerializer", "BaseStreamSerializer", "JsonStreamSerializer"]
