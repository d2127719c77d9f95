# marc_codec/core/types/__init__.py

"""Shared type aliases and protocols"""

# Local imports
from marc_codec.core.types.json import JSONDict
from marc_codec.core.types.json import JSONList
from marc_codec.core.types.json import JSONPrimitive
from marc_codec.core.types.json import JSONType
from marc_codec.core.types.protocols import ByteReader
from marc_codec.core.types.protocols import ByteWriter

__all__ = ["ByteReader", "ByteWriter", "JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
