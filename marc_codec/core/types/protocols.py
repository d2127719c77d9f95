# marc_codec/core/types/protocols.py

"""Protocol definitions for the byte streams the API reads from and writes to."""

# Standard library imports
from typing import Protocol


class ByteReader(Protocol):
    """Anything with a binary ``read()``, such as an open file or BytesIO."""

    def read(self, size: int = -1, /) -> bytes: ...


class ByteWriter(Protocol):
    """Anything with a binary ``write()``."""

    def write(self, data: bytes, /) -> int: ...
