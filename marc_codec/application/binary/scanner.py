# marc_codec/application/binary/scanner.py

"""Split a buffer of concatenated records into record segments

Only the five digit length prefix of each record is read; fields are left to
the record codec. A segment that later fails to decode does not stop the scan,
but a bad length prefix does, since the next record boundary is then unknown.
"""

# Standard library imports
from logging import getLogger
from typing import Iterator

# Local imports
from marc_codec.application.binary._framing import LENGTH_PREFIX
from marc_codec.application.binary._framing import MIN_RECORD_LENGTH
from marc_codec.core.domain.errors import MalformedLeaderError
from marc_codec.core.domain.errors import TruncatedRecordError

logger = getLogger(__name__)


def scan_records(buffer: bytes) -> Iterator[bytes]:
    """Yield each record segment of ``buffer`` in order

    Raises:
        TruncatedRecordError: a record is cut off by the end of the buffer
        MalformedLeaderError: a length prefix is not numeric or is too small
    """
    view = memoryview(buffer)
    position = 0
    while position < len(buffer):
        remaining = len(buffer) - position
        if remaining < LENGTH_PREFIX:
            raise TruncatedRecordError(
                f"{remaining} trailing bytes cannot hold a record length", offset=position
            )

        prefix = bytes(view[position : position + LENGTH_PREFIX])
        if not (prefix.isascii() and prefix.isdigit()):
            raise MalformedLeaderError(f"Record length {prefix!r} is not numeric", offset=position)

        length = int(prefix)
        if length < MIN_RECORD_LENGTH:
            raise MalformedLeaderError(
                f"Record length {length} is shorter than the minimum {MIN_RECORD_LENGTH}",
                offset=position,
            )
        if length > remaining:
            raise TruncatedRecordError(
                f"Record declares {length} bytes, only {remaining} remain", offset=position
            )

        yield bytes(view[position : position + length])
        position += length


class RecordScanner:
    """Restartable iterable over the record segments of a buffer

    Each ``iter()`` starts a fresh scan with its own cursor, so the same
    scanner can be traversed any number of times.
    """

    __slots__ = ("buffer",)

    def __init__(self, buffer: bytes):
        self.buffer = bytes(buffer)

    def __iter__(self) -> Iterator[bytes]:
        return scan_records(self.buffer)

    def count(self) -> int:
        """Number of records in the buffer"""
        total = sum(1 for _ in self)
        logger.debug(f"Buffer of {len(self.buffer)} bytes holds {total} records")
        return total
