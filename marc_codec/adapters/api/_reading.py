# marc_codec/adapters/api/_reading.py

"""Reading records from buffers, streams and files"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from time import time
from typing import Iterator

# Local imports
from marc_codec.adapters.xml.marcxml import parse_xml
from marc_codec.application.binary.record_codec import decode_record
from marc_codec.application.binary.scanner import scan_records
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.domain.errors import MarcError
from marc_codec.core.domain.errors import TruncatedRecordError
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.domain.record import Record
from marc_codec.core.types.protocols import ByteReader

logger = getLogger(__name__)

_UTF8_BOM = b"\xef\xbb\xbf"


def detect_format(data: bytes) -> MarcFormat:
    """Guess the format of ``data``: MARC XML if it opens with ``<``, else MARC21

    UNIMARC cannot be told apart from MARC21 by its framing, so binary data is
    always reported as MARC21.
    """
    head = data[:1024].lstrip()
    if head.startswith(_UTF8_BOM):
        head = head[len(_UTF8_BOM) :].lstrip()
    return MarcFormat.MARC_XML if head.startswith(b"<") else MarcFormat.MARC21


def _resolve_format_encoding(
    data: bytes, format_encoding: FormatEncoding | None
) -> FormatEncoding:
    if format_encoding is not None:
        return format_encoding
    return FormatEncoding.for_format(detect_format(data))


def iter_records(
    data: bytes, format_encoding: FormatEncoding | None = None, skip_invalid: bool = False
) -> Iterator[Record]:
    """Yield the records of ``data`` in order

    Args:
        data: Concatenated binary records or a MARC XML document
        format_encoding: Format and encoding; detected from the data if omitted
        skip_invalid: Log and skip records that fail to decode instead of raising

    Yields:
        Decoded records

    Raises:
        MarcError subclasses. Errors locating record boundaries are raised even
        when ``skip_invalid`` is set.
    """
    format_encoding = _resolve_format_encoding(data, format_encoding)

    if format_encoding.format is MarcFormat.MARC_XML:
        yield from parse_xml(data)
        return

    skipped = 0
    for index, segment in enumerate(scan_records(data)):
        try:
            record = decode_record(segment, format_encoding)
        except MarcError as e:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"Skipping record {index + 1}: {e}")
            continue
        yield record

    if skipped:
        logger.info(f"Skipped {skipped} invalid records")


def parse(
    data: bytes, format_encoding: FormatEncoding | None = None, skip_invalid: bool = False
) -> list[Record]:
    """Decode every record in ``data``"""
    return list(iter_records(data, format_encoding, skip_invalid))


def parse_one(data: bytes, format_encoding: FormatEncoding | None = None) -> Record:
    """Decode the first record in ``data``; later records are not read

    Raises:
        TruncatedRecordError: ``data`` holds no record
    """
    for record in iter_records(data, format_encoding):
        return record
    raise TruncatedRecordError("No record found in empty input", offset=0)


def from_reader(
    stream: ByteReader, format_encoding: FormatEncoding | None = None, skip_invalid: bool = False
) -> list[Record]:
    """Read ``stream`` to its end and decode its records"""
    return parse(stream.read(), format_encoding, skip_invalid)


def read_file(
    path: str | Path, format_encoding: FormatEncoding | None = None, skip_invalid: bool = False
) -> list[Record]:
    """Load every record from the file at ``path``

    Args:
        path: MARC binary or MARC XML file
        format_encoding: Format and encoding; detected from the content if omitted
        skip_invalid: Log and skip records that fail to decode

    Returns:
        Decoded records in file order
    """
    start_time = time()
    data = Path(path).read_bytes()
    format_encoding = _resolve_format_encoding(data, format_encoding)
    logger.info(
        f"Reading {path} as {format_encoding.format.value} ({format_encoding.encoding.value})"
    )

    records = parse(data, format_encoding, skip_invalid)
    logger.info(f"Loaded {len(records):,} records in {time() - start_time:.2f}s")
    return records
