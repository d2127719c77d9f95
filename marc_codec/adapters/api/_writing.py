# marc_codec/adapters/api/_writing.py

"""Writing records to buffers, streams and files"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import Iterable

# Local imports
from marc_codec.adapters.xml.marcxml import records_to_xml
from marc_codec.application.binary.record_codec import encode_record
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.domain.format_encoding import resolve_encoding
from marc_codec.core.domain.record import Record
from marc_codec.core.types.protocols import ByteWriter

logger = getLogger(__name__)


def write(records: Iterable[Record], format_encoding: FormatEncoding | None = None) -> bytes:
    """Serialize ``records`` in the configured format

    Binary formats produce the records back to back; MARC XML produces one
    UTF-8 ``<collection>`` document. MARC21 leaders are rewritten so that
    position 09 names the encoding the fields are written in.
    """
    format_encoding = format_encoding or FormatEncoding.marc21_default()
    if format_encoding.format is MarcFormat.MARC_XML:
        return records_to_xml(list(records)).encode("utf-8")
    if format_encoding.format is MarcFormat.MARC21:
        records = (_declare_encoding(record, format_encoding) for record in records)
    return b"".join(encode_record(record, format_encoding) for record in records)


def _declare_encoding(record: Record, format_encoding: FormatEncoding) -> Record:
    encoding = resolve_encoding(record.leader, format_encoding)
    if encoding.leader_coding_scheme == record.leader.character_coding_scheme:
        return record
    logger.debug(f"Setting leader/09 to {encoding.leader_coding_scheme!r} for {encoding.value}")
    return record.with_leader(record.leader.with_encoding(encoding))


def write_one(record: Record, format_encoding: FormatEncoding | None = None) -> bytes:
    return write([record], format_encoding)


def to_writer(
    records: Iterable[Record], stream: ByteWriter, format_encoding: FormatEncoding | None = None
) -> int:
    """Write serialized ``records`` to ``stream``

    Returns:
        Number of bytes written
    """
    return stream.write(write(records, format_encoding))


def write_file(
    records: Iterable[Record], path: str | Path, format_encoding: FormatEncoding | None = None
) -> int:
    """Write ``records`` to the file at ``path``, creating parent directories

    Returns:
        Number of bytes written
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = write(records, format_encoding)
    output_path.write_bytes(data)
    logger.info(f"Wrote {len(data):,} bytes to {output_path}")
    return len(data)
