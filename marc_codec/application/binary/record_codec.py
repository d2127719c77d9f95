# marc_codec/application/binary/record_codec.py

"""Binary record codec: one ISO-2709 record to and from a Record

Decoding validates the framing strictly and never repairs it; a malformed
record raises and the caller decides whether to skip it. Field text goes
through the character encoding engine, chosen per record by
``resolve_encoding``.
"""

# Standard library imports
from logging import getLogger

# Local imports
from marc_codec.application.binary._framing import DIRECTORY_ENTRY_LENGTH
from marc_codec.application.binary._framing import FIELD_TERMINATOR
from marc_codec.application.binary._framing import LEADER_LENGTH
from marc_codec.application.binary._framing import MIN_RECORD_LENGTH
from marc_codec.application.binary._framing import RECORD_TERMINATOR
from marc_codec.application.binary.directory import decode_directory
from marc_codec.application.binary.directory import encode_directory
from marc_codec.application.binary.leader import decode_leader
from marc_codec.application.binary.leader import encode_leader
from marc_codec.application.encoding import CharacterCodec
from marc_codec.application.encoding import get_codec
from marc_codec.core.domain.errors import FieldNotTerminatedError
from marc_codec.core.domain.errors import InvalidFieldError
from marc_codec.core.domain.errors import MalformedDirectoryError
from marc_codec.core.domain.errors import MalformedLeaderError
from marc_codec.core.domain.errors import MissingRecordTerminatorError
from marc_codec.core.domain.errors import TruncatedRecordError
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.domain.format_encoding import resolve_encoding
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import DataField
from marc_codec.core.domain.record import DirectoryEntry
from marc_codec.core.domain.record import MarcField
from marc_codec.core.domain.record import Record
from marc_codec.core.domain.record import SUBFIELD_DELIMITER
from marc_codec.core.domain.record import Subfield
from marc_codec.core.domain.record import is_control_tag

logger = getLogger(__name__)

# Characters that would corrupt the framing if they appeared in field text
_STRUCTURAL_CHARACTERS = frozenset({"\x1d", "\x1e", "\x1f"})


def decode_record(segment: bytes, format_encoding: FormatEncoding | None = None) -> Record:
    """Decode one complete record

    Args:
        segment: Exactly one record, from leader to record terminator
        format_encoding: Format and default encoding (MARC21/MARC-8 if omitted)

    Returns:
        The decoded Record; its leader keeps the declared length and base address

    Raises:
        RecordStructureError subclasses for framing problems, and
        InvalidUtf8Error when UTF-8 field data is malformed
    """
    format_encoding = format_encoding or FormatEncoding.marc21_default()
    leader = decode_leader(segment)

    if leader.record_length > len(segment):
        raise TruncatedRecordError(
            f"Leader declares {leader.record_length} bytes, segment has {len(segment)}"
        )
    if leader.record_length < len(segment):
        raise MalformedLeaderError(
            f"Leader declares {leader.record_length} bytes, segment has {len(segment)}", offset=0
        )
    if leader.base_address < MIN_RECORD_LENGTH:
        raise MalformedLeaderError(
            f"Base address {leader.base_address} lies inside the leader", offset=12
        )
    if leader.base_address >= len(segment):
        raise TruncatedRecordError(
            f"Base address {leader.base_address} is beyond the record end ({len(segment)})"
        )

    directory_bytes = segment[LEADER_LENGTH : leader.base_address]
    if directory_bytes[-1] != FIELD_TERMINATOR:
        raise MalformedDirectoryError(
            "Byte before the base address is not the directory terminator",
            offset=leader.base_address - 1,
        )
    entries = decode_directory(directory_bytes)
    if len(entries) * DIRECTORY_ENTRY_LENGTH + 1 != len(directory_bytes):
        raise MalformedDirectoryError(
            "Directory terminator found before the base address", offset=LEADER_LENGTH
        )

    codec = get_codec(resolve_encoding(leader, format_encoding))
    data_end = len(segment) - 1
    fields: list[MarcField] = []
    for entry in entries:
        payload = _field_bytes(segment, leader.base_address, data_end, entry)
        fields.append(_decode_field(entry.tag, payload, codec))

    if segment[-1] != RECORD_TERMINATOR:
        raise MissingRecordTerminatorError(
            f"Record ends with 0x{segment[-1]:02X}, expected 0x{RECORD_TERMINATOR:02X}",
            offset=len(segment) - 1,
        )

    logger.debug(f"Decoded record with {len(fields)} fields using {codec.encoding.value}")
    return Record(leader=leader, fields=tuple(fields))


def _field_bytes(segment: bytes, base_address: int, data_end: int, entry: DirectoryEntry) -> bytes:
    """Slice a field's bytes without its terminator"""
    start = base_address + entry.start
    end = start + entry.length
    if end > data_end:
        raise MalformedDirectoryError(
            f"Field {entry.tag} ({start}-{end}) runs past the end of the field data ({data_end})",
            offset=start,
        )
    if entry.length == 0 or segment[end - 1] != FIELD_TERMINATOR:
        raise FieldNotTerminatedError(f"Field {entry.tag} is not terminated", offset=end - 1)
    return segment[start : end - 1]


def _decode_field(tag: str, payload: bytes, codec: CharacterCodec) -> MarcField:
    text = codec.decode(payload)
    if is_control_tag(tag):
        return ControlField(tag=tag, value=text)

    indicators = text[:2].ljust(2)
    pieces = text[2:].split(SUBFIELD_DELIMITER)
    if pieces[0]:
        logger.debug(f"Ignoring {len(pieces[0])} characters before the first subfield of {tag}")

    subfields = tuple(Subfield(code=piece[0], value=piece[1:]) for piece in pieces[1:] if piece)
    return DataField(
        tag=tag, indicator1=indicators[0], indicator2=indicators[1], subfields=subfields
    )


def encode_record(record: Record, format_encoding: FormatEncoding | None = None) -> bytes:
    """Serialize ``record`` to ISO-2709 bytes

    The record length and base address are computed; every other leader
    position is written as given. The field encoding follows the same rule as
    decoding, so the output reads back to an equal record.

    Raises:
        InvalidFieldError: a tag, indicator or subfield code has the wrong shape
        UnencodableCharacterError: field text does not fit the encoding
        DirectoryOverflowError, LeaderOverflowError: format size limits
    """
    format_encoding = format_encoding or FormatEncoding.marc21_default()
    codec = get_codec(resolve_encoding(record.leader, format_encoding))

    entries: list[DirectoryEntry] = []
    data = bytearray()
    for marc_field in record.fields:
        payload = codec.encode(_field_text(marc_field)) + bytes([FIELD_TERMINATOR])
        entries.append(DirectoryEntry(tag=marc_field.tag, length=len(payload), start=len(data)))
        data += payload

    directory = encode_directory(entries)
    base_address = LEADER_LENGTH + len(directory)
    total_length = base_address + len(data) + 1
    leader = encode_leader(record.leader, total_length, base_address)

    return leader + directory + bytes(data) + bytes([RECORD_TERMINATOR])


def _field_text(marc_field: MarcField) -> str:
    """Text of a field as it is stored: value, or indicators plus delimited subfields"""
    tag = marc_field.tag
    if len(tag) != 3 or not tag.isascii() or not tag.isprintable():
        raise InvalidFieldError(f"Tag {tag!r} is not three printable ASCII characters")

    if isinstance(marc_field, ControlField):
        if not is_control_tag(tag):
            raise InvalidFieldError(f"Control field cannot use data field tag {tag}")
        _check_text(tag, marc_field.value)
        return marc_field.value

    if is_control_tag(tag):
        raise InvalidFieldError(f"Data field cannot use control field tag {tag}")
    for indicator in marc_field.indicators:
        if not _is_single_printable_ascii(indicator):
            raise InvalidFieldError(f"Field {tag} has invalid indicator {indicator!r}")

    parts = [marc_field.indicator1, marc_field.indicator2]
    for subfield in marc_field.subfields:
        if not _is_single_printable_ascii(subfield.code):
            raise InvalidFieldError(f"Field {tag} has invalid subfield code {subfield.code!r}")
        _check_text(tag, subfield.value)
        parts.append(SUBFIELD_DELIMITER + subfield.code + subfield.value)
    return "".join(parts)


def _check_text(tag: str, value: str) -> None:
    if any(char in _STRUCTURAL_CHARACTERS for char in value):
        raise InvalidFieldError(f"Field {tag} contains a MARC delimiter character")


def _is_single_printable_ascii(value: str) -> bool:
    return len(value) == 1 and value.isascii() and value.isprintable()
