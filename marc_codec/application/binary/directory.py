# marc_codec/application/binary/directory.py

"""Directory codec: the index of 12 byte entries between leader and data

Each entry is a 3 character tag, a 4 digit field length and a 5 digit start
offset relative to the base address. The directory ends with 0x1E.
"""

# Local imports
from marc_codec.application.binary._framing import DIRECTORY_ENTRY_LENGTH
from marc_codec.application.binary._framing import FIELD_TERMINATOR
from marc_codec.application.binary._framing import MAX_FIELD_LENGTH
from marc_codec.application.binary._framing import MAX_FIELD_START
from marc_codec.core.domain.errors import DirectoryOverflowError
from marc_codec.core.domain.errors import MalformedDirectoryError
from marc_codec.core.domain.record import DirectoryEntry


def decode_directory(data: bytes, entry_count: int | None = None) -> list[DirectoryEntry]:
    """Read directory entries from ``data`` up to the first field terminator

    Args:
        data: Bytes starting at the first directory entry
        entry_count: Expected number of entries, if known

    Returns:
        Entries in directory order

    Raises:
        MalformedDirectoryError: no terminator, a partial entry, a non-numeric
            length or start, or a count other than ``entry_count``
    """
    end = data.find(FIELD_TERMINATOR)
    if end < 0:
        raise MalformedDirectoryError("Directory terminator not found")
    if end % DIRECTORY_ENTRY_LENGTH:
        raise MalformedDirectoryError(
            f"Directory length {end} is not a multiple of {DIRECTORY_ENTRY_LENGTH}"
        )

    entries = []
    for offset in range(0, end, DIRECTORY_ENTRY_LENGTH):
        raw = data[offset : offset + DIRECTORY_ENTRY_LENGTH]
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedDirectoryError(
                "Directory entry contains non-ASCII bytes", offset=offset + e.start
            ) from e
        length, start = text[3:7], text[7:12]
        if not (length.isdigit() and start.isdigit()):
            raise MalformedDirectoryError(
                f"Directory entry {text!r} has a non-numeric length or start", offset=offset
            )
        entries.append(DirectoryEntry(tag=text[:3], length=int(length), start=int(start)))

    if entry_count is not None and len(entries) != entry_count:
        raise MalformedDirectoryError(
            f"Directory has {len(entries)} entries, expected {entry_count}"
        )
    return entries


def encode_directory(entries: list[DirectoryEntry]) -> bytes:
    """Serialize ``entries`` followed by the directory terminator

    Raises:
        DirectoryOverflowError: a length or start does not fit its slot
        MalformedDirectoryError: a tag is not three ASCII characters
    """
    out = bytearray()
    for entry in entries:
        if len(entry.tag) != 3 or not entry.tag.isascii():
            raise MalformedDirectoryError(f"Tag {entry.tag!r} is not three ASCII characters")
        if entry.length > MAX_FIELD_LENGTH:
            raise DirectoryOverflowError(
                f"Field {entry.tag} is {entry.length} bytes, limit is {MAX_FIELD_LENGTH}"
            )
        if entry.start > MAX_FIELD_START:
            raise DirectoryOverflowError(
                f"Field {entry.tag} starts at {entry.start}, limit is {MAX_FIELD_START}"
            )
        out += f"{entry.tag}{entry.length:04d}{entry.start:05d}".encode("ascii")
    out.append(FIELD_TERMINATOR)
    return bytes(out)
