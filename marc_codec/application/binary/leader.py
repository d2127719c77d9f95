# marc_codec/application/binary/leader.py

"""Leader codec: the fixed 24 byte record header

Positions::

    00-04  record length          10     indicator count
    05     record status          11     subfield code count
    06     type of record         12-16  base address of data
    07     bibliographic level    17     encoding level
    08     type of control        18     descriptive cataloging form
    09     character coding       19     multipart resource level
                                  20-23  entry map
"""

# Local imports
from marc_codec.application.binary._framing import LEADER_LENGTH
from marc_codec.application.binary._framing import MAX_RECORD_LENGTH
from marc_codec.core.domain.errors import LeaderOverflowError
from marc_codec.core.domain.errors import MalformedLeaderError
from marc_codec.core.domain.errors import TruncatedRecordError
from marc_codec.core.domain.record import Leader

# Single character slots: (attribute, position)
_CHARACTER_SLOTS: tuple[tuple[str, int], ...] = (
    ("record_status", 5),
    ("record_type", 6),
    ("bibliographic_level", 7),
    ("control_type", 8),
    ("character_coding_scheme", 9),
    ("encoding_level", 17),
    ("descriptive_form", 18),
    ("multipart_level", 19),
)


def _digits(text: str, start: int, end: int, name: str) -> int:
    value = text[start:end]
    if not (value.isascii() and value.isdigit()):
        raise MalformedLeaderError(f"Leader {name} {value!r} is not numeric", offset=start)
    return int(value)


def decode_leader(data: bytes) -> Leader:
    """Parse the first 24 bytes of ``data`` into a Leader

    Raises:
        TruncatedRecordError: fewer than 24 bytes are available
        MalformedLeaderError: a numeric slot is not all digits, or a byte is not ASCII
    """
    if len(data) < LEADER_LENGTH:
        raise TruncatedRecordError(
            f"Leader needs {LEADER_LENGTH} bytes, only {len(data)} available"
        )
    raw = data[:LEADER_LENGTH]
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedLeaderError("Leader contains non-ASCII bytes", offset=e.start) from e

    return Leader(
        record_length=_digits(text, 0, 5, "record length"),
        indicator_count=_digits(text, 10, 11, "indicator count"),
        subfield_code_count=_digits(text, 11, 12, "subfield code count"),
        base_address=_digits(text, 12, 17, "base address"),
        entry_map=text[20:24],
        **{name: text[position] for name, position in _CHARACTER_SLOTS},
    )


def encode_leader(leader: Leader, total_length: int, base_address: int) -> bytes:
    """Serialize ``leader`` with the given record length and base address

    Raises:
        LeaderOverflowError: a length does not fit in five digits
        MalformedLeaderError: a character slot is not one ASCII character
    """
    for name, value in (("record length", total_length), ("base address", base_address)):
        if value > MAX_RECORD_LENGTH:
            raise LeaderOverflowError(
                f"{name.capitalize()} {value} exceeds the {MAX_RECORD_LENGTH} byte limit"
            )
        if value < 0:
            raise MalformedLeaderError(f"{name.capitalize()} {value} is negative")

    for name, position in _CHARACTER_SLOTS:
        value = getattr(leader, name)
        if len(value) != 1 or not value.isascii():
            raise MalformedLeaderError(
                f"Leader {name} must be one ASCII character, got {value!r}", offset=position
            )
    for name, count in (
        ("indicator_count", leader.indicator_count),
        ("subfield_code_count", leader.subfield_code_count),
    ):
        if not 0 <= count <= 9:
            raise MalformedLeaderError(f"Leader {name} must be a single digit, got {count}")
    if len(leader.entry_map) != 4 or not leader.entry_map.isascii():
        raise MalformedLeaderError(
            f"Leader entry map must be four ASCII characters, got {leader.entry_map!r}"
        )

    text = (
        f"{total_length:05d}"
        f"{leader.record_status}{leader.record_type}"
        f"{leader.bibliographic_level}{leader.control_type}"
        f"{leader.character_coding_scheme}"
        f"{leader.indicator_count}{leader.subfield_code_count}"
        f"{base_address:05d}"
        f"{leader.encoding_level}{leader.descriptive_form}{leader.multipart_level}"
        f"{leader.entry_map}"
    )
    return text.encode("ascii")


def leader_to_text(leader: Leader) -> str:
    """The leader as 24 characters, using its stored length and base address"""
    return encode_leader(leader, leader.record_length, leader.base_address).decode("ascii")
