# marc_codec/core/domain/errors.py

"""Exception hierarchy for MARC decoding and encoding

Every error raised by the codec derives from ``MarcError`` (itself a
``ValueError``), so callers can catch the whole family or a single kind.
Structural errors carry the byte ``offset`` where the problem was found when
one is meaningful.
"""


class MarcError(ValueError):
    """Base class for all codec errors"""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at byte {self.offset})"


class RecordStructureError(MarcError):
    """The ISO-2709 framing of a record is invalid"""


class TruncatedRecordError(RecordStructureError):
    """Fewer bytes are available than the record declares"""


class MalformedLeaderError(RecordStructureError):
    """A leader slot holds a value that cannot be interpreted"""


class MalformedDirectoryError(RecordStructureError):
    """The directory is not a sequence of 12-byte entries ending in 0x1E"""


class FieldNotTerminatedError(RecordStructureError):
    """A field's byte range does not end with the field terminator"""


class MissingRecordTerminatorError(RecordStructureError):
    """The record's last byte is not the record terminator"""


class LeaderOverflowError(RecordStructureError):
    """Record length or base address does not fit in five digits"""


class DirectoryOverflowError(RecordStructureError):
    """A field length or start offset does not fit its directory slot"""


class InvalidFieldError(RecordStructureError):
    """A field cannot be serialized (bad tag, indicator or subfield code)"""


class CharacterEncodingError(MarcError):
    """Field text cannot be converted between bytes and Unicode"""


class InvalidUtf8Error(CharacterEncodingError):
    """Field bytes declared as UTF-8 are not valid UTF-8"""


class UnencodableCharacterError(CharacterEncodingError):
    """A character has no representation in the target encoding"""

    def __init__(self, character: str, encoding: str, position: int | None = None):
        message = (
            f"Character {character!r} (U+{ord(character):04X}) cannot be encoded as {encoding}"
        )
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.character = character
        self.encoding = encoding
        self.position = position


class InvalidXmlError(MarcError):
    """MARC XML input is not well formed or lacks required attributes"""
