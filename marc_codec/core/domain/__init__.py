# marc_codec/core/domain/__init__.py

"""Core domain models: records, formats, encodings and errors"""

# Local imports
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.domain.errors import CharacterEncodingError
from marc_codec.core.domain.errors import DirectoryOverflowError
from marc_codec.core.domain.errors import FieldNotTerminatedError
from marc_codec.core.domain.errors import InvalidFieldError
from marc_codec.core.domain.errors import InvalidUtf8Error
from marc_codec.core.domain.errors import InvalidXmlError
from marc_codec.core.domain.errors import LeaderOverflowError
from marc_codec.core.domain.errors import MalformedDirectoryError
from marc_codec.core.domain.errors import MalformedLeaderError
from marc_codec.core.domain.errors import MarcError
from marc_codec.core.domain.errors import MissingRecordTerminatorError
from marc_codec.core.domain.errors import RecordStructureError
from marc_codec.core.domain.errors import TruncatedRecordError
from marc_codec.core.domain.errors import UnencodableCharacterError
from marc_codec.core.domain.field_tags import FieldName
from marc_codec.core.domain.field_tags import tag_for
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.domain.format_encoding import resolve_encoding
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import DataField
from marc_codec.core.domain.record import DirectoryEntry
from marc_codec.core.domain.record import Leader
from marc_codec.core.domain.record import MarcField
from marc_codec.core.domain.record import Record
from marc_codec.core.domain.record import Subfield
from marc_codec.core.domain.record import is_control_tag

__all__ = [
    "CharacterEncodingError",
    "ControlField",
    "DataField",
    "DirectoryEntry",
    "DirectoryOverflowError",
    "Encoding",
    "FieldName",
    "FieldNotTerminatedError",
    "FormatEncoding",
    "InvalidFieldError",
    "InvalidUtf8Error",
    "InvalidXmlError",
    "Leader",
    "LeaderOverflowError",
    "MalformedDirectoryError",
    "MalformedLeaderError",
    "MarcError",
    "MarcField",
    "MarcFormat",
    "MissingRecordTerminatorError",
    "Record",
    "RecordStructureError",
    "Subfield",
    "TruncatedRecordError",
    "UnencodableCharacterError",
    "is_control_tag",
    "resolve_encoding",
    "tag_for",
]
