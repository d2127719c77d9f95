# marc_codec/__init__.py

"""MARC Codec Package

Parse and serialize bibliographic records in MARC21 and UNIMARC (ISO 2709)
and MARC XML, converting legacy character encodings such as MARC-8 and
ISO 5426 to Unicode and back.
"""

# Local imports
# High-level API
from marc_codec.adapters.api import detect_format
from marc_codec.adapters.api import from_reader
from marc_codec.adapters.api import iter_records
from marc_codec.adapters.api import parse
from marc_codec.adapters.api import parse_one
from marc_codec.adapters.api import read_file
from marc_codec.adapters.api import to_writer
from marc_codec.adapters.api import write
from marc_codec.adapters.api import write_file
from marc_codec.adapters.api import write_one

# Other serializations
from marc_codec.adapters.serialization import record_from_dict
from marc_codec.adapters.serialization import record_to_dict
from marc_codec.adapters.serialization import records_from_json
from marc_codec.adapters.serialization import records_to_json
from marc_codec.adapters.xml import parse_xml
from marc_codec.adapters.xml import records_to_xml

# For users who want lower-level control
from marc_codec.application.binary import RecordScanner
from marc_codec.application.binary import decode_record
from marc_codec.application.binary import encode_record
from marc_codec.application.encoding import get_codec

# Data models
from marc_codec.core.domain import ControlField
from marc_codec.core.domain import DataField
from marc_codec.core.domain import Encoding
from marc_codec.core.domain import FieldName
from marc_codec.core.domain import FormatEncoding
from marc_codec.core.domain import Leader
from marc_codec.core.domain import MarcError
from marc_codec.core.domain import MarcFormat
from marc_codec.core.domain import Record
from marc_codec.core.domain import Subfield

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "parse",
    "parse_one",
    "iter_records",
    "write",
    "write_one",
    "from_reader",
    "to_writer",
    "read_file",
    "write_file",
    "detect_format",
    # Data models
    "Record",
    "Leader",
    "ControlField",
    "DataField",
    "Subfield",
    "FormatEncoding",
    "MarcFormat",
    "Encoding",
    "FieldName",
    "MarcError",
    # XML and JSON
    "parse_xml",
    "records_to_xml",
    "record_to_dict",
    "record_from_dict",
    "records_to_json",
    "records_from_json",
    # Advanced usage
    "RecordScanner",
    "decode_record",
    "encode_record",
    "get_codec",
    # Version
    "__version__",
]
