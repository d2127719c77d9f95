# marc_codec/adapters/api/__init__.py

"""High-level API for reading and writing MARC records

These functions dispatch on the record format: binary formats go through the
scanner and record codec, MARC XML through the XML adapter.
"""

# Local imports
from marc_codec.adapters.api._reading import detect_format
from marc_codec.adapters.api._reading import from_reader
from marc_codec.adapters.api._reading import iter_records
from marc_codec.adapters.api._reading import parse
from marc_codec.adapters.api._reading import parse_one
from marc_codec.adapters.api._reading import read_file
from marc_codec.adapters.api._writing import to_writer
from marc_codec.adapters.api._writing import write
from marc_codec.adapters.api._writing import write_file
from marc_codec.adapters.api._writing import write_one

__all__ = [
    "detect_format",
    "from_reader",
    "iter_records",
    "parse",
    "parse_one",
    "read_file",
    "to_writer",
    "write",
    "write_file",
    "write_one",
]
