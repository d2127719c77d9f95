# marc_codec/adapters/serialization/__init__.py

"""Structured (JSON) serialization of records"""

# Local imports
from marc_codec.adapters.serialization.json_records import load_records_json
from marc_codec.adapters.serialization.json_records import record_from_dict
from marc_codec.adapters.serialization.json_records import record_to_dict
from marc_codec.adapters.serialization.json_records import records_from_json
from marc_codec.adapters.serialization.json_records import records_to_json
from marc_codec.adapters.serialization.json_records import save_records_json

__all__ = [
    "load_records_json",
    "record_from_dict",
    "record_to_dict",
    "records_from_json",
    "records_to_json",
    "save_records_json",
]
