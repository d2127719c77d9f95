# marc_codec/adapters/xml/__init__.py

"""MARC XML adapter"""

# Local imports
from marc_codec.adapters.xml.marcxml import MARCXML_NAMESPACE
from marc_codec.adapters.xml.marcxml import iter_xml_records
from marc_codec.adapters.xml.marcxml import parse_xml
from marc_codec.adapters.xml.marcxml import record_from_element
from marc_codec.adapters.xml.marcxml import record_to_element
from marc_codec.adapters.xml.marcxml import record_to_xml
from marc_codec.adapters.xml.marcxml import records_to_xml

__all__ = [
    "MARCXML_NAMESPACE",
    "iter_xml_records",
    "parse_xml",
    "record_from_element",
    "record_to_element",
    "record_to_xml",
    "records_to_xml",
]
