# marc_codec/adapters/xml/marcxml.py

"""MARC XML (MARC21 slim schema) reading and writing"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import BinaryIO
from typing import Iterator
import xml.etree.ElementTree as ET

# Local imports
from marc_codec.application.binary.leader import decode_leader
from marc_codec.application.binary.leader import leader_to_text
from marc_codec.core.domain.errors import InvalidXmlError
from marc_codec.core.domain.errors import MarcError
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import DataField
from marc_codec.core.domain.record import Leader
from marc_codec.core.domain.record import MarcField
from marc_codec.core.domain.record import Record
from marc_codec.core.domain.record import Subfield

logger = getLogger(__name__)

MARCXML_NAMESPACE = "http://www.loc.gov/MARC21/slim"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _local_name(tag: str) -> str:
    """Element name without its ``{namespace}`` prefix"""
    return tag.rsplit("}", 1)[-1]


def _required(elem: ET.Element, attribute: str) -> str:
    value = elem.get(attribute)
    if value is None:
        raise InvalidXmlError(f"<{_local_name(elem.tag)}> is missing the {attribute!r} attribute")
    return value


def _indicator(elem: ET.Element, attribute: str) -> str:
    value = elem.get(attribute) or " "
    return value[0]


def record_from_element(elem: ET.Element) -> Record:
    """Build a Record from a ``<record>`` element, namespaced or not"""
    leader = Leader()
    fields: list[MarcField] = []

    for child in elem:
        name = _local_name(child.tag)
        if name == "leader":
            leader = _parse_leader(child.text or "")
        elif name == "controlfield":
            fields.append(ControlField(tag=_required(child, "tag"), value=child.text or ""))
        elif name == "datafield":
            subfields = tuple(
                Subfield(code=_required(sub, "code"), value=sub.text or "")
                for sub in child
                if _local_name(sub.tag) == "subfield"
            )
            fields.append(
                DataField(
                    tag=_required(child, "tag"),
                    indicator1=_indicator(child, "ind1"),
                    indicator2=_indicator(child, "ind2"),
                    subfields=subfields,
                )
            )
        else:
            logger.debug(f"Skipping unexpected <{name}> element in MARC XML record")

    return Record(leader=leader, fields=tuple(fields))


def _parse_leader(text: str) -> Leader:
    if len(text) != 24:
        raise InvalidXmlError(f"Leader must be 24 characters, got {len(text)}: {text!r}")
    try:
        return decode_leader(text.encode("ascii"))
    except (MarcError, UnicodeEncodeError) as e:
        raise InvalidXmlError(f"Invalid leader {text!r}: {e}") from e


def parse_xml(data: bytes | str) -> list[Record]:
    """Parse a MARC XML document holding a ``<collection>`` or a single ``<record>``

    Raises:
        InvalidXmlError: the document is not well formed or is not MARC XML
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise InvalidXmlError(f"Malformed MARC XML: {e}") from e

    name = _local_name(root.tag)
    if name == "record":
        return [record_from_element(root)]
    if name == "collection":
        return [
            record_from_element(child) for child in root if _local_name(child.tag) == "record"
        ]
    raise InvalidXmlError(f"Expected <collection> or <record> root element, found <{name}>")


def iter_xml_records(source: str | Path | BinaryIO) -> Iterator[Record]:
    """Stream records from a MARC XML file without building the whole tree

    Args:
        source: Path or binary file object

    Yields:
        Records in document order
    """
    try:
        context = ET.iterparse(source, events=("start", "end"))
        _, root = next(context)
        if _local_name(root.tag) == "record":
            # A bare record document: read it whole once it closes
            for event, elem in context:
                if event == "end" and elem is root:
                    yield record_from_element(root)
            return

        for event, elem in context:
            if event == "end" and _local_name(elem.tag) == "record":
                yield record_from_element(elem)
                # Clear element to save memory
                elem.clear()
                root.clear()
    except ET.ParseError as e:
        raise InvalidXmlError(f"Malformed MARC XML: {e}") from e
    except StopIteration:
        raise InvalidXmlError("MARC XML document is empty") from None


def record_to_element(record: Record, namespaced: bool = False) -> ET.Element:
    """``<record>`` element for ``record``; ``namespaced`` adds the xmlns attribute"""
    elem = ET.Element("record", {"xmlns": MARCXML_NAMESPACE} if namespaced else {})
    ET.SubElement(elem, "leader").text = leader_to_text(record.leader)

    for marc_field in record.fields:
        if isinstance(marc_field, ControlField):
            ET.SubElement(elem, "controlfield", tag=marc_field.tag).text = marc_field.value
            continue
        datafield = ET.SubElement(
            elem,
            "datafield",
            tag=marc_field.tag,
            ind1=marc_field.indicator1,
            ind2=marc_field.indicator2,
        )
        for subfield in marc_field.subfields:
            ET.SubElement(datafield, "subfield", code=subfield.code).text = subfield.value

    return elem


def records_to_xml(records: list[Record]) -> str:
    """Serialize ``records`` as a ``<collection>`` document"""
    root = ET.Element("collection", xmlns=MARCXML_NAMESPACE)
    root.extend(record_to_element(record) for record in records)
    ET.indent(root)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


def record_to_xml(record: Record) -> str:
    """Serialize one record as a standalone ``<record>`` document"""
    elem = record_to_element(record, namespaced=True)
    ET.indent(elem)
    return XML_DECLARATION + ET.tostring(elem, encoding="unicode") + "\n"
