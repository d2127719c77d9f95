# marc_codec/adapters/serialization/json_records.py

"""Records to and from a JSON-compatible tree

Shape of one record::

    {
      "leader": "00000nam a2200000 a 4500",
      "fields": [
        {"tag": "001", "value": "123456"},
        {"tag": "245", "ind1": "1", "ind2": "0",
         "subfields": [{"code": "a", "value": "Title :"}]}
      ]
    }
"""

# Standard library imports
import gzip
import json
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

# Local imports
from marc_codec.application.binary.leader import decode_leader
from marc_codec.application.binary.leader import leader_to_text
from marc_codec.core.domain.errors import InvalidFieldError
from marc_codec.core.domain.errors import MarcError
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import DataField
from marc_codec.core.domain.record import Leader
from marc_codec.core.domain.record import MarcField
from marc_codec.core.domain.record import Record
from marc_codec.core.domain.record import Subfield
from marc_codec.core.types.json import JSONDict
from marc_codec.core.types.json import JSONList

_TREE_MODEL_CONFIG = ConfigDict(strict=True, frozen=True, extra="forbid")


class _SubfieldTree(BaseModel):
    model_config = _TREE_MODEL_CONFIG

    code: str = Field(min_length=1, max_length=1)
    value: str = ""


class _ControlFieldTree(BaseModel):
    model_config = _TREE_MODEL_CONFIG

    tag: str = Field(min_length=3, max_length=3)
    value: str


class _DataFieldTree(BaseModel):
    model_config = _TREE_MODEL_CONFIG

    tag: str = Field(min_length=3, max_length=3)
    ind1: str = Field(" ", min_length=1, max_length=1)
    ind2: str = Field(" ", min_length=1, max_length=1)
    subfields: list[_SubfieldTree] = Field(default_factory=list)


class _RecordTree(BaseModel):
    """Validation model for one serialized record"""

    model_config = _TREE_MODEL_CONFIG

    leader: str = Field(min_length=24, max_length=24)
    fields: list[_ControlFieldTree | _DataFieldTree] = Field(default_factory=list)


def record_to_dict(record: Record) -> JSONDict:
    """Labelled tree for ``record``"""
    fields: JSONList = []
    for marc_field in record.fields:
        if isinstance(marc_field, ControlField):
            fields.append({"tag": marc_field.tag, "value": marc_field.value})
        else:
            fields.append(
                {
                    "tag": marc_field.tag,
                    "ind1": marc_field.indicator1,
                    "ind2": marc_field.indicator2,
                    "subfields": [
                        {"code": subfield.code, "value": subfield.value}
                        for subfield in marc_field.subfields
                    ],
                }
            )
    return {"leader": leader_to_text(record.leader), "fields": fields}


def record_from_dict(data: JSONDict) -> Record:
    """Rebuild a Record from the tree produced by ``record_to_dict``

    Raises:
        InvalidFieldError: the tree does not have the expected shape
    """
    try:
        tree = _RecordTree.model_validate(data)
    except ValidationError as e:
        raise InvalidFieldError(f"Invalid record tree: {e}") from e

    fields: list[MarcField] = []
    for item in tree.fields:
        if isinstance(item, _ControlFieldTree):
            fields.append(ControlField(tag=item.tag, value=item.value))
        else:
            fields.append(
                DataField(
                    tag=item.tag,
                    indicator1=item.ind1,
                    indicator2=item.ind2,
                    subfields=tuple(Subfield(code=s.code, value=s.value) for s in item.subfields),
                )
            )
    return Record(leader=_leader_from_text(tree.leader), fields=tuple(fields))


def _leader_from_text(text: str) -> Leader:
    try:
        return decode_leader(text.encode("ascii"))
    except (MarcError, UnicodeEncodeError) as e:
        raise InvalidFieldError(f"Invalid leader {text!r}: {e}") from e


def records_to_json(records: list[Record], pretty: bool = False) -> str:
    """JSON array of record trees"""
    data = [record_to_dict(record) for record in records]
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def records_from_json(text: str | bytes) -> list[Record]:
    """Parse a JSON array of record trees, or a single record object

    Raises:
        InvalidFieldError: the JSON is malformed or a record has the wrong shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidFieldError(f"Malformed JSON: {e}") from e

    if isinstance(data, dict):
        return [record_from_dict(data)]
    if not isinstance(data, list):
        raise InvalidFieldError(f"Expected a JSON array of records, got {type(data).__name__}")
    return [record_from_dict(item) for item in data]


def save_records_json(
    records: list[Record], json_file: str | Path, pretty: bool = True, compress: bool = False
) -> Path:
    """Write ``records`` as JSON, gzip compressed when ``compress`` is set

    Args:
        records: Records to save
        json_file: Output filename (``.gz`` is appended when compressing)
        pretty: If True, format JSON with indentation
        compress: If True, use gzip compression

    Returns:
        The path actually written
    """
    output_path = Path(f"{json_file}.gz") if compress else Path(json_file)
    text = records_to_json(records, pretty=pretty)
    if compress:
        with gzip.open(output_path, "wt", encoding="utf-8") as f:
            f.write(text)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
    return output_path


def load_records_json(json_file: str | Path) -> list[Record]:
    """Read records written by ``save_records_json`` (plain or ``.gz``)"""
    path = Path(json_file)
    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as f:
            return records_from_json(f.read())
    with open(path, "r", encoding="utf-8") as f:
        return records_from_json(f.read())
