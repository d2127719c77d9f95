# marc_codec/core/domain/record.py

"""Record model shared by every codec in the package

All entities are immutable value objects. A ``Record`` keeps control and
data fields in one ordered tuple so that directory order survives a round
trip exactly, whatever the mix of field kinds.
"""

# Standard library imports
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import Iterator

# Local imports
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.domain.field_tags import FieldName
from marc_codec.core.domain.field_tags import tag_for

SUBFIELD_DELIMITER = "\x1f"


def is_control_tag(tag: str) -> bool:
    """Control fields are the numeric tags 000 through 009"""
    return len(tag) == 3 and tag.isdigit() and tag < "010"


@dataclass(frozen=True, slots=True)
class Leader:
    """The 24 character record header

    ``record_length`` and ``base_address`` describe a serialized record and
    are recomputed on every write, so they take no part in equality.
    """

    record_status: str = "n"
    record_type: str = "a"
    bibliographic_level: str = "m"
    control_type: str = " "
    character_coding_scheme: str = " "
    indicator_count: int = 2
    subfield_code_count: int = 2
    encoding_level: str = " "
    descriptive_form: str = " "
    multipart_level: str = " "
    entry_map: str = "4500"
    record_length: int = field(default=0, compare=False)
    base_address: int = field(default=0, compare=False)

    @property
    def is_unicode(self) -> bool:
        return self.character_coding_scheme == "a"

    def with_encoding(self, encoding: Encoding) -> "Leader":
        """Copy of this leader announcing ``encoding`` at position 09"""
        return replace(self, character_coding_scheme=encoding.leader_coding_scheme)


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One 12 byte directory slot: tag, field length and start offset"""

    tag: str
    length: int
    start: int


@dataclass(frozen=True, slots=True)
class ControlField:
    """Field 001-009: a tag and an unstructured value"""

    tag: str
    value: str = ""

    @property
    def is_control_field(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.tag}    {self.value}"


@dataclass(frozen=True, slots=True)
class Subfield:
    code: str
    value: str = ""


@dataclass(frozen=True, slots=True)
class DataField:
    """Field 010 and above: two indicators and an ordered list of subfields"""

    tag: str
    indicator1: str = " "
    indicator2: str = " "
    subfields: tuple[Subfield, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.subfields, tuple):
            object.__setattr__(self, "subfields", tuple(self.subfields))

    @property
    def is_control_field(self) -> bool:
        return False

    @property
    def indicators(self) -> tuple[str, str]:
        return (self.indicator1, self.indicator2)

    def get_subfields(self, *codes: str) -> list[str]:
        """Values of the subfields with any of ``codes``, in field order"""
        return [subfield.value for subfield in self.subfields if subfield.code in codes]

    def get(self, code: str, default: str | None = None) -> str | None:
        """First value for ``code``, or ``default``"""
        for subfield in self.subfields:
            if subfield.code == code:
                return subfield.value
        return default

    def __getitem__(self, code: str) -> str:
        value = self.get(code)
        if value is None:
            raise KeyError(code)
        return value

    def __contains__(self, code: str) -> bool:
        return any(subfield.code == code for subfield in self.subfields)

    def value(self) -> str:
        """All subfield values joined by spaces"""
        return " ".join(subfield.value for subfield in self.subfields)

    def __str__(self) -> str:
        indicators = "".join("_" if ind == " " else ind for ind in self.indicators)
        body = "".join(f"${subfield.code}{subfield.value}" for subfield in self.subfields)
        return f"{self.tag} {indicators} {body}"


type MarcField = ControlField | DataField


@dataclass(frozen=True, slots=True)
class Record:
    """A bibliographic record: leader plus fields in directory order"""

    leader: Leader = field(default_factory=Leader)
    fields: tuple[MarcField, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def control_fields(self) -> tuple[ControlField, ...]:
        return tuple(f for f in self.fields if isinstance(f, ControlField))

    @property
    def data_fields(self) -> tuple[DataField, ...]:
        return tuple(f for f in self.fields if isinstance(f, DataField))

    def get_fields(self, *tags: str) -> list[MarcField]:
        """Fields whose tag is one of ``tags`` (all fields when none given)"""
        if not tags:
            return list(self.fields)
        return [f for f in self.fields if f.tag in tags]

    def get(self, tag: str) -> MarcField | None:
        for marc_field in self.fields:
            if marc_field.tag == tag:
                return marc_field
        return None

    def __getitem__(self, tag: str) -> MarcField:
        marc_field = self.get(tag)
        if marc_field is None:
            raise KeyError(tag)
        return marc_field

    def __contains__(self, tag: str) -> bool:
        return self.get(tag) is not None

    def __iter__(self) -> Iterator[MarcField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def fields_for(self, name: FieldName, marc_format: MarcFormat) -> list[MarcField]:
        """Fields carrying the semantic element ``name`` under ``marc_format``"""
        tag = tag_for(name, marc_format)
        if tag is None:
            return []
        return self.get_fields(tag)

    def title(self, marc_format: MarcFormat = MarcFormat.MARC21) -> str | None:
        """Title proper and remainder from the title statement, if present"""
        for marc_field in self.fields_for(FieldName.TITLE_STATEMENT, marc_format):
            if isinstance(marc_field, DataField):
                codes = ("a", "e") if marc_format is MarcFormat.UNIMARC else ("a", "b")
                parts = marc_field.get_subfields(*codes)
                if parts:
                    return " ".join(part.strip() for part in parts)
        return None

    def with_fields(self, fields: "tuple[MarcField, ...] | list[MarcField]") -> "Record":
        return replace(self, fields=tuple(fields))

    def add_field(self, *new_fields: MarcField) -> "Record":
        """New record with ``new_fields`` appended"""
        return replace(self, fields=self.fields + tuple(new_fields))

    def with_leader(self, leader: Leader) -> "Record":
        return replace(self, leader=leader)
