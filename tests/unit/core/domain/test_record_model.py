# tests/unit/core/domain/test_record_model.py

"""Tests for the immutable record model"""

# Standard library imports
from dataclasses import FrozenInstanceError

# Third party imports
import pytest

# Local imports
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.domain.field_tags import FieldName
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import DataField
from marc_codec.core.domain.record import Leader
from marc_codec.core.domain.record import Record
from marc_codec.core.domain.record import Subfield
from marc_codec.core.domain.record import is_control_tag


class TestControlTags:
    """Control field classification"""

    @pytest.mark.parametrize("tag", ["001", "003", "005", "008", "009"])
    def test_control_tags(self, tag):
        assert is_control_tag(tag)

    @pytest.mark.parametrize("tag", ["010", "245", "999", "00A", "LDR", "01", "0001"])
    def test_not_control_tags(self, tag):
        assert not is_control_tag(tag)


class TestLeader:
    """Leader value object"""

    def test_defaults(self):
        leader = Leader()
        assert leader.record_status == "n"
        assert leader.indicator_count == 2
        assert leader.subfield_code_count == 2
        assert leader.entry_map == "4500"
        assert not leader.is_unicode

    def test_equality_ignores_derived_lengths(self):
        assert Leader(record_length=81, base_address=49) == Leader()

    def test_equality_uses_character_slots(self):
        assert Leader(record_status="c") != Leader()

    def test_with_encoding(self):
        leader = Leader().with_encoding(Encoding.UTF8)
        assert leader.character_coding_scheme == "a"
        assert leader.is_unicode
        assert leader.with_encoding(Encoding.MARC8).character_coding_scheme == " "

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            Leader().record_status = "d"  # type: ignore[misc]


class TestDataField:
    """Subfield access on data fields"""

    def setup_method(self):
        self.field = DataField(
            "650",
            " ",
            "0",
            [Subfield("a", "Cats"), Subfield("x", "Behavior"), Subfield("a", "Pets")],
        )

    def test_subfields_become_tuple(self):
        assert isinstance(self.field.subfields, tuple)

    def test_get_subfields_in_order(self):
        assert self.field.get_subfields("a") == ["Cats", "Pets"]
        assert self.field.get_subfields("a", "x") == ["Cats", "Behavior", "Pets"]

    def test_get_first(self):
        assert self.field.get("a") == "Cats"
        assert self.field.get("z") is None
        assert self.field.get("z", "none") == "none"

    def test_getitem_and_contains(self):
        assert self.field["x"] == "Behavior"
        assert "x" in self.field
        assert "z" not in self.field
        with pytest.raises(KeyError):
            self.field["z"]

    def test_value_and_str(self):
        assert self.field.value() == "Cats Behavior Pets"
        assert str(self.field) == "650 _0 $aCats$xBehavior$aPets"

    def test_indicators(self):
        assert self.field.indicators == (" ", "0")
        assert not self.field.is_control_field


class TestRecord:
    """Record level helpers"""

    def test_fields_keep_mixed_order(self):
        fields = (
            DataField("245", subfields=(Subfield("a", "T"),)),
            ControlField("001", "x"),
            DataField("500", subfields=(Subfield("a", "note"),)),
        )
        record = Record(fields=fields)
        assert [f.tag for f in record] == ["245", "001", "500"]
        assert [f.tag for f in record.control_fields] == ["001"]
        assert [f.tag for f in record.data_fields] == ["245", "500"]
        assert len(record) == 3

    def test_lookup(self, two_field_record):
        assert two_field_record["001"].value == "123456"
        assert "245" in two_field_record
        assert "100" not in two_field_record
        assert two_field_record.get("100") is None
        with pytest.raises(KeyError):
            two_field_record["100"]

    def test_get_fields(self, two_field_record):
        assert [f.tag for f in two_field_record.get_fields("245", "001")] == ["001", "245"]
        assert len(two_field_record.get_fields()) == 2

    def test_title(self, two_field_record):
        assert two_field_record.title() == "Title : a subtitle"

    def test_unimarc_title(self):
        record = Record(
            fields=(DataField("200", "1", " ", (Subfield("a", "Titre"), Subfield("e", "roman"))),)
        )
        assert record.title(MarcFormat.UNIMARC) == "Titre roman"
        assert record.title(MarcFormat.MARC21) is None

    def test_fields_for(self, two_field_record):
        found = two_field_record.fields_for(FieldName.TITLE_STATEMENT, MarcFormat.MARC21)
        assert [f.tag for f in found] == ["245"]
        assert two_field_record.fields_for(FieldName.LOCAL_CONTROL_NUMBER, MarcFormat.MARC21) == []

    def test_add_field_returns_new_record(self, two_field_record):
        note = DataField("500", subfields=(Subfield("a", "A note"),))
        updated = two_field_record.add_field(note)
        assert len(updated) == 3
        assert len(two_field_record) == 2
        assert updated.fields[-1] is note

    def test_with_fields_and_leader(self, two_field_record):
        trimmed = two_field_record.with_fields([two_field_record["001"]])
        assert [f.tag for f in trimmed] == ["001"]
        relabelled = two_field_record.with_leader(Leader(record_status="c"))
        assert relabelled.leader.record_status == "c"
        assert relabelled.fields == two_field_record.fields

    def test_str_of_control_field(self):
        assert str(ControlField("001", "abc")) == "001    abc"
        assert ControlField("001").is_control_field
