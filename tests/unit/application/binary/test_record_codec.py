# tests/unit/application/binary/test_record_codec.py

"""Tests for decoding and encoding single ISO 2709 records"""

# Standard library imports
from logging import DEBUG
from unicodedata import normalize

# Third party imports
import pytest

# Local imports
from marc_codec.application.binary import decode_record
from marc_codec.application.binary import encode_record
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.errors import FieldNotTerminatedError
from marc_codec.core.domain.errors import InvalidFieldError
from marc_codec.core.domain.errors import InvalidUtf8Error
from marc_codec.core.domain.errors import MalformedDirectoryError
from marc_codec.core.domain.errors import MalformedLeaderError
from marc_codec.core.domain.errors import MissingRecordTerminatorError
from marc_codec.core.domain.errors import TruncatedRecordError
from marc_codec.core.domain.errors import UnencodableCharacterError
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import DataField
from marc_codec.core.domain.record import Leader
from marc_codec.core.domain.record import Record
from marc_codec.core.domain.record import Subfield
from tests.fixtures.records import TWO_FIELD_UTF8
from tests.fixtures.records import frame_record


class TestDecodeRecord:
    """Bytes to Record"""

    def test_two_field_record(self, two_field_bytes, two_field_record):
        record = decode_record(two_field_bytes)
        assert record == two_field_record
        assert record.leader.record_length == 81
        assert record.leader.base_address == 49

    def test_field_contents(self, two_field_bytes):
        record = decode_record(two_field_bytes)
        assert record["001"].value == "123456"
        title = record["245"]
        assert title.indicators == ("1", "0")
        assert title["a"] == "Title :"
        assert title["b"] == "a subtitle"

    def test_marc8_field_data(self):
        segment = frame_record(b"245001000000\x1e", b"  \x1faCaf\xe2e\x1e")
        record = decode_record(segment)
        assert record["245"]["a"] == "Cafe\u0301"

    def test_default_encoding_from_format(self):
        segment = frame_record(b"245000900000\x1e", b"  \x1faCaf\xe9\x1e")
        record = decode_record(segment, FormatEncoding.from_labels("marc21", "latin1"))
        assert record["245"]["a"] == "Caf\u00e9"

    def test_forced_encoding_overrides_leader(self):
        segment = frame_record(b"245000900000\x1e", b"  \x1faCaf\xe9\x1e", coding_scheme="a")
        with pytest.raises(InvalidUtf8Error):
            decode_record(segment)
        forced = FormatEncoding.from_labels("marc21", "latin1", force_encoding=True)
        assert decode_record(segment, forced)["245"]["a"] == "Caf\u00e9"

    def test_missing_indicators_become_blanks(self):
        segment = frame_record(b"500000200000\x1e", b"1\x1e")
        field = decode_record(segment)["500"]
        assert field.indicators == ("1", " ")
        assert field.subfields == ()

    def test_text_before_first_subfield_is_ignored(self, caplog):
        segment = frame_record(b"500001000000\x1e", b"10junk\x1faX\x1e")
        with caplog.at_level(DEBUG, logger="marc_codec.application.binary.record_codec"):
            field = decode_record(segment)["500"]
        assert field.subfields == (Subfield("a", "X"),)
        assert "before the first subfield" in caplog.text

    def test_empty_subfield_value(self):
        segment = frame_record(b"500000500000\x1e", b"  \x1fa\x1e")
        assert decode_record(segment)["500"].subfields == (Subfield("a", ""),)

    def test_record_without_fields(self):
        record = decode_record(frame_record(b"\x1e", b""))
        assert record.fields == ()


class TestDecodeErrors:
    """Malformed framing is reported, never repaired"""

    def test_truncated(self):
        with pytest.raises(TruncatedRecordError):
            decode_record(TWO_FIELD_UTF8[:-10])

    def test_segment_longer_than_declared(self):
        with pytest.raises(MalformedLeaderError):
            decode_record(TWO_FIELD_UTF8 + b"x")

    def test_base_address_inside_leader(self):
        segment = TWO_FIELD_UTF8[:12] + b"00020" + TWO_FIELD_UTF8[17:]
        with pytest.raises(MalformedLeaderError):
            decode_record(segment)

    def test_directory_not_multiple_of_twelve(self):
        with pytest.raises(MalformedDirectoryError):
            decode_record(frame_record(b"00100070000\x1e", b"123456\x1e"))

    def test_directory_terminated_early(self):
        with pytest.raises(MalformedDirectoryError):
            decode_record(frame_record(b"001000700000\x1e\x1e", b"123456\x1e"))

    def test_field_not_terminated(self):
        with pytest.raises(FieldNotTerminatedError) as exc_info:
            decode_record(frame_record(b"001000700000\x1e", b"123456X\x1e"))
        assert exc_info.value.offset == 24 + 13 + 6

    def test_field_past_end_of_data(self):
        with pytest.raises(MalformedDirectoryError):
            decode_record(frame_record(b"001005000000\x1e", b"123456\x1e"))

    def test_missing_record_terminator(self):
        with pytest.raises(MissingRecordTerminatorError) as exc_info:
            decode_record(TWO_FIELD_UTF8[:-1] + b"X")
        assert exc_info.value.offset == 80

    def test_invalid_utf8_in_field(self):
        segment = frame_record(b"245000600000\x1e", b"  \x1fa\xff\x1e", coding_scheme="a")
        with pytest.raises(InvalidUtf8Error):
            decode_record(segment)


class TestEncodeRecord:
    """Record to bytes"""

    def test_two_field_record(self, two_field_record):
        assert encode_record(two_field_record) == TWO_FIELD_UTF8

    def test_lengths_are_recomputed(self, two_field_record):
        stale = two_field_record.with_leader(
            Leader(character_coding_scheme="a", record_length=5, base_address=7)
        )
        assert encode_record(stale) == TWO_FIELD_UTF8

    def test_marc8_marks_precede_base(self):
        record = Record(fields=(DataField("245", subfields=(Subfield("a", "Caf\u00e9"),)),))
        data = encode_record(record)
        assert b"\x1faCaf\xe2e\x1e" in data

    def test_utf8_leader_selects_utf8(self):
        record = Record(
            leader=Leader(character_coding_scheme="a"),
            fields=(ControlField("001", "\u00e9"),),
        )
        assert "\u00e9".encode("utf-8") + b"\x1e" in encode_record(record)

    def test_unencodable_text(self):
        record = Record(fields=(ControlField("001", "x\u4e2d"),))
        with pytest.raises(UnencodableCharacterError):
            encode_record(record, FormatEncoding.from_labels("marc21", "latin1"))

    def test_field_order_is_kept(self):
        record = Record(
            fields=(
                DataField("245", subfields=(Subfield("a", "T"),)),
                ControlField("001", "1"),
                DataField("100", subfields=(Subfield("a", "A"),)),
            )
        )
        assert [f.tag for f in decode_record(encode_record(record))] == ["245", "001", "100"]

    def test_empty_record(self):
        data = encode_record(Record())
        assert data == b"00026nam  2200025   4500\x1e\x1d"


class TestEncodeValidation:
    """Fields that would break the framing are refused"""

    @pytest.mark.parametrize(
        "marc_field",
        [
            ControlField("24", "x"),
            ControlField("00\u00e9", "x"),
            ControlField("245", "x"),
            DataField("001"),
            DataField("245", "10"),
            DataField("245", "\u00e9"),
            DataField("245", subfields=(Subfield("", "x"),)),
            DataField("245", subfields=(Subfield("ab", "x"),)),
            DataField("245", subfields=(Subfield("a", "x\x1fy"),)),
            ControlField("001", "x\x1ey"),
            ControlField("001", "x\x1d"),
        ],
    )
    def test_invalid_field(self, marc_field):
        with pytest.raises(InvalidFieldError):
            encode_record(Record(fields=(marc_field,)))

    def test_errors_name_the_tag(self):
        with pytest.raises(InvalidFieldError, match="245"):
            encode_record(Record(fields=(DataField("245", "10"),)))


class TestEncodingChoice:
    """Encode and decode pick the same transcoder for a record"""

    @pytest.mark.parametrize("encoding", [Encoding.MARC8, Encoding.ISO8859_1, Encoding.ISO5426])
    def test_round_trip_with_configured_encoding(self, encoding):
        record = Record(fields=(DataField("245", subfields=(Subfield("a", "Caf\u00e9"),)),))
        format_encoding = FormatEncoding(encoding=encoding)
        decoded = decode_record(encode_record(record, format_encoding), format_encoding)
        assert normalize("NFC", decoded["245"]["a"]) == "Caf\u00e9"
