# tests/unit/adapters/serialization/test_json_records.py

"""Tests for the JSON record tree"""

# Standard library imports
import gzip
import json

# Third party imports
import pytest

# Local imports
from marc_codec.adapters.serialization import load_records_json
from marc_codec.adapters.serialization import record_from_dict
from marc_codec.adapters.serialization import record_to_dict
from marc_codec.adapters.serialization import records_from_json
from marc_codec.adapters.serialization import records_to_json
from marc_codec.adapters.serialization import save_records_json
from marc_codec.core.domain.errors import InvalidFieldError


class TestRecordTree:
    def test_shape(self, two_field_record):
        assert record_to_dict(two_field_record) == {
            "leader": "00000nam a2200000   4500",
            "fields": [
                {"tag": "001", "value": "123456"},
                {
                    "tag": "245",
                    "ind1": "1",
                    "ind2": "0",
                    "subfields": [
                        {"code": "a", "value": "Title :"},
                        {"code": "b", "value": "a subtitle"},
                    ],
                },
            ],
        }

    def test_round_trip(self, sample_records):
        for record in sample_records:
            assert record_from_dict(record_to_dict(record)) == record

    def test_defaults_for_missing_indicators_and_subfields(self):
        record = record_from_dict(
            {"leader": "00000nam  2200000   4500", "fields": [{"tag": "500"}]}
        )
        field = record["500"]
        assert field.indicators == (" ", " ")
        assert field.subfields == ()

    @pytest.mark.parametrize(
        "tree",
        [
            {"fields": []},
            {"leader": "short", "fields": []},
            {"leader": "0000Xnam  2200000   4500", "fields": []},
            {"leader": "00000nam  2200000   4500", "fields": [{"tag": "0011", "value": "x"}]},
            {"leader": "00000nam  2200000   4500", "fields": [{"tag": "001", "value": 5}]},
            {
                "leader": "00000nam  2200000   4500",
                "fields": [{"tag": "245", "subfields": [{"code": "ab", "value": "x"}]}],
            },
            {"leader": "00000nam  2200000   4500", "fields": [], "extra": 1},
        ],
    )
    def test_invalid_trees(self, tree):
        with pytest.raises(InvalidFieldError):
            record_from_dict(tree)


class TestJsonText:
    def test_compact_and_pretty(self, sample_records):
        compact = records_to_json(sample_records)
        pretty = records_to_json(sample_records, pretty=True)
        assert "\n" not in compact
        assert "\n  " in pretty
        assert json.loads(compact) == json.loads(pretty)

    def test_round_trip(self, sample_records):
        assert records_from_json(records_to_json(sample_records)) == sample_records

    def test_non_ascii_is_written_directly(self):
        tree = {"leader": "00000nam a2200000   4500", "fields": [{"tag": "001", "value": "Мир"}]}
        assert "Мир" in records_to_json(records_from_json(json.dumps([tree])))

    def test_single_object(self, two_field_record):
        text = json.dumps(record_to_dict(two_field_record))
        assert records_from_json(text) == [two_field_record]

    def test_bytes_input(self, two_field_record):
        data = records_to_json([two_field_record]).encode("utf-8")
        assert records_from_json(data) == [two_field_record]

    @pytest.mark.parametrize("text", ["[", "42", '"records"'])
    def test_invalid_documents(self, text):
        with pytest.raises(InvalidFieldError):
            records_from_json(text)


class TestJsonFiles:
    def test_save_and_load(self, tmp_path, sample_records):
        path = save_records_json(sample_records, tmp_path / "records.json")
        assert path == tmp_path / "records.json"
        assert load_records_json(path) == sample_records

    def test_compressed(self, tmp_path, sample_records):
        path = save_records_json(sample_records, tmp_path / "records.json", compress=True)
        assert path.name == "records.json.gz"
        with gzip.open(path, "rt", encoding="utf-8") as f:
            assert len(json.load(f)) == 3
        assert load_records_json(path) == sample_records
