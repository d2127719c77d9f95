# tests/unit/adapters/cli/test_cli_main.py

"""Tests for the CLI entry point"""

# Standard library imports
from io import BytesIO
from io import TextIOWrapper
import json
from pathlib import Path
from unittest.mock import patch

# Local imports
from marc_codec.adapters.api import parse
from marc_codec.adapters.cli import main
from marc_codec.adapters.cli import render_record
from marc_codec.adapters.xml import parse_xml
from marc_codec.core.domain.format_encoding import FormatEncoding
from tests.fixtures.records import TWO_FIELD_UTF8
from tests.fixtures.records import frame_record


class TestRenderRecord:
    def test_plain_text(self, two_field_record):
        text = render_record(two_field_record, 1).plain
        assert text.splitlines() == [
            "Record 1",
            "LDR 00000nam a2200000   4500",
            "001 123456",
            "245 10 $aTitle :$ba subtitle",
        ]

    def test_blank_indicators_shown_as_underscores(self, sample_records):
        text = render_record(sample_records[2], 3).plain
        assert "650 _0 $aCats" in text


class TestPlainOutput:
    def test_prints_every_record(self, marc_file, capsys):
        assert main([marc_file, "--silent"]) == 0
        out = capsys.readouterr().out
        assert "Record 1" in out
        assert "Record 3" in out
        assert "LDR 00081nam a2200049   4500" in out
        assert "100 1_ $aDoe, Jane" in out

    def test_plain_to_file(self, marc_file, tmp_path):
        output = tmp_path / "records.txt"
        assert main([marc_file, "--silent", "-o", str(output)]) == 0
        assert "245 10 $aSecond book" in output.read_text(encoding="utf-8")


class TestConversions:
    def test_json(self, marc_file, capsys):
        assert main([marc_file, "--silent", "-t", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [record["fields"][0]["value"] for record in data] == ["123456", "rec-2", "rec-3"]

    def test_json_pretty_to_file(self, marc_file, tmp_path):
        output = tmp_path / "records.json"
        assert main([marc_file, "--silent", "-t", "json_pretty", "-o", str(output)]) == 0
        assert output.read_text(encoding="utf-8").startswith("[\n  {")

    def test_xml(self, marc_file, sample_records, capsys):
        assert main([marc_file, "--silent", "-t", "xml"]) == 0
        assert parse_xml(capsys.readouterr().out.encode("utf-8")) == sample_records

    def test_marc21_to_file(self, marc_file, tmp_path):
        output = tmp_path / "copy.mrc"
        assert main([marc_file, "--silent", "-t", "marc21", "-o", str(output)]) == 0
        assert output.read_bytes() == Path(marc_file).read_bytes()

    def test_unimarc_output_keeps_configured_encoding(self, tmp_path):
        source = tmp_path / "latin.mrc"
        source.write_bytes(frame_record(b"001000500000\x1e", b"Caf\xe9\x1e"))
        output = tmp_path / "out.mrc"
        argv = [str(source), "--silent", "-e", "latin1", "-t", "unimarc", "-o", str(output)]
        assert main(argv) == 0
        assert output.read_bytes() == source.read_bytes()
        record = parse(output.read_bytes(), FormatEncoding.from_labels("unimarc", "latin1"))[0]
        assert record["001"].value == "Caf\u00e9"

    def test_marc8_to_utf8_conversion(self, tmp_path):
        source = tmp_path / "marc8.mrc"
        source.write_bytes(frame_record(b"001000600000\x1e", b"Caf\xe2e\x1e"))
        output = tmp_path / "utf8.mrc"
        argv = [str(source), "--silent", "-t", "marc21", "--output-encoding", "utf8"]
        assert main([*argv, "-o", str(output)]) == 0
        record = parse(output.read_bytes())[0]
        assert record.leader.is_unicode
        assert record["001"].value == "Cafe\u0301"

    def test_utf8_to_marc8_conversion(self, marc_file, sample_records, tmp_path):
        output = tmp_path / "marc8.mrc"
        argv = [marc_file, "--silent", "-t", "marc21", "--output-encoding", "marc8"]
        assert main([*argv, "-o", str(output)]) == 0
        records = parse(output.read_bytes())
        assert [r.leader.character_coding_scheme for r in records] == [" "] * 3
        assert [r.fields for r in records] == [r.fields for r in sample_records]

    def test_xml_input(self, tmp_path, marc_file, capsys):
        source = tmp_path / "records.xml"
        assert main([marc_file, "--silent", "-t", "xml", "-o", str(source)]) == 0
        assert main([str(source), "--silent", "-t", "json"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_standard_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(TWO_FIELD_UTF8)))
        assert main(["-", "--silent", "-t", "json"]) == 0
        assert json.loads(capsys.readouterr().out)[0]["fields"][0]["value"] == "123456"


class TestErrors:
    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.mrc")]) == 1
        assert "Cannot access" in capsys.readouterr().err

    def test_unknown_encoding(self, marc_file, capsys):
        assert main([marc_file, "-e", "klingon"]) == 1
        assert "Unknown character encoding" in capsys.readouterr().err

    def test_corrupt_record(self, tmp_path, capsys):
        source = tmp_path / "broken.mrc"
        source.write_bytes(TWO_FIELD_UTF8 + TWO_FIELD_UTF8[:-1] + b"X")
        assert main([str(source)]) == 1
        assert "Failed to convert" in capsys.readouterr().err

    def test_skip_invalid(self, tmp_path, capsys):
        source = tmp_path / "broken.mrc"
        source.write_bytes(TWO_FIELD_UTF8 + TWO_FIELD_UTF8[:-1] + b"X" + TWO_FIELD_UTF8)
        assert main([str(source), "--skip-invalid", "-t", "json"]) == 0
        captured = capsys.readouterr()
        assert len(json.loads(captured.out)) == 2
        assert "Skipping record 2" in captured.err


class TestLogging:
    def test_log_file(self, marc_file, tmp_path):
        log_file = tmp_path / "run.log"
        assert main([marc_file, "--silent", "--log-file", str(log_file)]) == 0
        content = log_file.read_text(encoding="utf-8")
        assert "CONVERSION COMPLETE" in content
        assert "Records: 3" in content

    def test_run_summary(self, marc_file):
        with patch("marc_codec.adapters.cli.main.log_run_summary") as mock_summary:
            assert main([marc_file, "--silent", "-t", "json"]) == 0
        kwargs = mock_summary.call_args.kwargs
        assert kwargs["total_records"] == 3
        assert kwargs["output_format"] == "json"
        assert kwargs["log_file"] is None
