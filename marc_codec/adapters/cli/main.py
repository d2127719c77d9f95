# marc_codec/adapters/cli/main.py

"""
MARC Codec - CLI Main Module

Reads a file of MARC records and prints them as text, or converts them to
JSON, MARC XML, MARC21 or UNIMARC.
"""

# Standard library imports
from argparse import ArgumentParser
from argparse import Namespace
from logging import getLogger
from pathlib import Path
import sys
from time import time
from typing import TextIO

# Third party imports
from rich.console import Console
from rich.text import Text

# Local imports
from marc_codec.adapters.api import detect_format
from marc_codec.adapters.api import parse
from marc_codec.adapters.api import write
from marc_codec.adapters.cli.parser import create_argument_parser
from marc_codec.adapters.serialization import records_to_json
from marc_codec.adapters.xml import records_to_xml
from marc_codec.application.binary.leader import leader_to_text
from marc_codec.core.domain.errors import MarcError
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.domain.record import ControlField
from marc_codec.core.domain.record import Record
from marc_codec.infrastructure.config import ConfigLoader
from marc_codec.infrastructure.config import get_config
from marc_codec.infrastructure.logging import log_run_summary
from marc_codec.infrastructure.logging import set_up_logging

logger = getLogger(__name__)


def _config_path(argv: list[str] | None) -> str | None:
    """Pick ``--config`` out of the arguments before the full parser is built"""
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default=None)
    known, _ = pre_parser.parse_known_args(argv)
    return known.config


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _input_format_encoding(args: Namespace, data: bytes, config: ConfigLoader) -> FormatEncoding:
    """Format and encoding for the input, detecting the format when asked to"""
    format_label = detect_format(data).value if args.format == "auto" else args.format
    format_encoding = config.format_encoding(format_label, args.encoding, args.force_encoding)
    assert format_encoding is not None
    return format_encoding


def _output_format_encoding(args: Namespace) -> FormatEncoding:
    """Format and encoding for binary output

    An explicit output encoding applies to every record, whatever its leader
    says; otherwise the input settings carry over.
    """
    if args.output_encoding:
        return FormatEncoding.from_labels(
            args.output_format, args.output_encoding, force_encoding=True
        )
    return FormatEncoding.from_labels(args.output_format, args.encoding, args.force_encoding)


def render_record(record: Record, index: int) -> Text:
    """Human readable view of one record"""
    text = Text()
    text.append(f"Record {index}\n", style="bold")
    text.append("LDR ", style="cyan")
    text.append(f"{leader_to_text(record.leader)}\n")

    for marc_field in record.fields:
        text.append(f"{marc_field.tag} ", style="cyan")
        if isinstance(marc_field, ControlField):
            text.append(f"{marc_field.value}\n")
            continue
        indicators = "".join(i if i != " " else "_" for i in marc_field.indicators)
        text.append(f"{indicators} ", style="magenta")
        for subfield in marc_field.subfields:
            text.append(f"${subfield.code}", style="green")
            text.append(subfield.value)
        text.append("\n")

    return text


def _print_plain(records: list[Record], stream: TextIO) -> None:
    console = Console(file=stream, highlight=False, soft_wrap=True)
    for index, record in enumerate(records, start=1):
        console.print(render_record(record, index))


def _write_output(records: list[Record], args: Namespace) -> None:
    """Send ``records`` to ``--output`` or stdout in the requested format"""
    output_format = args.output_format

    if output_format in ("marc21", "unimarc"):
        data = write(records, _output_format_encoding(args))
        if args.output:
            Path(args.output).write_bytes(data)
        else:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        return

    if output_format == "plain":
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                _print_plain(records, f)
        else:
            _print_plain(records, sys.stdout)
        return

    if output_format == "xml":
        text = records_to_xml(records)
    else:
        text = records_to_json(records, pretty=output_format == "json_pretty") + "\n"

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point

    Returns:
        Process exit status: 0 on success, 1 when the input cannot be read
        or converted
    """
    config = get_config(_config_path(argv))
    parser = create_argument_parser(config=config)
    args = parser.parse_args(argv)

    log_file_path = set_up_logging(
        log_file=args.log_file,
        log_level=args.log_level,
        silent=args.silent,
        disable_file_logging=not (args.log_to_file or args.log_file),
    )

    start_time = time()
    try:
        data = _read_input(args.file)
        format_encoding = _input_format_encoding(args, data, config)
        logger.info(
            f"Reading {args.file} as {format_encoding.format.value} "
            f"({format_encoding.encoding.value})"
        )
        records = parse(data, format_encoding, skip_invalid=args.skip_invalid)
        _write_output(records, args)
    except OSError as e:
        logger.error(f"Cannot access {e.filename or args.file}: {e.strerror or e}")
        return 1
    except (MarcError, ValueError) as e:
        logger.error(f"Failed to convert {args.file}: {e}")
        return 1

    log_run_summary(
        input_path=args.file,
        output_format=args.output_format,
        log_file=log_file_path,
        start_time=start_time,
        end_time=time(),
        total_records=len(records),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
