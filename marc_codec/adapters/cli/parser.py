# marc_codec/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from marc_codec.infrastructure.config import OUTPUT_FORMATS
from marc_codec.infrastructure.config import ConfigLoader
from marc_codec.infrastructure.config import get_config

INPUT_FORMATS = ("auto", "marc21", "unimarc", "marcxml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def create_argument_parser(
    config_path: str | None = None, config: ConfigLoader | None = None
) -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Args:
        config_path: Configuration file supplying the defaults
        config: Already loaded configuration, used instead of ``config_path``
    """
    config = config or get_config(config_path)
    codec_config = config.codec
    output_config = config.output
    logging_config = config.logging

    parser = ArgumentParser(
        prog="marc-codec",
        description="Read MARC21, UNIMARC or MARC XML records and show or convert them",
    )

    parser.add_argument("file", metavar="FILE", help="Input file, or - for standard input")

    # Input options
    parser.add_argument(
        "--format",
        "-f",
        choices=INPUT_FORMATS,
        default=codec_config.format,
        help=f"Input format (default: {codec_config.format})",
    )
    parser.add_argument(
        "--encoding",
        "-e",
        default=codec_config.encoding,
        help="Field encoding when the leader does not declare UTF-8, e.g. marc8, utf8, "
        "latin1, iso5426 (default: the format's usual encoding)",
    )
    # Force encoding is False by default, so use store_true to enable it
    parser.add_argument(
        "--force-encoding",
        action="store_true",
        default=codec_config.force_encoding,
        help="Use --encoding even when the leader declares UTF-8",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        default=codec_config.skip_invalid_records,
        help="Log and skip records that fail to decode instead of stopping",
    )

    # Output options
    parser.add_argument(
        "--output-format",
        "-t",
        choices=OUTPUT_FORMATS,
        default=output_config.output_format,
        help=f"Output format (default: {output_config.output_format})",
    )
    parser.add_argument(
        "--output-encoding",
        default=output_config.output_encoding,
        help="Field encoding for marc21 and unimarc output; leader/09 is set to match "
        "(default: --encoding, or the target format's usual encoding)",
    )
    parser.add_argument(
        "--output", "-o", default=None, help="Write output to this file instead of stdout"
    )

    # Logging options
    default_level = "DEBUG" if logging_config.debug else logging_config.log_level
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_level,
        help=f"Console log level (default: {default_level})",
    )
    parser.add_argument(
        "--log-file",
        default=logging_config.log_file,
        help="Path to log file (default: logs/marc_codec_[timestamp].log)",
    )
    # File logging is disabled by default, so use store_true to enable it
    parser.add_argument("--log-to-file", action="store_true", help="Also write a debug log file")
    parser.add_argument("--silent", action="store_true", help="Suppress all console logging")

    parser.add_argument("--config", default=config_path, help="Path to configuration JSON file")

    return parser
