# marc_codec/infrastructure/logging/_setup.py

"""Logging configuration and setup for the CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp, creating ``log_dir``"""
    makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/marc_codec_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = True,
) -> str | None:
    """Configure the root logger

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    # Console gets the short format, file gets the logger name too
    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if disable_file_logging:
        return None

    if log_file is None:
        log_file = get_default_log_path()

    file_handler = FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(DEBUG)  # Always log debug to file
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    # The file handler sees DEBUG even when the console does not
    root_logger.setLevel(DEBUG)

    getLogger(__name__).info(f"Logging to file: {log_file}")
    return log_file


def log_run_summary(
    input_path: str,
    output_format: str,
    log_file: str | None,
    start_time: float,
    end_time: float,
    total_records: int,
) -> None:
    """Log final run summary with statistics"""
    logger = getLogger(__name__)

    processing_time = end_time - start_time
    records_per_second = total_records / processing_time if processing_time > 0 else 0

    summary_lines = [
        "=" * 60,
        "CONVERSION COMPLETE",
        "=" * 60,
        f"Input: {input_path}",
        f"Records: {total_records:,}",
        f"Output format: {output_format}",
        f"Processing time: {processing_time:.2f}s ({records_per_second:.0f} records/second)",
    ]
    if log_file:
        summary_lines.append(f"Log: {log_file}")
    summary_lines.append("=" * 60)

    logger.info("\n".join(summary_lines))
