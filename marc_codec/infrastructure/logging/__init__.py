# marc_codec/infrastructure/logging/__init__.py

"""Logging setup for the command line tool"""

# Local imports
from marc_codec.infrastructure.logging._setup import get_default_log_path
from marc_codec.infrastructure.logging._setup import log_run_summary
from marc_codec.infrastructure.logging._setup import set_up_logging

__all__ = ["get_default_log_path", "log_run_summary", "set_up_logging"]
