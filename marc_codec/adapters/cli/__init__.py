# marc_codec/adapters/cli/__init__.py

"""CLI adapter for the MARC codec"""

# Local imports
from marc_codec.adapters.cli.main import main
from marc_codec.adapters.cli.main import render_record
from marc_codec.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main", "render_record"]
