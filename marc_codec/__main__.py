#!/usr/bin/env python3
"""
MARC Codec - Main Entry Point

This module allows the package to be run as a script:
    python -m marc_codec
"""

# Standard library imports
import sys

# Local imports
from marc_codec.adapters.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
