# marc_codec/infrastructure/__init__.py

"""Configuration and logging infrastructure around the codec"""

# Local imports
from marc_codec.infrastructure.config import ConfigLoader
from marc_codec.infrastructure.config import get_config

__all__ = ["ConfigLoader", "get_config"]
