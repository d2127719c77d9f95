# marc_codec/infrastructure/config/__init__.py

"""Configuration loading and validation"""

# Local imports
from marc_codec.infrastructure.config._loader import ConfigLoader
from marc_codec.infrastructure.config._loader import get_config
from marc_codec.infrastructure.config._models import OUTPUT_FORMATS
from marc_codec.infrastructure.config._models import AppConfig
from marc_codec.infrastructure.config._models import CodecConfig
from marc_codec.infrastructure.config._models import LoggingConfig
from marc_codec.infrastructure.config._models import OutputConfig

__all__ = [
    "AppConfig",
    "CodecConfig",
    "ConfigLoader",
    "LoggingConfig",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "get_config",
]
