# marc_codec/infrastructure/config/_loader.py

"""Configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from marc_codec.core.domain.format_encoding import FormatEncoding
from marc_codec.core.types.json import JSONDict
from marc_codec.infrastructure.config._models import AppConfig
from marc_codec.infrastructure.config._models import CodecConfig
from marc_codec.infrastructure.config._models import LoggingConfig
from marc_codec.infrastructure.config._models import OutputConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Read-only view over the application configuration"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @property
    def config(self) -> JSONDict:
        """Full config as a dict"""
        return self._app_config.to_dict()

    @property
    def codec(self) -> CodecConfig:
        return self._app_config.codec

    @property
    def output(self) -> OutputConfig:
        return self._app_config.output

    @property
    def logging(self) -> LoggingConfig:
        return self._app_config.logging

    def format_encoding(
        self,
        format_label: str | None = None,
        encoding: str | None = None,
        force_encoding: bool | None = None,
    ) -> FormatEncoding | None:
        """FormatEncoding from the codec section

        Args:
            format_label: Format to use instead of the configured one
            encoding: Encoding label to use instead of the configured one
            force_encoding: Replaces the configured flag unless None

        Returns:
            None when the format is ``"auto"``, leaving detection to the reader
        """
        label = format_label or self.codec.format
        if label == "auto":
            return None
        if force_encoding is None:
            force_encoding = self.codec.force_encoding
        return FormatEncoding.from_labels(label, encoding or self.codec.encoding, force_encoding)


_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance; the default one is cached
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
