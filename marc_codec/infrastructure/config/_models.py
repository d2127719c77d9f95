# marc_codec/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
import json
from logging import getLogger
from pathlib import Path
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.types.json import JSONDict

logger = getLogger(__name__)

type OutputFormat = Literal["plain", "json", "json_pretty", "xml", "marc21", "unimarc"]

OUTPUT_FORMATS: tuple[str, ...] = ("plain", "json", "json_pretty", "xml", "marc21", "unimarc")


class CodecConfig(BaseModel):
    """How input records are read"""

    format: str = Field("auto", description="Input format label, or 'auto' to detect")
    encoding: str | None = Field(None, description="Default field encoding label")
    force_encoding: bool = Field(False, description="Ignore the leader's coding scheme")
    skip_invalid_records: bool = Field(False, description="Skip records that fail to decode")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Ensure the format label is known"""
        if v != "auto":
            MarcFormat.from_label(v)
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str | None) -> str | None:
        """Ensure the encoding label is known"""
        if v is not None:
            Encoding.from_label(v)
        return v


class OutputConfig(BaseModel):
    """Output configuration"""

    output_format: OutputFormat = Field("plain", description="How records are shown")
    output_encoding: str | None = Field(
        None, description="Field encoding for MARC21 and UNIMARC output, None to reuse the input's"
    )

    @field_validator("output_encoding")
    @classmethod
    def validate_output_encoding(cls, v: str | None) -> str | None:
        if v is not None:
            Encoding.from_label(v)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Console log level"
    )
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    codec: CodecConfig = Field(default_factory=CodecConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file; ``config.json`` in the
                current directory is used when omitted and present

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        return self.model_dump()
