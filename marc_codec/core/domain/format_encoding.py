# marc_codec/core/domain/format_encoding.py

"""Format and character encoding selection passed to every codec call"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Local imports
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.enums import MarcFormat
from marc_codec.core.domain.record import Leader


class FormatEncoding(BaseModel):
    """Which format is being read or written and which transcoder it defaults to

    The leader's coding scheme (position 09) selects UTF-8 when it is ``'a'``.
    Otherwise ``encoding`` is used. Setting ``force_encoding`` makes
    ``encoding`` win even over a UTF-8 leader, for files whose leaders lie.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: MarcFormat = Field(MarcFormat.MARC21, description="Record format")
    encoding: Encoding = Field(Encoding.MARC8, description="Default field encoding")
    force_encoding: bool = Field(
        False, description="Ignore the leader's coding scheme and always use encoding"
    )

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, v: object) -> object:
        """Accept format labels as well as enum members"""
        if isinstance(v, str):
            return MarcFormat.from_label(v)
        return v

    @field_validator("encoding", mode="before")
    @classmethod
    def parse_encoding(cls, v: object) -> object:
        """Accept encoding labels as well as enum members"""
        if isinstance(v, str):
            return Encoding.from_label(v)
        return v

    @classmethod
    def marc21_default(cls) -> "FormatEncoding":
        return cls(format=MarcFormat.MARC21, encoding=Encoding.MARC8)

    @classmethod
    def unimarc_default(cls) -> "FormatEncoding":
        return cls(format=MarcFormat.UNIMARC, encoding=Encoding.UTF8)

    @classmethod
    def marc_xml(cls) -> "FormatEncoding":
        return cls(format=MarcFormat.MARC_XML, encoding=Encoding.UTF8)

    @classmethod
    def for_format(cls, marc_format: MarcFormat) -> "FormatEncoding":
        """Conventional defaults for ``marc_format``"""
        if marc_format is MarcFormat.UNIMARC:
            return cls.unimarc_default()
        if marc_format is MarcFormat.MARC_XML:
            return cls.marc_xml()
        return cls.marc21_default()

    @classmethod
    def from_labels(
        cls, format_label: str, encoding_label: str | None = None, force_encoding: bool = False
    ) -> "FormatEncoding":
        """Build from textual labels, using the format's default encoding if none is given

        Args:
            format_label: ``"marc21"``, ``"unimarc"`` or ``"marcxml"`` (and aliases)
            encoding_label: Encoding label such as ``"marc8"`` or ``"latin1"``
            force_encoding: Whether the encoding overrides the leader

        Returns:
            Validated FormatEncoding
        """
        defaults = cls.for_format(MarcFormat.from_label(format_label))
        encoding = Encoding.from_label(encoding_label) if encoding_label else defaults.encoding
        return cls(format=defaults.format, encoding=encoding, force_encoding=force_encoding)


def resolve_encoding(leader: Leader, format_encoding: FormatEncoding) -> Encoding:
    """Encoding used for the field data of a record with ``leader``"""
    if format_encoding.force_encoding:
        return format_encoding.encoding
    if leader.is_unicode:
        return Encoding.UTF8
    return format_encoding.encoding
