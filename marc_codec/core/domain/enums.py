# marc_codec/core/domain/enums.py

"""Domain enumerations for the MARC codec"""

# Standard library imports
from enum import Enum


class MarcFormat(Enum):
    """Record serialization format

    MARC21 and UNIMARC share the ISO-2709 binary framing and differ only in
    what their field tags mean. MARC XML is the text serialization of the
    MARC21 model.
    """

    MARC21 = "marc21"
    UNIMARC = "unimarc"
    MARC_XML = "marcxml"

    @classmethod
    def from_label(cls, label: str) -> "MarcFormat":
        """Resolve a user supplied label such as ``"MARC21"`` or ``"xml"``"""
        key = label.strip().lower().replace("-", "").replace("_", "")
        try:
            return _FORMAT_LABELS[key]
        except KeyError:
            raise ValueError(f"Unknown MARC format: {label!r}") from None

    @property
    def is_binary(self) -> bool:
        return self is not MarcFormat.MARC_XML


class Encoding(Enum):
    """Character encodings supported for field data"""

    UTF8 = "utf-8"
    MARC8 = "marc-8"
    ISO8859_1 = "iso-8859-1"
    ISO8859_2 = "iso-8859-2"
    ISO8859_5 = "iso-8859-5"
    ISO8859_7 = "iso-8859-7"
    ISO8859_15 = "iso-8859-15"
    ISO5426 = "iso-5426"

    @classmethod
    def from_label(cls, label: str) -> "Encoding":
        """Resolve an encoding label, accepting the usual aliases

        ``"utf8"``, ``"MARC-8"``, ``"latin1"``, ``"iso8859-15"`` and
        ``"latin9"`` all resolve as expected.
        """
        key = label.strip().lower().replace("-", "").replace("_", "")
        try:
            return _ENCODING_LABELS[key]
        except KeyError:
            raise ValueError(f"Unknown character encoding: {label!r}") from None

    @property
    def leader_coding_scheme(self) -> str:
        """Leader position 09 value announcing this encoding"""
        return "a" if self is Encoding.UTF8 else " "


_FORMAT_LABELS: dict[str, MarcFormat] = {
    "marc21": MarcFormat.MARC21,
    "marc": MarcFormat.MARC21,
    "unimarc": MarcFormat.UNIMARC,
    "marcxml": MarcFormat.MARC_XML,
    "xml": MarcFormat.MARC_XML,
}

_ENCODING_LABELS: dict[str, Encoding] = {
    "utf8": Encoding.UTF8,
    "marc8": Encoding.MARC8,
    "iso88591": Encoding.ISO8859_1,
    "latin1": Encoding.ISO8859_1,
    "iso88592": Encoding.ISO8859_2,
    "latin2": Encoding.ISO8859_2,
    "iso88595": Encoding.ISO8859_5,
    "cyrillic": Encoding.ISO8859_5,
    "iso88597": Encoding.ISO8859_7,
    "greek": Encoding.ISO8859_7,
    "iso885915": Encoding.ISO8859_15,
    "latin9": Encoding.ISO8859_15,
    "iso5426": Encoding.ISO5426,
}
