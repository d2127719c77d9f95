# marc_codec/application/encoding/_single_byte.py

"""ISO-8859 family codecs backed by Python's codec tables"""

# Local imports
from marc_codec.application.encoding._base import CharacterCodec
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.errors import UnencodableCharacterError

# Python codec names for each supported ISO-8859 part
PYTHON_CODEC_NAMES: dict[Encoding, str] = {
    Encoding.ISO8859_1: "iso8859_1",
    Encoding.ISO8859_2: "iso8859_2",
    Encoding.ISO8859_5: "iso8859_5",
    Encoding.ISO8859_7: "iso8859_7",
    Encoding.ISO8859_15: "iso8859_15",
}


class SingleByteCodec(CharacterCodec):
    """One byte per character through a fixed table

    Bytes the table leaves undefined decode to U+FFFD. Encoding is strict.
    """

    __slots__ = ("encoding", "_codec_name")

    def __init__(self, encoding: Encoding):
        if encoding not in PYTHON_CODEC_NAMES:
            raise ValueError(f"{encoding.value} is not a single-byte table encoding")
        self.encoding = encoding
        self._codec_name = PYTHON_CODEC_NAMES[encoding]

    def decode(self, data: bytes) -> str:
        return data.decode(self._codec_name, errors="replace")

    def encode(self, text: str) -> bytes:
        try:
            return text.encode(self._codec_name)
        except UnicodeEncodeError as e:
            raise UnencodableCharacterError(e.object[e.start], self.encoding.value, e.start) from e
