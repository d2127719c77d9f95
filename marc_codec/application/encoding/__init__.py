# marc_codec/application/encoding/__init__.py

"""Character encoding engine

One stateless codec object per supported encoding, looked up with
``get_codec``. Each converts field bytes to Unicode text and back.
"""

# Local imports
from marc_codec.application.encoding._base import CharacterCodec
from marc_codec.application.encoding._iso5426 import Iso5426Codec
from marc_codec.application.encoding._marc8 import Marc8Codec
from marc_codec.application.encoding._marc8 import Marc8State
from marc_codec.application.encoding._marc8 import decode_marc8
from marc_codec.application.encoding._marc8 import decode_step
from marc_codec.application.encoding._single_byte import SingleByteCodec
from marc_codec.application.encoding._utf8 import Utf8Codec
from marc_codec.core.domain.enums import Encoding

_CODECS: dict[Encoding, CharacterCodec] = {
    Encoding.UTF8: Utf8Codec(),
    Encoding.MARC8: Marc8Codec(),
    Encoding.ISO8859_1: SingleByteCodec(Encoding.ISO8859_1),
    Encoding.ISO8859_2: SingleByteCodec(Encoding.ISO8859_2),
    Encoding.ISO8859_5: SingleByteCodec(Encoding.ISO8859_5),
    Encoding.ISO8859_7: SingleByteCodec(Encoding.ISO8859_7),
    Encoding.ISO8859_15: SingleByteCodec(Encoding.ISO8859_15),
    Encoding.ISO5426: Iso5426Codec(),
}


def get_codec(encoding: Encoding) -> CharacterCodec:
    """Codec for ``encoding``"""
    return _CODECS[encoding]


def decode(data: bytes, encoding: Encoding) -> str:
    return _CODECS[encoding].decode(data)


def encode(text: str, encoding: Encoding) -> bytes:
    return _CODECS[encoding].encode(text)


__all__ = [
    "CharacterCodec",
    "Iso5426Codec",
    "Marc8Codec",
    "Marc8State",
    "SingleByteCodec",
    "Utf8Codec",
    "decode",
    "decode_marc8",
    "decode_step",
    "encode",
    "get_codec",
]
