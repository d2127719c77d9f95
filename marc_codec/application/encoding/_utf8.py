# marc_codec/application/encoding/_utf8.py

"""UTF-8 field codec"""

# Local imports
from marc_codec.application.encoding._base import CharacterCodec
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.errors import InvalidUtf8Error
from marc_codec.core.domain.errors import UnencodableCharacterError


class Utf8Codec(CharacterCodec):
    """Strict UTF-8: malformed input is an error, never replaced"""

    __slots__ = ()

    encoding = Encoding.UTF8

    def decode(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(f"Invalid UTF-8 sequence: {e.reason}", offset=e.start) from e

    def encode(self, text: str) -> bytes:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            # Lone surrogates are the only characters UTF-8 rejects
            raise UnencodableCharacterError(e.object[e.start], self.encoding.value, e.start) from e
