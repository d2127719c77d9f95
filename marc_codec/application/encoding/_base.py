# marc_codec/application/encoding/_base.py

"""Base class for character codecs"""

# Standard library imports
from abc import ABC
from abc import abstractmethod

# Local imports
from marc_codec.core.domain.enums import Encoding


class CharacterCodec(ABC):
    """Stateless converter between field bytes and Unicode text

    Codecs are shared singletons, so any state needed while converting one
    string lives in local variables of ``decode``/``encode``.
    """

    __slots__ = ()

    encoding: Encoding

    @abstractmethod
    def decode(self, data: bytes) -> str:
        """Convert field bytes to text"""

    @abstractmethod
    def encode(self, text: str) -> bytes:
        """Convert text to field bytes, raising UnencodableCharacterError on failure"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encoding.value})"
