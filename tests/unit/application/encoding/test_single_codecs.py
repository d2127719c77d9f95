# tests/unit/application/encoding/test_single_codecs.py

"""Tests for the UTF-8, ISO-8859 and ISO 5426 codecs"""

# Third party imports
import pytest

# Local imports
from marc_codec.application.encoding import SingleByteCodec
from marc_codec.application.encoding import decode
from marc_codec.application.encoding import encode
from marc_codec.application.encoding import get_codec
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.errors import InvalidUtf8Error
from marc_codec.core.domain.errors import UnencodableCharacterError


class TestUtf8:
    """Strict UTF-8"""

    def test_decode(self):
        assert decode("Mir – Мир".encode("utf-8"), Encoding.UTF8) == "Mir – Мир"

    def test_invalid_start_byte(self):
        with pytest.raises(InvalidUtf8Error) as exc_info:
            decode(b"\xff", Encoding.UTF8)
        assert exc_info.value.offset == 0

    def test_truncated_sequence_offset(self):
        with pytest.raises(InvalidUtf8Error) as exc_info:
            decode(b"ab\xc3", Encoding.UTF8)
        assert exc_info.value.offset == 2

    def test_lone_surrogate_is_unencodable(self):
        with pytest.raises(UnencodableCharacterError) as exc_info:
            encode("a\ud800", Encoding.UTF8)
        assert exc_info.value.position == 1


class TestIso8859:
    """ISO-8859 parts through Python's tables"""

    def test_latin1(self):
        assert decode(b"Caf\xe9", Encoding.ISO8859_1) == "Caf\u00e9"
        assert encode("Caf\u00e9", Encoding.ISO8859_1) == b"Caf\xe9"

    def test_latin2(self):
        assert decode(b"\xb3\xf3d\xbc", Encoding.ISO8859_2) == "\u0142\u00f3d\u017a"

    def test_cyrillic(self):
        assert decode(b"\xbc\xd8\xe0", Encoding.ISO8859_5) == "Мир"

    def test_undefined_byte_is_replaced(self):
        assert decode(b"a\xd2b", Encoding.ISO8859_7) == "a\ufffdb"

    def test_euro_sign(self):
        assert encode("\u20ac", Encoding.ISO8859_15) == b"\xa4"
        with pytest.raises(UnencodableCharacterError) as exc_info:
            encode("5 \u20ac", Encoding.ISO8859_1)
        assert exc_info.value.position == 2
        assert exc_info.value.encoding == "iso-8859-1"

    def test_rejects_non_table_encoding(self):
        with pytest.raises(ValueError):
            SingleByteCodec(Encoding.MARC8)


class TestIso5426:
    """ISO 5426 with reordered diacritics"""

    def test_mark_follows_base(self):
        assert decode(b"Caf\xc2e", Encoding.ISO5426) == "Cafe\u0301"

    def test_umlaut_and_diaeresis_share_a_mark(self):
        assert decode(b"\xc8u", Encoding.ISO5426) == "u\u0308"
        assert decode(b"\xc9u", Encoding.ISO5426) == "u\u0308"
        assert encode("\u00fc", Encoding.ISO5426) == b"\xc8u"

    def test_precomposed_letters_are_decomposed(self):
        assert encode("Caf\u00e9", Encoding.ISO5426) == b"Caf\xc2e"

    def test_special_letters(self):
        assert decode(b"\xe1\xf1\xe8", Encoding.ISO5426) == "ÆæŁ"
        assert encode("Æ", Encoding.ISO5426) == b"\xe1"

    def test_undefined_byte_is_replaced(self):
        assert decode(b"a\xa0b", Encoding.ISO5426) == "a\ufffdb"

    def test_marks_flushed_before_control(self):
        assert decode(b"\xc2\x1fa", Encoding.ISO5426) == "\u0301\x1fa"

    def test_unencodable(self):
        with pytest.raises(UnencodableCharacterError) as exc_info:
            encode("x中", Encoding.ISO5426)
        assert exc_info.value.position == 1

    @pytest.mark.parametrize(
        "text, position", [("\u0301a", 0), ("a\x1f\u0301", 2), ("a\x7f\u0301", 2)]
    )
    def test_marks_without_printable_base_are_rejected(self, text, position):
        with pytest.raises(UnencodableCharacterError) as exc_info:
            encode(text, Encoding.ISO5426)
        assert exc_info.value.character == "\u0301"
        assert exc_info.value.position == position


class TestCodecRegistry:
    @pytest.mark.parametrize("encoding", list(Encoding))
    def test_every_encoding_has_a_codec(self, encoding):
        codec = get_codec(encoding)
        assert codec.encoding is encoding
        assert encoding.value in repr(codec)
