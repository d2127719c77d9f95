# marc_codec/application/encoding/_iso5426.py

"""ISO 5426 (extended Latin for bibliographic use) codec

Bytes below 0x80 are ASCII. The upper half holds symbols, special letters and
non-spacing diacritics in 0xC0-0xDF. Like MARC-8, diacritics precede their
base letter.
"""

# Local imports
from marc_codec.application.encoding._base import CharacterCodec
from marc_codec.application.encoding._combining import decompose
from marc_codec.application.encoding._combining import iter_clusters
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.errors import UnencodableCharacterError

REPLACEMENT_CHARACTER = "\ufffd"

ISO5426_CHARACTERS: dict[int, str] = {
    0xA1: "¡",
    0xA2: "„",
    0xA3: "£",
    0xA4: "$",
    0xA5: "¥",
    0xA6: "†",
    0xA7: "§",
    0xA8: "′",  # prime
    0xA9: "‘",
    0xAA: "“",
    0xAB: "«",
    0xAC: "♭",  # flat
    0xAD: "©",
    0xAE: "℗",
    0xAF: "®",
    0xB0: "ʻ",  # ayn
    0xB1: "ʼ",  # alif
    0xB2: "‚",
    0xB6: "‡",
    0xB7: "·",
    0xB8: "″",  # double prime
    0xB9: "’",
    0xBA: "”",
    0xBB: "»",
    0xBC: "♯",  # sharp
    0xBD: "ʹ",  # mjagkij znak
    0xBE: "ʺ",  # tverdyj znak
    0xBF: "¿",
    0xE1: "Æ",
    0xE2: "Đ",
    0xE6: "Ĳ",
    0xE8: "Ł",
    0xE9: "Ø",
    0xEA: "Œ",
    0xEC: "Þ",
    0xF1: "æ",
    0xF2: "đ",
    0xF3: "ð",
    0xF5: "ı",
    0xF6: "ĳ",
    0xF8: "ł",
    0xF9: "ø",
    0xFA: "œ",
    0xFB: "ß",
    0xFC: "þ",
}

ISO5426_MARKS: dict[int, str] = {
    0xC0: "\u0309",  # hook above
    0xC1: "\u0300",  # grave
    0xC2: "\u0301",  # acute
    0xC3: "\u0302",  # circumflex
    0xC4: "\u0303",  # tilde
    0xC5: "\u0304",  # macron
    0xC6: "\u0306",  # breve
    0xC7: "\u0307",  # dot above
    0xC8: "\u0308",  # diaeresis
    0xC9: "\u0308",  # umlaut
    0xCA: "\u030a",  # ring above
    0xCB: "\u0315",  # comma above right
    0xCC: "\u0312",  # turned comma above
    0xCD: "\u030b",  # double acute
    0xCE: "\u031b",  # horn
    0xCF: "\u030c",  # caron
    0xD0: "\u0327",  # cedilla
    0xD1: "\u031c",  # left half ring below
    0xD2: "\u0326",  # comma below
    0xD3: "\u0328",  # ogonek
    0xD4: "\u0325",  # ring below
    0xD5: "\u032e",  # breve below
    0xD6: "\u0323",  # dot below
    0xD7: "\u0324",  # double dot below
    0xD8: "\u0332",  # underscore
    0xD9: "\u0333",  # double underscore
    0xDA: "\u0329",  # vertical line below
    0xDB: "\u032d",  # circumflex below
}

_REVERSE_CHARACTERS: dict[str, int] = {}
for _code, _char in ISO5426_CHARACTERS.items():
    _REVERSE_CHARACTERS.setdefault(_char, _code)

# Diaeresis and umlaut share U+0308; 0xC8 is written
_REVERSE_MARKS: dict[str, int] = {}
for _code, _char in ISO5426_MARKS.items():
    _REVERSE_MARKS.setdefault(_char, _code)


class Iso5426Codec(CharacterCodec):
    """ISO 5426 with diacritics reordered to follow their base in Unicode

    Undefined upper-half bytes decode to U+FFFD.
    """

    __slots__ = ()

    encoding = Encoding.ISO5426

    def decode(self, data: bytes) -> str:
        pieces: list[str] = []
        pending: list[str] = []

        for byte in data:
            if byte < 0x20 or byte == 0x7F:
                pieces.extend(pending)
                pending.clear()
                pieces.append(chr(byte))
                continue

            if byte < 0x80:
                char = chr(byte)
            elif byte in ISO5426_MARKS:
                pending.append(ISO5426_MARKS[byte])
                continue
            else:
                char = ISO5426_CHARACTERS.get(byte, REPLACEMENT_CHARACTER)

            pieces.append(char)
            pieces.extend(pending)
            pending.clear()

        pieces.extend(pending)
        return "".join(pieces)

    def encode(self, text: str) -> bytes:
        out = bytearray()

        for position, base, marks in iter_clusters(text):
            if base is not None and self._code_for(base) is None:
                parts = decompose(base)
                if parts is None or self._code_for(parts[0]) is None:
                    raise UnencodableCharacterError(base, self.encoding.value, position)
                base, extra = parts
                marks = extra + marks

            # Pending marks are released ahead of a control character
            if marks and (base is None or ord(base) < 0x20 or base == "\x7f"):
                mark_position = position if base is None else position + 1
                raise UnencodableCharacterError(marks[0], self.encoding.value, mark_position)

            for mark in marks:
                if mark not in _REVERSE_MARKS:
                    raise UnencodableCharacterError(mark, self.encoding.value, position)
                out.append(_REVERSE_MARKS[mark])

            if base is not None:
                out.append(self._code_for(base))

        return bytes(out)

    @staticmethod
    def _code_for(char: str) -> int | None:
        if ord(char) < 0x80:
            return ord(char)
        return _REVERSE_CHARACTERS.get(char)
