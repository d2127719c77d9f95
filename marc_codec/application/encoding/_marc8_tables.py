# marc_codec/application/encoding/_marc8_tables.py

"""MARC-8 character set tables

The Library of Congress mappings ship with pymarc as ``CODESETS``: one table
per set, keyed by the final byte of the set's escape sequence. pymarc keys
each table by the bytes the set usually occupies (G0 or G1), so the tables
here are re-keyed by 7-bit position. A set then decodes the same way whether
it sits in G0 (bytes 0x21-0x7E) or G1 (bytes 0xA1-0xFE). EACC characters are
three bytes and are keyed by the three 7-bit bytes as one integer.
"""

# Third party imports
from pymarc.marc8_mapping import CODESETS

# Final characters of the designation escape sequences
BASIC_LATIN = "B"
ANSEL = "E"
GREEK_SYMBOLS = "g"
SUBSCRIPTS = "b"
SUPERSCRIPTS = "p"
BASIC_CYRILLIC = "N"
EXTENDED_CYRILLIC = "Q"
BASIC_GREEK = "S"
BASIC_HEBREW = "2"
BASIC_ARABIC = "3"
EXTENDED_ARABIC = "4"
EACC = "$1"

# Sets reached with the short "ESC F" form, left with "ESC s"
TECHNIQUE_1_SETS = frozenset({GREEK_SYMBOLS, SUBSCRIPTS, SUPERSCRIPTS})

MULTIBYTE_SETS = frozenset({EACC})


def _set_name(final: int) -> str:
    name = chr(final)
    return f"${name}" if f"${name}" in MULTIBYTE_SETS else name


def _position(code: int, multibyte: bool) -> int | None:
    """7-bit position of a pymarc key, or None for control and C1 entries"""
    if not multibyte:
        return code & 0x7F if 0x21 <= code & 0x7F <= 0x7E and code <= 0xFE else None
    first, second, third = (code >> 16) & 0x7F, (code >> 8) & 0x7F, code & 0x7F
    if not 0x21 <= first <= 0x7E:
        return None
    # EACC uses 0x20 in its second and third bytes
    if not (0x20 <= second <= 0x7E and 0x20 <= third <= 0x7E):
        return None
    return (first << 16) | (second << 8) | third


GRAPHIC_SETS: dict[str, dict[int, str]] = {}
_combining_marks: set[str] = set()

for _final, _codes in CODESETS.items():
    _name = _set_name(_final)
    _table: dict[int, str] = {}
    for _code, (_codepoint, _combining) in sorted(_codes.items()):
        _key = _position(_code, _name in MULTIBYTE_SETS)
        if _key is None:
            continue
        _table.setdefault(_key, chr(_codepoint))
        if _combining:
            _combining_marks.add(chr(_codepoint))
    GRAPHIC_SETS[_name] = _table

COMBINING_MARKS = frozenset(_combining_marks)

# Order in which the encoder tries the sets it can only reach through G0
ALTERNATE_G0_SETS: tuple[str, ...] = tuple(
    name
    for name in (
        GREEK_SYMBOLS,
        SUBSCRIPTS,
        SUPERSCRIPTS,
        BASIC_CYRILLIC,
        EXTENDED_CYRILLIC,
        BASIC_GREEK,
        BASIC_HEBREW,
        BASIC_ARABIC,
        EXTENDED_ARABIC,
        EACC,
    )
    if name in GRAPHIC_SETS
)

REVERSE_SETS: dict[str, dict[str, int]] = {}
for _name, _table in GRAPHIC_SETS.items():
    REVERSE_SETS[_name] = {}
    for _code, _char in _table.items():
        REVERSE_SETS[_name].setdefault(_char, _code)

# C1 controls that carry meaning in MARC-8
C1_CONTROLS: dict[int, str] = {
    0x88: "\u0098",  # start of non-sorting characters
    0x89: "\u009c",  # end of non-sorting characters
    0x8D: "\u200d",  # joiner
    0x8E: "\u200c",  # non-joiner
}
REVERSE_C1_CONTROLS: dict[str, int] = {char: code for code, char in C1_CONTROLS.items()}
