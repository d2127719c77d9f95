# marc_codec/application/encoding/_marc8.py

"""MARC-8 codec

Decoding runs a small state machine: ``Marc8State`` records the sets
designated into G0 and G1 and the combining marks waiting for their base
character. ``decode_step`` consumes one unit of input (a byte or a whole
escape sequence) and returns the next state, so the transcoder holds no state
of its own.

Bytes that no active set defines are read as ISO-8859-1. That keeps files
with stray Latin-1 data readable and is the only lossy path in the codec.
"""

# Standard library imports
from dataclasses import dataclass
from dataclasses import replace
from logging import getLogger

# Local imports
from marc_codec.application.encoding._base import CharacterCodec
from marc_codec.application.encoding._combining import decompose
from marc_codec.application.encoding._combining import iter_clusters
from marc_codec.application.encoding._marc8_tables import ALTERNATE_G0_SETS
from marc_codec.application.encoding._marc8_tables import ANSEL
from marc_codec.application.encoding._marc8_tables import BASIC_LATIN
from marc_codec.application.encoding._marc8_tables import C1_CONTROLS
from marc_codec.application.encoding._marc8_tables import COMBINING_MARKS
from marc_codec.application.encoding._marc8_tables import GRAPHIC_SETS
from marc_codec.application.encoding._marc8_tables import MULTIBYTE_SETS
from marc_codec.application.encoding._marc8_tables import REVERSE_C1_CONTROLS
from marc_codec.application.encoding._marc8_tables import REVERSE_SETS
from marc_codec.application.encoding._marc8_tables import TECHNIQUE_1_SETS
from marc_codec.core.domain.enums import Encoding
from marc_codec.core.domain.errors import UnencodableCharacterError

logger = getLogger(__name__)

ESC = 0x1B
_G0_INTERMEDIATES = b"(,"
_G1_INTERMEDIATES = b")-"
_MULTIBYTE = ord("$")


@dataclass(frozen=True, slots=True)
class Marc8State:
    """Designated character sets plus marks waiting for a base character"""

    g0: str = BASIC_LATIN
    g1: str = ANSEL
    pending: tuple[str, ...] = ()

    def flush(self) -> tuple["Marc8State", str]:
        """Release pending marks, e.g. before a control character"""
        if not self.pending:
            return self, ""
        return replace(self, pending=()), "".join(self.pending)


def read_escape(state: Marc8State, data: bytes, pos: int) -> tuple[Marc8State, int] | None:
    """Apply the escape sequence starting at ``data[pos]``

    Returns the new state and the position after the sequence, or None when
    the bytes do not form a designation.
    """
    if pos + 1 >= len(data):
        return None
    first = data[pos + 1]

    if chr(first) in TECHNIQUE_1_SETS:
        return replace(state, g0=chr(first)), pos + 2
    if first == ord("s"):
        return replace(state, g0=BASIC_LATIN), pos + 2

    if first in _G0_INTERMEDIATES or first in _G1_INTERMEDIATES:
        if pos + 2 >= len(data) or not _is_final(data[pos + 2]):
            return None
        final = chr(data[pos + 2])
        if first in _G0_INTERMEDIATES:
            return replace(state, g0=final), pos + 3
        return replace(state, g1=final), pos + 3

    if first == _MULTIBYTE:
        # Multibyte sets (EACC) are recognised but not transcoded
        if pos + 2 >= len(data):
            return None
        second = data[pos + 2]
        if second in _G0_INTERMEDIATES or second in _G1_INTERMEDIATES:
            if pos + 3 >= len(data) or not _is_final(data[pos + 3]):
                return None
            final = "$" + chr(data[pos + 3])
            if second in _G0_INTERMEDIATES:
                return replace(state, g0=final), pos + 4
            return replace(state, g1=final), pos + 4
        if _is_final(second):
            return replace(state, g0="$" + chr(second)), pos + 3

    return None


def _is_final(byte: int) -> bool:
    return 0x21 <= byte <= 0x7E


def decode_step(state: Marc8State, data: bytes, pos: int) -> tuple[Marc8State, int, str]:
    """Consume the unit at ``data[pos]``; return new state, new position and output"""
    byte = data[pos]

    if byte == ESC:
        designated = read_escape(state, data, pos)
        if designated is not None:
            new_state, new_pos = designated
            return new_state, new_pos, ""

    if byte < 0x20 or 0x80 <= byte <= 0x9F:
        state, marks = state.flush()
        return state, pos + 1, marks + C1_CONTROLS.get(byte, chr(byte))

    if byte == 0x20:
        return _release(state), pos + 1, " " + "".join(state.pending)

    if 0x21 <= byte <= 0x7E:
        charset = state.g0
    elif 0xA1 <= byte <= 0xFE:
        charset = state.g1
    else:
        charset = None

    char, width = _lookup(charset, data, pos)
    if char is None:
        logger.debug(
            f"MARC-8 byte 0x{byte:02X} at offset {pos} is undefined in set {charset!r}; "
            f"reading it as ISO-8859-1"
        )
        char, width = chr(byte), 1
    elif char in COMBINING_MARKS:
        return replace(state, pending=state.pending + (char,)), pos + width, ""

    return _release(state), pos + width, char + "".join(state.pending)


def _lookup(charset: str | None, data: bytes, pos: int) -> tuple[str | None, int]:
    """Character at ``data[pos]`` in ``charset`` and the number of bytes it spans"""
    table = GRAPHIC_SETS.get(charset) if charset is not None else None
    if table is None:
        return None, 1
    if charset not in MULTIBYTE_SETS:
        return table.get(data[pos] & 0x7F), 1
    unit = data[pos : pos + 3]
    if len(unit) < 3:
        return None, 1
    return table.get(int.from_bytes(unit, "big") & 0x7F7F7F), 3


def _release(state: Marc8State) -> Marc8State:
    """State after a base character has been written along with its marks"""
    return replace(state, pending=()) if state.pending else state


def decode_marc8(data: bytes, state: Marc8State | None = None) -> tuple[str, Marc8State]:
    """Decode ``data`` starting from ``state``, releasing any trailing marks

    Returns the text and the final designations, which lets a caller continue
    decoding a field split across buffers.
    """
    state = state or Marc8State()
    pieces: list[str] = []
    pos = 0
    while pos < len(data):
        state, pos, text = decode_step(state, data, pos)
        if text:
            pieces.append(text)
    state, marks = state.flush()
    pieces.append(marks)
    return "".join(pieces), state


def _switch_g0(current: str, target: str) -> bytes:
    """Escape sequence moving G0 from ``current`` to ``target``"""
    if target in TECHNIQUE_1_SETS or target in MULTIBYTE_SETS:
        return bytes([ESC]) + target.encode("ascii")
    if target == BASIC_LATIN and current in TECHNIQUE_1_SETS:
        return bytes([ESC, ord("s")])
    return bytes([ESC, ord("("), ord(target)])


def _carries_marks(base: str) -> bool:
    """Whether marks written before ``base`` decode back onto it

    The decoder releases pending marks ahead of a control character.
    """
    if base in REVERSE_C1_CONTROLS:
        return False
    codepoint = ord(base)
    return not (codepoint < 0x20 or 0x80 <= codepoint <= 0x9F)


class Marc8Codec(CharacterCodec):
    """MARC-8 with every Library of Congress graphic set, EACC included"""

    __slots__ = ()

    encoding = Encoding.MARC8

    def decode(self, data: bytes) -> str:
        text, _ = decode_marc8(data)
        return text

    def encode(self, text: str) -> bytes:
        """Encode ``text``, moving combining marks ahead of their base

        G0 starts as Basic Latin and is switched back to it at the end, so
        every encoded string is self-contained.
        """
        out = bytearray()
        g0 = BASIC_LATIN

        for position, base, marks in iter_clusters(text, COMBINING_MARKS.__contains__):
            if base is not None and self._locate(base, g0) is None:
                parts = decompose(base)
                if parts is None:
                    raise UnencodableCharacterError(base, self.encoding.value, position)
                base, extra = parts
                marks = extra + marks

            if base is None or marks and not _carries_marks(base):
                mark_position = position if base is None else position + 1
                raise UnencodableCharacterError(marks[0], self.encoding.value, mark_position)

            for char in [*marks, base]:
                located = self._locate(char, g0)
                if located is None:
                    raise UnencodableCharacterError(char, self.encoding.value, position)
                charset, code = located
                if charset is None:
                    out.append(code)
                    continue
                if charset != g0:
                    out += _switch_g0(g0, charset)
                    g0 = charset
                out += code.to_bytes(3 if charset in MULTIBYTE_SETS else 1, "big")

        if g0 != BASIC_LATIN:
            out += _switch_g0(g0, BASIC_LATIN)
        return bytes(out)

    @staticmethod
    def _locate(char: str, g0: str) -> tuple[str | None, int] | None:
        """Find the code for ``char``

        Returns (G0 set needed, code), with None as the set when the byte does
        not depend on G0, or None when MARC-8 cannot represent the character.
        """
        codepoint = ord(char)
        if codepoint <= 0x20 or codepoint == 0x7F:
            return None, codepoint
        if char in REVERSE_C1_CONTROLS:
            return None, REVERSE_C1_CONTROLS[char]
        if 0x80 <= codepoint <= 0x9F:
            # These bytes read back as non-sort markers and joiners
            return None if codepoint in C1_CONTROLS else (None, codepoint)

        current = REVERSE_SETS.get(g0, {}).get(char)
        if current is not None:
            return g0, current
        if codepoint < 0x7F:
            return BASIC_LATIN, codepoint

        ansel = REVERSE_SETS[ANSEL].get(char)
        if ansel is not None:
            return None, ansel | 0x80

        for charset in ALTERNATE_G0_SETS:
            code = REVERSE_SETS[charset].get(char)
            if code is not None:
                return charset, code
        return None
