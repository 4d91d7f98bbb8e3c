"""Payload segments: numeric, alphanumeric, byte, kanji and ECI modes.

A segment holds its mode, its character count and the packed payload bits.
The mode indicator and character count field are only added when the
segments are serialized for a concrete version, because the width of the
count field depends on the version tier (1-9, 10-26, 27-40).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

import numpy as np

from .bitbuffer import BitBuffer, int2bits
from .errors import InvalidCharacter, InvalidParameter
from .qrtypes import Version

logger = logging.getLogger(__name__)

ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_ALPHANUMERIC_INDEX = {c: i for i, c in enumerate(ALPHANUMERIC_CHARSET)}


class Mode(Enum):
    """Segment mode: 4-bit indicator and count-field widths per version tier."""
    NUMERIC      = (0x1, (10, 12, 14))
    ALPHANUMERIC = (0x2, (9, 11, 13))
    BYTE         = (0x4, (8, 16, 16))
    KANJI        = (0x8, (8, 10, 12))
    ECI          = (0x7, (0, 0, 0))

    @property
    def mode_bits(self) -> int:
        return self.value[0]

    def num_char_count_bits(self, version: int) -> int:
        return self.value[1][Version(version).tier]


@dataclass(frozen=True, eq=False)
class Segment:
    mode: Mode
    num_chars: int
    data: np.ndarray = field(repr=False)

    def __post_init__(self):
        if self.num_chars < 0:
            raise InvalidParameter("Character count must be non-negative")
        bits = np.asarray(self.data)
        if bits.size and not np.isin(bits, (0, 1)).all():
            raise InvalidParameter("Segment data must only contain bits")
        bits = bits.astype(np.bool_).ravel()
        bits.setflags(write=False)
        object.__setattr__(self, "data", bits)

    def __len__(self) -> int:
        return self.data.size


def is_numeric(text: str) -> bool:
    return all("0" <= c <= "9" for c in text)


def is_alphanumeric(text: str) -> bool:
    return all(c in _ALPHANUMERIC_INDEX for c in text)


def make_bytes(data: Union[bytes, bytearray, Sequence[int]]) -> Segment:
    """Byte mode segment, 8 bits per byte."""
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    return Segment(Mode.BYTE, arr.size, np.unpackbits(arr))


def make_numeric(digits: str) -> Segment:
    """Numeric mode: 3 digits -> 10 bits, leftover 2 -> 7 bits, 1 -> 4 bits."""
    if not is_numeric(digits):
        raise InvalidCharacter(f"Non-numeric characters in {digits!r}")
    bb = BitBuffer()
    for i in range(0, len(digits), 3):
        group = digits[i:i + 3]
        bb.append_bits(int(group), len(group) * 3 + 1)
    return Segment(Mode.NUMERIC, len(digits), bb.bits)


def make_alphanumeric(text: str) -> Segment:
    """Alphanumeric mode: pairs -> 11 bits, a trailing single char -> 6 bits."""
    if not is_alphanumeric(text):
        raise InvalidCharacter(f"Characters outside the alphanumeric set in {text!r}")
    bb = BitBuffer()
    for i in range(0, len(text) - 1, 2):
        bb.append_bits(_ALPHANUMERIC_INDEX[text[i]] * 45 + _ALPHANUMERIC_INDEX[text[i + 1]], 11)
    if len(text) % 2 == 1:
        bb.append_bits(_ALPHANUMERIC_INDEX[text[-1]], 6)
    return Segment(Mode.ALPHANUMERIC, len(text), bb.bits)


def make_kanji(text: str) -> Segment:
    """Kanji mode: each Shift JIS double-byte character -> 13 bits."""
    bb = BitBuffer()
    for c in text:
        try:
            sjis = c.encode("shift_jis")
        except UnicodeEncodeError:
            raise InvalidCharacter(f"{c!r} has no Shift JIS encoding") from None
        if len(sjis) != 2:
            raise InvalidCharacter(f"{c!r} is not a double-byte Shift JIS character")
        code = (sjis[0] << 8) | sjis[1]
        if 0x8140 <= code <= 0x9FFC:
            code -= 0x8140
        elif 0xE040 <= code <= 0xEBBF:
            code -= 0xC140
        else:
            raise InvalidCharacter(f"{c!r} is outside the Kanji mode ranges")
        bb.append_bits((code >> 8) * 0xC0 + (code & 0xFF), 13)
    return Segment(Mode.KANJI, len(text), bb.bits)


def make_eci(assign_value: int) -> Segment:
    """Extended Channel Interpretation designator."""
    bb = BitBuffer()
    if assign_value < 0:
        raise InvalidParameter("ECI assignment value out of range")
    elif assign_value < (1 << 7):
        bb.append_bits(assign_value, 8)
    elif assign_value < (1 << 14):
        bb.append_bits(0b10, 2)
        bb.append_bits(assign_value, 14)
    elif assign_value < 1000000:
        bb.append_bits(0b110, 3)
        bb.append_bits(assign_value, 21)
    else:
        raise InvalidParameter("ECI assignment value out of range")
    return Segment(Mode.ECI, 0, bb.bits)


def _char_class(c: str) -> Mode:
    if "0" <= c <= "9":
        return Mode.NUMERIC
    if c in _ALPHANUMERIC_INDEX:
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def make_segments(text: str) -> List[Segment]:
    """Split text into runs of digits, alphanumeric characters and everything else.

    Each run becomes one segment; byte runs are UTF-8 encoded. The split is
    greedy and never merges or reorders runs, so the layout is stable for a
    given input.
    """
    segs = []
    start = 0
    for i in range(1, len(text) + 1):
        if i < len(text) and _char_class(text[i]) == _char_class(text[start]):
            continue
        run = text[start:i]
        mode = _char_class(run[0])
        if mode is Mode.NUMERIC:
            segs.append(make_numeric(run))
        elif mode is Mode.ALPHANUMERIC:
            segs.append(make_alphanumeric(run))
        else:
            try:
                segs.append(make_bytes(run.encode("utf-8")))
            except UnicodeEncodeError as e:
                raise InvalidCharacter(f"Cannot encode {run!r} as UTF-8") from e
        start = i
    logger.debug("Split %d characters into modes %s", len(text), [s.mode.name for s in segs])
    return segs


def get_total_bits(segs: Sequence[Segment], version: int) -> Optional[int]:
    """Bits needed to serialize `segs` at `version`, or None if a count field overflows."""
    result = 0
    for seg in segs:
        ccbits = seg.mode.num_char_count_bits(version)
        if seg.num_chars >= (1 << ccbits):
            return None
        result += 4 + ccbits + len(seg)
    return result


def append_segment(bb: BitBuffer, seg: Segment, version: int) -> None:
    bb.append_bits(seg.mode.mode_bits, 4)
    bb.extend(int2bits(seg.num_chars, seg.mode.num_char_count_bits(version)))
    bb.extend(seg.data)
