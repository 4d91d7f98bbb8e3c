"""Small bounded values with their own types: version, ECC level and mask."""

import operator
from enum import IntEnum

from .errors import InvalidParameter

MIN_VERSION = 1
MAX_VERSION = 40


def _as_int(value, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}") from None


class EccLevel(IntEnum):
    """Error correction level, ordered from weakest to strongest."""
    LOW      = 0  # ~7% of codewords recoverable
    MEDIUM   = 1  # ~15%
    QUARTILE = 2  # ~25%
    HIGH     = 3  # ~30%

    @property
    def format_bits(self) -> int:
        # 2-bit field written into the format information
        return (1, 0, 3, 2)[self]

    @property
    def letter(self) -> str:
        return "LMQH"[self]


class Version(int):
    """QR Code version in [1, 40]; the symbol is version*4 + 17 modules wide."""

    def __new__(cls, value):
        value = _as_int(value, "Version")
        if not MIN_VERSION <= value <= MAX_VERSION:
            raise InvalidParameter(f"Version must be in [{MIN_VERSION}, {MAX_VERSION}], got {value}")
        return super().__new__(cls, value)

    @property
    def size(self) -> int:
        return self * 4 + 17

    @property
    def tier(self) -> int:
        # count-field width tier: 1-9, 10-26, 27-40
        return (self + 7) // 17

    def __repr__(self):
        return f"Version({int(self)})"


class Mask(int):
    """Data mask pattern index in [0, 7]."""

    def __new__(cls, value):
        value = _as_int(value, "Mask")
        if not 0 <= value <= 7:
            raise InvalidParameter(f"Mask must be in [0, 7], got {value}")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Mask({int(self)})"
