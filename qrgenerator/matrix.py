"""Module grid: function patterns, codeword placement, format and version info.

The grid is indexed [row, col]; True is a dark module. `is_function` marks
the cells that belong to structural patterns and are skipped by data
placement and masking.
"""

from typing import List, Sequence

import numpy as np

from .bitbuffer import int2bits
from .qrtypes import EccLevel, Version
from .tables import alignment_pattern_positions

# 7x7 finder: dark ring, light ring, dark 3x3 core
FINDER = np.ones([7, 7], dtype=np.bool_)
FINDER[1:-1, 1:-1] = np.zeros([5, 5], dtype=np.bool_)
FINDER[2:-2, 2:-2] = np.ones([3, 3], dtype=np.bool_)

# finder plus its light separator
FINDER_SEPARATED = np.zeros([9, 9], dtype=np.bool_)
FINDER_SEPARATED[1:-1, 1:-1] = FINDER

ALIGNMENT = np.ones([5, 5], dtype=np.bool_)
ALIGNMENT[1:-1, 1:-1] = np.zeros([3, 3], dtype=np.bool_)
ALIGNMENT[2, 2] = True

FORMAT_GENERATOR = 0x537    # x^10 + x^8 + x^5 + x^4 + x^2 + x + 1
FORMAT_XOR_MASK = 0x5412
VERSION_GENERATOR = 0x1F25  # x^12 + x^11 + x^10 + x^9 + x^8 + x^5 + x^2 + 1


def bch_remainder(value: int, degree: int, generator: int) -> int:
    rem = value
    for _ in range(degree):
        rem = (rem << 1) ^ ((rem >> (degree - 1)) * generator)
    return rem


def format_bits(ecl: EccLevel, mask: int) -> int:
    """15-bit format information: 2 ECL bits, 3 mask bits, BCH(15,5), XOR mask."""
    data = EccLevel(ecl).format_bits << 3 | int(mask)
    bits = (data << 10 | bch_remainder(data, 10, FORMAT_GENERATOR)) ^ FORMAT_XOR_MASK
    assert bits >> 15 == 0
    return bits


def version_bits(version: int) -> int:
    """18-bit version information: 6 version bits and a BCH(18,6) remainder."""
    bits = int(version) << 12 | bch_remainder(int(version), 12, VERSION_GENERATOR)
    assert bits >> 18 == 0
    return bits


def lsb_first(value: int, length: int) -> np.ndarray:
    return int2bits(value, length)[::-1]


class ModuleMatrix:
    def __init__(self, version: Version) -> None:
        self.version = Version(version)
        self.size = self.version.size
        self.modules = np.zeros([self.size, self.size], dtype=np.bool_)
        self.is_function = np.zeros([self.size, self.size], dtype=np.bool_)

    def set_function(self, rows, cols, value) -> None:
        self.modules[rows, cols] = value
        self.is_function[rows, cols] = True

    def draw_function_patterns(self) -> None:
        size = self.size

        # Timing
        timing = np.arange(size) % 2 == 0
        self.set_function(6, slice(None), timing)
        self.set_function(slice(None), 6, timing)

        # Finders with separators, clipped at the symbol edge
        self._draw_finder(0, 0, FINDER_SEPARATED[1:, 1:])
        self._draw_finder(0, size - 8, FINDER_SEPARATED[1:, :-1])
        self._draw_finder(size - 8, 0, FINDER_SEPARATED[:-1, 1:])

        # Alignment, except where they would overlap a finder
        positions = alignment_pattern_positions(self.version)
        last = len(positions) - 1
        for i, row in enumerate(positions):
            for j, col in enumerate(positions):
                if (i, j) in ((0, 0), (0, last), (last, 0)):
                    continue
                self.set_function(slice(row - 2, row + 3), slice(col - 2, col + 3), ALIGNMENT)

        # Placeholders, overwritten once the mask is known
        self.draw_format_bits(EccLevel.LOW, 0)
        self.draw_version()

    def _draw_finder(self, row: int, col: int, block: np.ndarray) -> None:
        self.set_function(slice(row, row + 8), slice(col, col + 8), block)

    def draw_format_bits(self, ecl: EccLevel, mask: int) -> None:
        size = self.size
        fb = lsb_first(format_bits(ecl, mask), 15)

        # Around the top left finder
        self.set_function(slice(0, 6), 8, fb[0:6])
        self.set_function(7, 8, fb[6])
        self.set_function(8, 8, fb[7])
        self.set_function(8, 7, fb[8])
        self.set_function(8, slice(0, 6), fb[14:8:-1])

        # Split between the other two finders
        self.set_function(8, slice(size - 8, size), fb[7::-1])
        self.set_function(slice(size - 7, size), 8, fb[8:15])
        # Always dark
        self.set_function(size - 8, 8, True)

    def draw_version(self) -> None:
        if self.version < 7:
            return
        size = self.size
        block = lsb_first(version_bits(self.version), 18).reshape(6, 3)
        self.set_function(slice(0, 6), slice(size - 11, size - 8), block)
        self.set_function(slice(size - 11, size - 8), slice(0, 6), block.T)

    def data_path(self) -> List[tuple]:
        """Non-function cells in zig-zag order: column pairs from the right, alternating up and down."""
        size = self.size
        path = []
        right = size - 1
        while right >= 1:
            if right == 6:
                right = 5
            upward = (right + 1) & 2 == 0
            rows = range(size - 1, -1, -1) if upward else range(size)
            for row in rows:
                for col in (right, right - 1):
                    if not self.is_function[row, col]:
                        path.append((row, col))
            right -= 2
        return path

    def draw_codewords(self, codewords: Sequence[int]) -> None:
        bits = np.unpackbits(np.array(codewords, dtype=np.uint8)).astype(np.bool_)
        path = self.data_path()
        if bits.size > len(path):
            raise ValueError(f"{bits.size} data bits do not fit {len(path)} modules")
        # remainder modules past the last codeword keep a zero bit
        rows, cols = np.array(path[:bits.size], dtype=np.intp).reshape(-1, 2).T
        self.modules[rows, cols] = bits
