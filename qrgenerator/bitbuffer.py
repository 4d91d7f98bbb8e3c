"""Append-only bit sequence, packed big-endian into codewords."""

import numpy as np


def int2bits(value: int, length: int) -> np.ndarray:
    """Return the `length` low bits of `value`, most significant first."""
    if length < 0 or value < 0 or value >> length != 0:
        raise ValueError(f"Value {value} does not fit in {length} bits")
    return ((value >> np.arange(length - 1, -1, -1)) & 1).astype(np.bool_)


class BitBuffer:
    def __init__(self, bits=None):
        self._chunks = []
        self._length = 0
        if bits is not None:
            self.extend(bits)

    def __len__(self) -> int:
        return self._length

    def append_bits(self, value: int, length: int) -> None:
        self.extend(int2bits(value, length))

    def extend(self, bits) -> None:
        chunk = np.asarray(bits, dtype=np.bool_).ravel()
        if chunk.size:
            self._chunks.append(chunk)
            self._length += chunk.size

    @property
    def bits(self) -> np.ndarray:
        if not self._chunks:
            return np.zeros(0, dtype=np.bool_)
        if len(self._chunks) > 1:
            self._chunks = [np.concatenate(self._chunks)]
        return self._chunks[0].copy()

    def to_bytes(self) -> list:
        """Pack into 8-bit codewords, MSB first. Length must be a multiple of 8."""
        if self._length % 8 != 0:
            raise ValueError(f"Bit length {self._length} is not a multiple of 8")
        return np.packbits(self.bits).tolist()
