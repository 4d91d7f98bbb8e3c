import numpy as np
import pytest

from qrgenerator.bitbuffer import BitBuffer, int2bits

def test_int2bits_msb_first():
    assert int2bits(0b1011, 4).tolist() == [True, False, True, True]
    assert int2bits(5, 8).tolist() == [False] * 5 + [True, False, True]
    assert int2bits(0, 0).size == 0

def test_int2bits_rejects_overflow():
    with pytest.raises(ValueError):
        int2bits(16, 4)
    with pytest.raises(ValueError):
        int2bits(-1, 4)

def test_append_and_pack():
    bb = BitBuffer()
    bb.append_bits(0b0100, 4)
    bb.append_bits(0b0001, 4)
    bb.append_bits(0xEC, 8)
    assert len(bb) == 16
    assert bb.to_bytes() == [0x41, 0xEC]

def test_extend_accepts_arrays():
    bb = BitBuffer([1, 1, 0])
    bb.extend(np.array([True, False, False, False, False]))
    assert len(bb) == 8
    assert bb.to_bytes() == [0b11010000]

def test_pack_requires_whole_bytes():
    bb = BitBuffer()
    bb.append_bits(1, 3)
    with pytest.raises(ValueError):
        bb.to_bytes()

def test_bits_is_a_copy():
    bb = BitBuffer([1, 0])
    bits = bb.bits
    bits[0] = False
    assert bb.bits.tolist() == [True, False]
