import numpy as np
import pytest

from qrgenerator import EccLevel, InvalidParameter, Mask, Version


def test_version_properties():
    assert Version(1).size == 21
    assert Version(40).size == 177
    assert [Version(v).tier for v in (1, 9, 10, 26, 27, 40)] == [0, 0, 1, 1, 2, 2]


def test_integer_like_values_accepted():
    assert Version(np.int64(7)) == 7
    assert Mask(np.uint8(5)) == 5
    assert Mask(Mask(3)) == 3


@pytest.mark.parametrize("value", [0, 41, -1])
def test_version_out_of_range(value):
    with pytest.raises(InvalidParameter):
        Version(value)


@pytest.mark.parametrize("value", [2.0, 5.5, "5", None])
def test_version_not_an_integer(value):
    with pytest.raises(InvalidParameter):
        Version(value)


@pytest.mark.parametrize("value", [3.7, "3", 8, -1])
def test_mask_rejects_bad_values(value):
    with pytest.raises(InvalidParameter):
        Mask(value)


def test_ecc_level_fields():
    assert [e.format_bits for e in EccLevel] == [1, 0, 3, 2]
    assert "".join(e.letter for e in EccLevel) == "LMQH"
