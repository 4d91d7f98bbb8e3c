import pytest

from qrgenerator.galois import (
    EXP_TABLE, LOG_TABLE, alpha2dec, dec2alpha, gf_mul, rs_generator_alpha, rs_generator_poly, rs_remainder,
)


def test_tables_are_inverse():
    for n in range(1, 256):
        assert alpha2dec(dec2alpha(n)) == n
    assert sorted(EXP_TABLE[:255].tolist()) == list(range(1, 256))


def test_reduction_polynomial():
    # a^8 = a^4 + a^3 + a^2 + 1
    assert alpha2dec(8) == 0x1D
    assert alpha2dec(255) == 1
    assert LOG_TABLE[2] == 1


def test_gf_mul():
    assert gf_mul(0, 7) == 0
    assert gf_mul(1, 0x53) == 0x53
    assert gf_mul(2, 0x80) == 0x1D
    for a in (3, 0x53, 0xCA, 0xFF):
        for b in (5, 0x11, 0xEC):
            assert gf_mul(a, b) == gf_mul(b, a)


def test_dec2alpha_zero():
    with pytest.raises(ValueError):
        dec2alpha(0)


@pytest.mark.parametrize("degree, exponents", [
    (7, [0, 87, 229, 146, 149, 238, 102, 21]),
    (10, [0, 251, 67, 46, 61, 118, 70, 64, 94, 32, 45]),
])
def test_generator_polynomial(degree, exponents):
    alpha, nonzero = rs_generator_alpha(degree)
    assert nonzero.all()
    assert alpha.tolist() == exponents
    assert len(rs_generator_poly(degree)) == degree + 1


def test_remainder_hello_world_1m():
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    assert rs_remainder(data, 10) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_remainder_is_a_codeword():
    data = list(range(40))
    ecc = rs_remainder(data, 18)
    block = data + ecc
    for j in range(18):
        acc = 0
        for b in block:
            acc = gf_mul(acc, alpha2dec(j)) ^ b
        assert acc == 0


def test_remainder_of_zeros():
    assert rs_remainder([0] * 10, 7) == [0] * 7
