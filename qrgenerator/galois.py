"""GF(256) arithmetic and the Reed-Solomon remainder used for QR error correction.

The field is built from the primitive element alpha = 0x02 and the reduction
polynomial x^8 + x^4 + x^3 + x^2 + 1 (0x11D). Polynomials are stored highest
degree first.
"""

from functools import lru_cache

import numpy as np

POLY = 0x11D

EXP_TABLE = np.zeros(512, dtype=np.int64)
LOG_TABLE = np.zeros(256, dtype=np.int64)


def _init_tables() -> None:
    x = 1
    for i in range(255):
        EXP_TABLE[i] = x
        LOG_TABLE[x] = i
        x <<= 1
        if x & 0x100:
            x ^= POLY
    EXP_TABLE[255:510] = EXP_TABLE[0:255]
    EXP_TABLE[510:] = EXP_TABLE[0:2]

_init_tables()


def dec2alpha(n: int) -> int:
    if n == 0:
        raise ValueError("0 has no logarithm in GF(256)")
    return int(LOG_TABLE[n])


def alpha2dec(n: int) -> int:
    return int(EXP_TABLE[n % 255])


def gf_mul(x: int, y: int) -> int:
    if x == 0 or y == 0:
        return 0
    return int(EXP_TABLE[LOG_TABLE[x] + LOG_TABLE[y]])


def poly_mul(p, q) -> list:
    res = [0] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            res[i + j] ^= gf_mul(a, b)
    return res


@lru_cache(maxsize=None)
def rs_generator_poly(degree: int) -> tuple:
    """Generator (x - a^0)(x - a^1)...(x - a^(degree-1)), coefficients as integers."""
    if not 1 <= degree <= 255:
        raise ValueError("Degree out of range")
    result = [1]
    for i in range(degree):
        result = poly_mul(result, [1, alpha2dec(i)])
    return tuple(result)


@lru_cache(maxsize=None)
def rs_generator_alpha(degree: int) -> tuple:
    """Generator in alpha-exponent form, plus the mask of its non-zero coefficients."""
    dec = np.array(rs_generator_poly(degree), dtype=np.int64)
    nonzero = dec != 0
    g = np.where(nonzero, LOG_TABLE[dec], 0)
    g.setflags(write=False)
    nonzero.setflags(write=False)
    return g, nonzero


def rs_remainder(data, degree: int) -> list:
    """Return the `degree` error correction codewords for the data codewords."""
    g, nonzero = rs_generator_alpha(degree)
    mc = np.zeros(len(data) + degree, dtype=np.int64)
    mc[:len(data)] = data
    for i in range(len(data)):
        if mc[i] != 0:
            first = dec2alpha(mc[i])
            mc[i:i + degree + 1] ^= np.where(nonzero, EXP_TABLE[(g + first) % 255], 0)
    return mc[len(data):].tolist()
