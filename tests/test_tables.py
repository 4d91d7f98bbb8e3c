import itertools

import pytest

from qrgenerator import EccLevel
from qrgenerator.tables import (
    alignment_pattern_positions, ecc_codewords_per_block, ecc_table, num_data_codewords, num_ecc_blocks,
    num_raw_data_modules, num_total_codewords,
)

ALL_COMBINATIONS = list(itertools.product(range(1, 41), EccLevel))


def test_table_shape():
    table = ecc_table()
    assert len(table) == 160
    assert list(table.columns) == ["ecc_codewords_per_block", "num_blocks"]


@pytest.mark.parametrize("version, ecl", ALL_COMBINATIONS)
def test_codeword_accounting(version, ecl):
    blocks = num_ecc_blocks(version, ecl)
    per_block = ecc_codewords_per_block(version, ecl)
    data = num_data_codewords(version, ecl)
    assert num_total_codewords(version) == data + per_block * blocks
    assert data // blocks >= 1
    assert 7 <= per_block <= 30


@pytest.mark.parametrize("version, ecl, expected", [
    (1, EccLevel.LOW, 19),
    (1, EccLevel.MEDIUM, 16),
    (1, EccLevel.QUARTILE, 13),
    (1, EccLevel.HIGH, 9),
    (5, EccLevel.QUARTILE, 62),
    (10, EccLevel.MEDIUM, 216),
    (40, EccLevel.LOW, 2956),
    (40, EccLevel.HIGH, 1276),
])
def test_data_codewords(version, ecl, expected):
    assert num_data_codewords(version, ecl) == expected


@pytest.mark.parametrize("version, raw, total", [
    (1, 208, 26), (2, 359, 44), (7, 1568, 196), (10, 2768, 346), (40, 29648, 3706),
])
def test_raw_modules(version, raw, total):
    assert num_raw_data_modules(version) == raw
    assert num_total_codewords(version) == total


def test_ecc_levels_decrease_capacity():
    for version in range(1, 41):
        capacities = [num_data_codewords(version, ecl) for ecl in EccLevel]
        assert capacities == sorted(capacities, reverse=True)


@pytest.mark.parametrize("version, positions", [
    (1, []),
    (2, [6, 18]),
    (7, [6, 22, 38]),
    (32, [6, 34, 60, 86, 112, 138]),
    (36, [6, 24, 50, 76, 102, 128, 154]),
    (40, [6, 30, 58, 86, 114, 142, 170]),
])
def test_alignment_positions(version, positions):
    assert alignment_pattern_positions(version) == positions
