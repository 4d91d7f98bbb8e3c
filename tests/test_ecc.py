import pytest

from qrgenerator import EccLevel, Version
from qrgenerator.ecc import add_ecc_and_interleave, interleave, split_blocks
from qrgenerator.galois import rs_remainder
from qrgenerator.tables import num_data_codewords, num_total_codewords


def test_split_short_blocks_first():
    # 5-Q: 62 data codewords in 4 blocks of 15, 15, 16, 16
    data = list(range(62))
    blocks = split_blocks(data, Version(5), EccLevel.QUARTILE)
    assert [len(b) for b in blocks] == [15, 15, 16, 16]
    assert sum(blocks, []) == data


def test_interleave_columns():
    assert interleave([[1, 2], [3, 4], [5, 6, 7]]) == [1, 3, 5, 2, 4, 6, 7]
    assert interleave([]) == []


def test_single_block():
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    result = add_ecc_and_interleave(data, Version(1), EccLevel.MEDIUM)
    assert result == data + [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_interleaved_layout_5q():
    data = list(range(62))
    result = add_ecc_and_interleave(data, Version(5), EccLevel.QUARTILE)
    assert len(result) == num_total_codewords(5) == 134
    assert result[:4] == [0, 15, 30, 46]
    # last data column only has the two long blocks
    assert result[60:62] == [45, 61]
    blocks = split_blocks(data, Version(5), EccLevel.QUARTILE)
    assert result[62:66] == [rs_remainder(b, 18)[0] for b in blocks]


@pytest.mark.parametrize("version", [1, 6, 13, 27, 40])
@pytest.mark.parametrize("ecl", list(EccLevel))
def test_total_length(version, ecl):
    data = [(i * 7) & 0xFF for i in range(num_data_codewords(version, ecl))]
    assert len(add_ecc_and_interleave(data, Version(version), ecl)) == num_total_codewords(version)


def test_wrong_data_length():
    with pytest.raises(ValueError):
        add_ecc_and_interleave([0] * 10, Version(1), EccLevel.LOW)
