"""Split data codewords into blocks, add Reed-Solomon ECC and interleave."""

import logging
from typing import List, Sequence

from .galois import rs_remainder
from .qrtypes import EccLevel, Version
from .tables import ecc_codewords_per_block, num_data_codewords, num_ecc_blocks, num_total_codewords

logger = logging.getLogger(__name__)


def split_blocks(data: Sequence[int], version: Version, ecl: EccLevel) -> List[List[int]]:
    """Data codewords per block: short blocks first, long blocks one byte longer."""
    num_blocks = num_ecc_blocks(version, ecl)
    short_len = len(data) // num_blocks
    num_short = num_blocks - len(data) % num_blocks
    blocks = []
    k = 0
    for i in range(num_blocks):
        length = short_len if i < num_short else short_len + 1
        blocks.append(list(data[k:k + length]))
        k += length
    return blocks


def interleave(blocks: Sequence[Sequence[int]]) -> List[int]:
    """Read the blocks column by column; shorter blocks drop out of the last column."""
    longest = max((len(b) for b in blocks), default=0)
    return [b[i] for i in range(longest) for b in blocks if i < len(b)]


def add_ecc_and_interleave(data: Sequence[int], version: Version, ecl: EccLevel) -> List[int]:
    if len(data) != num_data_codewords(version, ecl):
        raise ValueError(f"Expected {num_data_codewords(version, ecl)} data codewords, got {len(data)}")

    ecc_len = ecc_codewords_per_block(version, ecl)
    data_blocks = split_blocks(data, version, ecl)
    ecc_blocks = [rs_remainder(block, ecc_len) for block in data_blocks]
    logger.debug("Version %d-%s: %d blocks of %d/%d data codewords, %d ECC each",
                 version, ecl.letter, len(data_blocks), len(data_blocks[0]),
                 len(data_blocks[-1]), ecc_len)

    result = interleave(data_blocks) + interleave(ecc_blocks)
    assert len(result) == num_total_codewords(version)
    return result
