"""Standard lookup tables and the capacity arithmetic derived from them."""

from functools import lru_cache
from importlib import resources
from typing import List

import pandas as pd

from .qrtypes import EccLevel, Version


@lru_cache(maxsize=None)
def ecc_table() -> pd.DataFrame:
    """ECC codewords per block and block count, indexed by (version, ecl letter)."""
    with resources.files(__package__).joinpath("data").joinpath("ecc_blocks.csv").open("r") as f:
        table = pd.read_csv(f, sep=";")
    return table.set_index(["version", "ecl"]).sort_index()


def _lookup(version: int, ecl: EccLevel, column: str) -> int:
    return int(ecc_table().loc[(int(version), EccLevel(ecl).letter), column])


def ecc_codewords_per_block(version: int, ecl: EccLevel) -> int:
    return _lookup(version, ecl, "ecc_codewords_per_block")


def num_ecc_blocks(version: int, ecl: EccLevel) -> int:
    return _lookup(version, ecl, "num_blocks")


def num_raw_data_modules(version: int) -> int:
    """Modules left for data and ECC bits once every function pattern is drawn."""
    ver = Version(version)
    result = (16 * ver + 128) * ver + 64
    if ver >= 2:
        numalign = ver // 7 + 2
        result -= (25 * numalign - 10) * numalign - 55
        if ver >= 7:
            result -= 36
    return result


def num_total_codewords(version: int) -> int:
    # remainder bits (0, 3, 4 or 7) are dropped
    return num_raw_data_modules(version) // 8


def num_data_codewords(version: int, ecl: EccLevel) -> int:
    return num_total_codewords(version) - ecc_codewords_per_block(version, ecl) * num_ecc_blocks(version, ecl)


def alignment_pattern_positions(version: int) -> List[int]:
    """Ascending row/column coordinates of the alignment pattern centres."""
    ver = Version(version)
    if ver == 1:
        return []
    numalign = ver // 7 + 2
    step = 26 if ver == 32 else (ver * 4 + numalign * 2 + 1) // (numalign * 2 - 2) * 2
    positions = [ver.size - 7 - i * step for i in range(numalign - 1)] + [6]
    return sorted(positions)
