"""Version selection, ECC boosting and data codeword assembly."""

import logging
from itertools import cycle
from typing import List, Sequence, Tuple

from .bitbuffer import BitBuffer
from .errors import DataTooLong, InvalidParameter
from .qrtypes import EccLevel, Version
from .segment import Segment, append_segment, get_total_bits
from .tables import num_data_codewords

logger = logging.getLogger(__name__)

PAD_BYTES = (0xEC, 0x11)


def data_capacity_bits(version: int, ecl: EccLevel) -> int:
    return num_data_codewords(version, ecl) * 8


def select_version(segs: Sequence[Segment], ecl: EccLevel,
                   min_version: Version, max_version: Version) -> Tuple[Version, int]:
    """Smallest version in [min_version, max_version] that holds the segments.

    Returns the version and the number of data bits the segments use there.
    """
    if min_version > max_version:
        raise InvalidParameter(f"min_version {min_version} is greater than max_version {max_version}")
    for v in range(min_version, max_version + 1):
        capacity = data_capacity_bits(v, ecl)
        used = get_total_bits(segs, v)
        if used is not None and used <= capacity:
            logger.debug("Selected version %d: %d of %d data bits used", v, used, capacity)
            return Version(v), used
    if used is None:
        raise DataTooLong("Segment too long: a character count does not fit its count field")
    raise DataTooLong(f"Data length = {used} bits, Max capacity = {capacity} bits",
                      required_bits=used, capacity_bits=capacity)


def boost_ecc_level(ecl: EccLevel, version: Version, data_used_bits: int) -> EccLevel:
    """Highest level above `ecl` that still fits at `version`; the version is kept."""
    for new_ecl in (EccLevel.MEDIUM, EccLevel.QUARTILE, EccLevel.HIGH):
        if new_ecl > ecl and data_used_bits <= data_capacity_bits(version, new_ecl):
            ecl = new_ecl
    return ecl


def assemble_codewords(segs: Sequence[Segment], version: Version, ecl: EccLevel) -> List[int]:
    """Serialize segments, then add terminator, bit padding and pad bytes up to capacity."""
    bb = BitBuffer()
    for seg in segs:
        append_segment(bb, seg, version)

    capacity = data_capacity_bits(version, ecl)
    assert len(bb) <= capacity

    # Terminator and padding to a byte boundary
    bb.append_bits(0, min(4, capacity - len(bb)))
    bb.append_bits(0, -len(bb) % 8)
    assert len(bb) % 8 == 0

    for pad in cycle(PAD_BYTES):
        if len(bb) >= capacity:
            break
        bb.append_bits(pad, 8)
    assert len(bb) == capacity
    return bb.to_bytes()
