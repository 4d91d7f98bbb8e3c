"""QR Code symbols and the public encoding entry points."""

import logging
from typing import Optional, Sequence

import numpy as np

from .ecc import add_ecc_and_interleave
from .encoder import assemble_codewords, boost_ecc_level, select_version
from .errors import InvalidParameter
from .masking import apply_mask, choose_mask, penalty_score
from .matrix import ModuleMatrix
from .qrtypes import MAX_VERSION, MIN_VERSION, EccLevel, Mask, Version
from .segment import Segment, make_bytes, make_segments
from .tables import num_data_codewords

logger = logging.getLogger(__name__)


class QRCode:
    """An immutable, fully built QR Code symbol.

    Modules are indexed (row, col) from the top left corner; True is dark.
    """

    def __init__(self, version: Version, ecl: EccLevel, mask: Mask, modules: np.ndarray):
        self._version = Version(version)
        self._ecl = EccLevel(ecl)
        self._mask = Mask(mask)
        modules = np.array(modules, dtype=np.bool_)
        if modules.shape != (self._version.size, self._version.size):
            raise InvalidParameter(f"Module grid shape {modules.shape} does not match version {int(self._version)}")
        modules.setflags(write=False)
        self._modules = modules

    @property
    def version(self) -> Version:
        return self._version

    @property
    def size(self) -> int:
        return self._version.size

    @property
    def error_correction_level(self) -> EccLevel:
        return self._ecl

    @property
    def mask(self) -> Mask:
        return self._mask

    @property
    def modules(self) -> np.ndarray:
        return self._modules.copy()

    @property
    def penalty(self) -> int:
        return penalty_score(self._modules)

    def get_module(self, row: int, col: int) -> bool:
        """Colour of the module at (row, col); anything outside the symbol is light."""
        return 0 <= row < self.size and 0 <= col < self.size and bool(self._modules[row, col])

    def __repr__(self):
        return (f"QRCode(version={int(self._version)}, ecl={self._ecl.name}, "
                f"mask={int(self._mask)}, size={self.size})")


def encode_text(text: str, ecl: EccLevel) -> QRCode:
    """Encode a Unicode string, splitting it into numeric, alphanumeric and byte runs."""
    return encode_segments(make_segments(text), ecl)


def encode_binary(data: bytes, ecl: EccLevel) -> QRCode:
    """Encode raw bytes as a single byte-mode segment (at most 2953 bytes at LOW)."""
    return encode_segments([make_bytes(data)], ecl)


def encode_segments(segs: Sequence[Segment], ecl: EccLevel) -> QRCode:
    return encode_advanced(segs, ecl)


def encode_advanced(segs: Sequence[Segment], ecl: EccLevel,
                    min_version: int = MIN_VERSION, max_version: int = MAX_VERSION,
                    mask: Optional[int] = None, boost_ecl: bool = True) -> QRCode:
    """Encode segments with full control over the version range, mask and ECC boosting.

    The smallest version in [min_version, max_version] that fits is used. With
    boost_ecl the ECC level is raised as far as that version allows.
    mask forces a mask pattern in [0, 7]; None picks the lowest penalty.

    Raises DataTooLong if no version in range fits, InvalidParameter for a bad
    range or mask.
    """
    ecl = EccLevel(ecl)
    min_version, max_version = Version(min_version), Version(max_version)
    if mask is not None:
        mask = Mask(mask)

    version, data_used_bits = select_version(segs, ecl, min_version, max_version)
    if boost_ecl:
        boosted = boost_ecc_level(ecl, version, data_used_bits)
        if boosted != ecl:
            logger.debug("Boosted ECC level from %s to %s", ecl.name, boosted.name)
        ecl = boosted

    data_codewords = assemble_codewords(segs, version, ecl)
    return encode_codewords(version, ecl, data_codewords, mask)


def encode_codewords(version: int, ecl: EccLevel, data_codewords: Sequence[int],
                     mask: Optional[int] = None) -> QRCode:
    """Build a symbol from already padded data codewords."""
    version, ecl = Version(version), EccLevel(ecl)
    expected = num_data_codewords(version, ecl)
    if len(data_codewords) != expected:
        raise InvalidParameter(f"Version {int(version)}-{ecl.letter} needs {expected} data codewords, "
                               f"got {len(data_codewords)}")
    if any(not 0 <= b <= 0xFF for b in data_codewords):
        raise InvalidParameter("Data codewords must be bytes")

    matrix = ModuleMatrix(version)
    matrix.draw_function_patterns()
    matrix.draw_codewords(add_ecc_and_interleave(data_codewords, version, ecl))

    if mask is None:
        mask = choose_mask(matrix, ecl)
    mask = Mask(mask)
    apply_mask(matrix, mask)
    matrix.draw_format_bits(ecl, mask)
    logger.debug("Encoded version %d-%s with mask %d", version, ecl.letter, mask)
    return QRCode(version, ecl, mask, matrix.modules)
