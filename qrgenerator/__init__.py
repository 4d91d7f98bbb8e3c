"""
qrgenerator
===========

QR Code encoder (ISO/IEC 18004, model 2, versions 1-40): text or bytes in,
a module matrix out. Rendering and decoding are left to the caller.
"""

from .errors import DataTooLong, InvalidCharacter, InvalidParameter, QRCodeError
from .qrcode import QRCode, encode_advanced, encode_binary, encode_codewords, encode_segments, encode_text
from .qrtypes import MAX_VERSION, MIN_VERSION, EccLevel, Mask, Version
from .segment import (
    Mode, Segment,
    make_alphanumeric, make_bytes, make_eci, make_kanji, make_numeric, make_segments,
    is_alphanumeric, is_numeric,
)

__all__ = [
    "QRCode", "encode_text", "encode_binary", "encode_segments", "encode_advanced", "encode_codewords",
    "EccLevel", "Version", "Mask", "MIN_VERSION", "MAX_VERSION",
    "Mode", "Segment", "make_alphanumeric", "make_bytes", "make_eci", "make_kanji", "make_numeric",
    "make_segments", "is_alphanumeric", "is_numeric",
    "QRCodeError", "DataTooLong", "InvalidParameter", "InvalidCharacter",
]

__version__ = "1.0.0"
