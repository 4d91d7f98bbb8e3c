"""Exceptions raised while encoding a QR Code."""

from typing import Optional


class QRCodeError(Exception):
    """Base class for all encoder errors."""


class DataTooLong(QRCodeError):
    """The payload does not fit any version in the requested range."""

    def __init__(self, message: str, required_bits: Optional[int] = None, capacity_bits: Optional[int] = None):
        super().__init__(message)
        self.required_bits = required_bits
        self.capacity_bits = capacity_bits


class InvalidParameter(QRCodeError, ValueError):
    """Malformed argument (version range, mask index, codeword count...)."""


class InvalidCharacter(InvalidParameter):
    """A character cannot be represented in the requested segment mode."""
