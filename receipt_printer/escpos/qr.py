"""QR symbol commands (GS ( k, cn = 49).

The printer renders the symbol itself: the host selects model 2, sets the
module size and error-correction level, stores the data, then triggers the
print of the stored symbol.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ..models.base import ErrorCorrection
from .commands import GS, line_feed

MIN_SIZE = 3
MAX_SIZE = 10
DEFAULT_SIZE = 5

# GS ( k pL pH cn fn
_PREFIX = bytes([GS, 0x28, 0x6B])
_QR = 0x31
# store-data header after pL pH: cn fn m
_STORE_HEADER = bytes([_QR, 0x50, 0x30])


def clamp_size(size: Optional[int]) -> int:
    """Module size clamped to 3..10; ``None`` means the default."""
    if size is None:
        return DEFAULT_SIZE
    return min(MAX_SIZE, max(MIN_SIZE, int(size)))


def error_correction_code(ec: Union[str, ErrorCorrection, None]) -> int:
    """48/49/50/51 for L/M/Q/H; anything unrecognised is M"""
    return ErrorCorrection.parse(ec).code


def length_bytes(payload_length: int) -> Tuple[int, int]:
    """(pL, pH) for a store command carrying ``payload_length`` data bytes."""
    length = payload_length + len(_STORE_HEADER)
    if length > 0xFFFF:
        raise ValueError(f"QR payload too large: {payload_length} bytes")
    return length & 0xFF, (length >> 8) & 0xFF


def select_model() -> bytes:
    """fn 65: model 2"""
    return _PREFIX + bytes([0x04, 0x00, _QR, 0x41, 0x32, 0x00])


def select_size(size: Optional[int]) -> bytes:
    """fn 67: module size"""
    return _PREFIX + bytes([0x04, 0x00, _QR, 0x43, clamp_size(size), 0x00])


def select_error_correction(ec: Union[str, ErrorCorrection, None]) -> bytes:
    """fn 69: error-correction level"""
    return _PREFIX + bytes([0x04, 0x00, _QR, 0x45, error_correction_code(ec), 0x00])


def store_data(data: str) -> bytes:
    """fn 80: store ``data`` (UTF-8) in the symbol storage area"""
    payload = data.encode("utf-8")
    p_low, p_high = length_bytes(len(payload))
    return _PREFIX + bytes([p_low, p_high]) + _STORE_HEADER + payload


def print_symbol() -> bytes:
    """fn 81: print the stored symbol"""
    return _PREFIX + bytes([0x03, 0x00, _QR, 0x51, 0x30])


def qr_block(
    data: str,
    size: Optional[int] = DEFAULT_SIZE,
    ec: Union[str, ErrorCorrection, None] = ErrorCorrection.M,
) -> bytes:
    """Complete QR sequence for ``data``, bracketed by line feeds."""
    return b"".join(
        [
            line_feed(),
            select_model(),
            select_size(size),
            select_error_correction(ec),
            store_data(data),
            print_symbol(),
            line_feed(),
        ]
    )


__all__ = [
    "MIN_SIZE",
    "MAX_SIZE",
    "DEFAULT_SIZE",
    "clamp_size",
    "error_correction_code",
    "length_bytes",
    "select_model",
    "select_size",
    "select_error_correction",
    "store_data",
    "print_symbol",
    "qr_block",
]
