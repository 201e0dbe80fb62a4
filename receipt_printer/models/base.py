"""Base types - enums shared by the receipt model and the encoder."""

from __future__ import annotations

from enum import Enum, IntEnum


class ReceiptKind(str, Enum):
    """Receipt variants understood by the builder"""
    SALE = "sale"
    SERVICE = "service"


class Alignment(IntEnum):
    """ESC a n justification values"""
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class ErrorCorrection(str, Enum):
    """QR error-correction levels; ``code`` is the byte sent in GS ( k fn 69"""
    L = "L"
    M = "M"
    Q = "Q"
    H = "H"

    @property
    def code(self) -> int:
        return _EC_CODES[self]

    @classmethod
    def parse(cls, value: object) -> "ErrorCorrection":
        """Resolve ``value`` to a level, falling back to M when unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.M


_EC_CODES = {
    ErrorCorrection.L: 48,
    ErrorCorrection.M: 49,
    ErrorCorrection.Q: 50,
    ErrorCorrection.H: 51,
}


__all__ = [
    "ReceiptKind",
    "Alignment",
    "ErrorCorrection",
]
