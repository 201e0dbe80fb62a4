"""ESC/POS command primitives.

Every function returns a fresh ``bytes`` fragment and has no side effects;
receipts are assembled by concatenating fragments in order.
"""

from __future__ import annotations

from typing import Union

from ..config import DEFAULT_ENCODING_ERRORS, DEFAULT_TEXT_ENCODING
from ..models.base import Alignment

ESC = 0x1B
GS = 0x1D
LF = 0x0A


class ReceiptEncodingError(ValueError):
    """Text contains characters the selected code page cannot represent."""

    def __init__(self, text: str, char: str, encoding: str) -> None:
        self.text = text
        self.char = char
        self.encoding = encoding
        super().__init__(
            f"character {char!r} (U+{ord(char):04X}) in {text!r} "
            f"cannot be printed with code page {encoding}"
        )


def _byte(value: int, name: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte (0-255), got {value}")
    return value


def init() -> bytes:
    """ESC @ - reset printer state"""
    return bytes([ESC, 0x40])


def codepage(n: int) -> bytes:
    """ESC t n - select character code table"""
    return bytes([ESC, 0x74, _byte(n, "codepage")])


def align(n: Union[int, Alignment]) -> bytes:
    """ESC a n - 0 left, 1 center, 2 right"""
    return bytes([ESC, 0x61, _byte(int(n), "alignment")])


def bold(on: bool) -> bytes:
    """ESC E n - emphasis"""
    return bytes([ESC, 0x45, 1 if on else 0])


def size(w: int, h: int) -> bytes:
    """GS ! n - width/height multipliers, 0 is normal"""
    return bytes([GS, 0x21, _byte((w << 4) | h, "character size")])


def line_feed() -> bytes:
    return bytes([LF])


def feed(n: int) -> bytes:
    """ESC d n - print and feed n lines"""
    return bytes([ESC, 0x64, _byte(n, "feed")])


def cut() -> bytes:
    """GS V 0 - full cut"""
    return bytes([GS, 0x56, 0x00])


def text(
    value: str,
    encoding: str = DEFAULT_TEXT_ENCODING,
    errors: str = DEFAULT_ENCODING_ERRORS,
) -> bytes:
    """Encode ``value`` for the printer's 8-bit code page.

    With ``errors="strict"`` an unrepresentable character raises
    :class:`ReceiptEncodingError`; ``"replace"`` prints ``?`` instead.
    """
    try:
        return value.encode(encoding, errors=errors)
    except UnicodeEncodeError as exc:
        raise ReceiptEncodingError(value, value[exc.start], encoding) from exc


def horizontal_rule(width: int) -> bytes:
    """Dashed separator; '-' is the same byte in every code page"""
    return b"-" * width


__all__ = [
    "ESC",
    "GS",
    "LF",
    "ReceiptEncodingError",
    "init",
    "codepage",
    "align",
    "bold",
    "size",
    "line_feed",
    "feed",
    "cut",
    "text",
    "horizontal_rule",
]
