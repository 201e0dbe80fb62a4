"""ESC/POS encoding for 58mm thermal receipt printers."""

from __future__ import annotations

from . import commands
from .builder import DEFAULT_FOOTER, build, build_sale, build_service
from .commands import ReceiptEncodingError
from .layout import format_currency, item_line, pad_line, padding
from .qr import qr_block
from .transport import (
    PrintJob,
    encode_receipt,
    from_base64,
    intent_url,
    rawbt_url,
    to_base64,
)

__all__ = [
    "commands",
    "DEFAULT_FOOTER",
    "PrintJob",
    "ReceiptEncodingError",
    "build",
    "build_sale",
    "build_service",
    "encode_receipt",
    "format_currency",
    "from_base64",
    "intent_url",
    "item_line",
    "pad_line",
    "padding",
    "qr_block",
    "rawbt_url",
    "to_base64",
]
