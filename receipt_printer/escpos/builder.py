"""Receipt builder - turns a sale or service receipt into one ESC/POS buffer.

Each section returns a list of byte fragments; :func:`build` joins them once.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, List, Mapping, Union

from ..config import DEFAULT_CODEPAGE, DEFAULT_ENCODING_ERRORS, DEFAULT_TEXT_ENCODING, DEFAULT_WIDTH
from ..models.base import Alignment
from ..models.receipt import ReceiptData, SaleReceipt, ServiceReceipt
from ..models.serialization import ReceiptDataError, from_dict, validate_width
from . import commands as cmd
from .layout import amount_line, format_currency, item_line
from .qr import DEFAULT_SIZE, qr_block

logger = logging.getLogger(__name__)

DEFAULT_FOOTER = "Terima kasih atas kepercayaan Anda!"

LABEL_DATE = "TANGGAL TRANSAKSI"
LABEL_ID = "ID TRANSAKSI"
LABEL_CUSTOMER = "PELANGGAN"
LABEL_ITEMS = "BARANG"
LABEL_SERVICE = "LAYANAN SERVIS"
LABEL_TRACKING = "LACAK STATUS SERVIS"
LABEL_GRAND_TOTAL = "Grand Total"
LABEL_CASH = "Tunai"
LABEL_CHANGE = "Kembali"

Fragments = List[bytes]
TextEncoder = Callable[[str], bytes]


def _header(receipt: ReceiptData, width: int, codepage: int, t: TextEncoder) -> Fragments:
    """Store block, invoice date/id and customer, shared by both variants"""
    lf = cmd.line_feed()
    rule = cmd.horizontal_rule(width)
    parts: Fragments = [
        cmd.init(),
        cmd.codepage(codepage),
        cmd.align(Alignment.CENTER), cmd.bold(True), cmd.size(0, 1),
        t(receipt.store.name), lf,
        cmd.bold(False), cmd.size(0, 0), t(receipt.store.addr), lf,
    ]
    if receipt.store.phone:
        parts += [t(receipt.store.phone), lf]
    parts += [rule, lf]

    parts += [
        cmd.align(Alignment.LEFT), cmd.bold(True), t(LABEL_DATE), lf,
        cmd.bold(False), t(receipt.invoice.datetime), lf,
        cmd.bold(True), t(LABEL_ID), lf,
        cmd.bold(False), t(receipt.invoice.id), lf,
        rule, lf,
    ]

    parts += [
        cmd.bold(True), t(LABEL_CUSTOMER), lf,
        cmd.bold(False), t(receipt.customer.name), lf, lf,
    ]
    return parts


def _footer(receipt: ReceiptData, t: TextEncoder) -> Fragments:
    return [
        cmd.align(Alignment.CENTER), t(receipt.footer or DEFAULT_FOOTER), cmd.line_feed(),
        cmd.feed(3), cmd.cut(),
    ]


def _sale_body(receipt: SaleReceipt, width: int, t: TextEncoder) -> Fragments:
    lf = cmd.line_feed()
    rule = cmd.horizontal_rule(width)
    parts: Fragments = [cmd.bold(True), t(LABEL_ITEMS), lf, cmd.bold(False)]
    for item in receipt.items:
        parts += [t(item_line(item, width)), lf]
    parts += [lf, rule, lf]

    parts += [
        cmd.bold(True), cmd.size(0, 1),
        t(amount_line(LABEL_GRAND_TOTAL, receipt.totals.total, width)), lf,
        cmd.bold(False), cmd.size(0, 0), lf,
        rule, lf,
    ]

    payment = receipt.payment
    if payment is not None and payment.cash:
        parts += [t(f"{LABEL_CASH}: {format_currency(payment.cash)}"), lf]
        if payment.change:
            parts += [t(f"{LABEL_CHANGE}: {format_currency(payment.change)}"), lf]
        parts.append(lf)
    return parts


def _service_body(receipt: ServiceReceipt, width: int, t: TextEncoder) -> Fragments:
    lf = cmd.line_feed()
    rule = cmd.horizontal_rule(width)
    parts: Fragments = [
        cmd.bold(True), t(LABEL_SERVICE), lf,
        cmd.bold(False), t(receipt.service.name), lf,
    ]
    if receipt.service.description:
        parts += [t(receipt.service.description), lf]
    parts += [rule, lf]

    parts += [cmd.align(Alignment.CENTER), cmd.bold(True), t(LABEL_TRACKING), lf, cmd.bold(False)]
    if receipt.tracking is not None and receipt.tracking.url:
        qr = receipt.qr
        parts.append(
            qr_block(
                receipt.tracking.url,
                (qr.size if qr else None) or DEFAULT_SIZE,
                (qr.ec if qr else None) or "M",
            )
        )
    parts += [rule, lf]
    return parts


def _text_encoder(encoding: str, errors: str) -> TextEncoder:
    return partial(cmd.text, encoding=encoding, errors=errors)


def build_sale(
    receipt: SaleReceipt,
    width: int = DEFAULT_WIDTH,
    *,
    codepage: int = DEFAULT_CODEPAGE,
    encoding: str = DEFAULT_TEXT_ENCODING,
    errors: str = DEFAULT_ENCODING_ERRORS,
) -> bytes:
    """Sales receipt: items, grand total and optional cash/change lines"""
    validate_width(width)
    t = _text_encoder(encoding, errors)
    parts = _header(receipt, width, codepage, t) + _sale_body(receipt, width, t) + _footer(receipt, t)
    return b"".join(parts)


def build_service(
    receipt: ServiceReceipt,
    width: int = DEFAULT_WIDTH,
    *,
    codepage: int = DEFAULT_CODEPAGE,
    encoding: str = DEFAULT_TEXT_ENCODING,
    errors: str = DEFAULT_ENCODING_ERRORS,
) -> bytes:
    """Service receipt: service details and the tracking QR code"""
    validate_width(width)
    t = _text_encoder(encoding, errors)
    parts = _header(receipt, width, codepage, t) + _service_body(receipt, width, t) + _footer(receipt, t)
    return b"".join(parts)


def build(
    receipt: Union[ReceiptData, Mapping[str, Any]],
    width: int = DEFAULT_WIDTH,
    *,
    codepage: int = DEFAULT_CODEPAGE,
    encoding: str = DEFAULT_TEXT_ENCODING,
    errors: str = DEFAULT_ENCODING_ERRORS,
) -> bytes:
    """Build the complete ESC/POS buffer for ``receipt``.

    Parameters
    ----------
    receipt:
        A :class:`SaleReceipt` / :class:`ServiceReceipt`, or its wire mapping,
        which is converted with :func:`from_dict` first.
    width:
        Printable columns per line; 32 for 58 mm paper.
    encoding, errors:
        Code page codec and the policy for characters it cannot represent.

    Raises
    ------
    ReceiptDataError
        The input matches neither receipt shape.
    ReceiptEncodingError
        Text cannot be represented and ``errors`` is ``"strict"``.
    """
    if isinstance(receipt, Mapping):
        receipt = from_dict(receipt)

    options = dict(codepage=codepage, encoding=encoding, errors=errors)
    if isinstance(receipt, ServiceReceipt):
        data = build_service(receipt, width, **options)
    elif isinstance(receipt, SaleReceipt):
        data = build_sale(receipt, width, **options)
    else:
        raise ReceiptDataError(f"cannot build a receipt from {type(receipt).__name__}")

    logger.debug(f"Built {receipt.kind.value} receipt {receipt.invoice.id}: {len(data)} bytes")
    return data


__all__ = [
    "DEFAULT_FOOTER",
    "build",
    "build_sale",
    "build_service",
]
