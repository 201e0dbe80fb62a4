"""Demo receipts and the ``#data=`` preview fragment.

A preview page receives a receipt as ``#data=<base64 JSON>``; the helpers here
produce and read that fragment.
"""

from __future__ import annotations

import base64
import binascii
import json
from datetime import datetime
from typing import Optional
from urllib.parse import parse_qsl

import json5

from .models.receipt import (
    CustomerInfo,
    InvoiceInfo,
    QRConfig,
    ReceiptData,
    SaleItem,
    SaleReceipt,
    ServiceInfo,
    ServiceReceipt,
    StoreInfo,
    Totals,
    Tracking,
)
from .models.serialization import ReceiptDataError, from_dict, to_dict

MONTHS = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)

DEMO_STORE = StoreInfo(name="Toko Anda", addr="Alamat Toko Anda")
DEMO_FOOTER = "Terima kasih atas kepercayaan Anda!"
DEMO_TRACKING_BASE = "http://localhost:3000/service-status"


def long_datetime(now: datetime) -> str:
    """``19 Oktober 2026 pukul 14.05``"""
    return f"{now.day:02d} {MONTHS[now.month - 1]} {now.year} pukul {now:%H.%M}"


def service_demo(now: Optional[datetime] = None) -> ServiceReceipt:
    """Sample service receipt with a tracking QR code"""
    now = now or datetime.now()
    short_id = "dd1f681a"
    return ServiceReceipt(
        store=DEMO_STORE,
        invoice=InvoiceInfo(id=short_id, datetime=long_datetime(now)),
        customer=CustomerInfo(name="Yanto"),
        service=ServiceInfo(
            name="Ganti layar (Iphone Mahal)",
            description="Layarnya pengen nambah",
            cost=200000,
        ),
        tracking=Tracking(url=f"{DEMO_TRACKING_BASE}/{short_id}-4591-41ef-a117-94896cf1da53"),
        qr=QRConfig(size=5, ec="M"),
        footer=DEMO_FOOTER,
    )


def sale_demo(now: Optional[datetime] = None) -> SaleReceipt:
    """Sample sales receipt with a single item"""
    now = now or datetime.now()
    return SaleReceipt(
        store=DEMO_STORE,
        invoice=InvoiceInfo(id="ef5226cd", datetime=long_datetime(now)),
        customer=CustomerInfo(name="Yanto"),
        items=(SaleItem(name="Kaca tanpa kaca", qty=1, price=25000),),
        totals=Totals(subtotal=25000, total=25000),
        footer=DEMO_FOOTER,
    )


def encode_fragment(receipt: ReceiptData) -> str:
    """``#data=<base64 JSON>`` for ``receipt``"""
    payload = json.dumps(to_dict(receipt), ensure_ascii=False).encode("utf-8")
    return "#data=" + base64.b64encode(payload).decode("ascii")


def decode_fragment(fragment: str) -> ReceiptData:
    """Read a receipt back from a ``#data=`` fragment.

    The JSON is parsed with json5 so hand-written payloads (trailing commas,
    single quotes) are accepted too.

    Raises:
        ReceiptDataError: no ``data`` parameter, bad base64/JSON, or an
            invalid receipt
    """
    params = dict(parse_qsl(fragment.lstrip("#")))
    encoded = params.get("data")
    if not encoded:
        raise ReceiptDataError("fragment has no 'data' parameter")
    # query parsing turns '+' into ' '
    encoded = encoded.replace(" ", "+")
    try:
        raw = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ReceiptDataError(f"fragment is not base64 encoded JSON: {exc}") from exc
    try:
        data = json5.loads(raw)
    except ValueError as exc:
        raise ReceiptDataError(f"fragment JSON is invalid: {exc}") from exc
    return from_dict(data)


__all__ = [
    "MONTHS",
    "long_datetime",
    "sale_demo",
    "service_demo",
    "encode_fragment",
    "decode_fragment",
]
