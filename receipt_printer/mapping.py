"""Transaction -> receipt mappers.

Turn persisted sale/service transactions into the printable receipt model,
filling store details from the shop settings.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from .models.receipt import (
    CustomerInfo,
    InvoiceInfo,
    Payment,
    QRConfig,
    SaleItem,
    SaleReceipt,
    ServiceInfo,
    ServiceReceipt,
    StoreInfo,
    Totals,
    Tracking,
)
from .models.transaction import SaleTransaction, SaleTransactionItem, ServiceTransaction, StoreSettings

logger = logging.getLogger(__name__)

DEFAULT_STORE_NAME = "Toko Anda"
DEFAULT_STORE_ADDRESS = "Alamat Toko Anda"
DEFAULT_STORE_PHONE = "Nomor Telepon Toko Anda"
DEFAULT_CUSTOMER = "Pelanggan"
SALE_FOOTER = "Terima kasih atas kepercayaan Anda!"
SERVICE_FOOTER = "Lacak status servis via QR Code di atas."
SERVICE_QR = QRConfig(size=6, ec="M")
INVOICE_ID_LENGTH = 8


def _parse_iso(value: str) -> Optional[datetime]:
    cleaned = value.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        return None
    return parsed.astimezone() if parsed.tzinfo else parsed


def format_display_datetime(value: Union[str, datetime]) -> str:
    """Indonesian locale date/time, e.g. ``19/10/2026, 14.05.09``.

    Strings that are not ISO timestamps are returned unchanged.
    """
    dt = value if isinstance(value, datetime) else _parse_iso(value)
    if dt is None:
        logger.warning(f"Unparseable transaction date, printing as-is: {value!r}")
        return str(value)
    return f"{dt.day}/{dt.month}/{dt.year}, {dt:%H.%M.%S}"


def store_info(settings: Optional[StoreSettings]) -> StoreInfo:
    settings = settings or StoreSettings()
    return StoreInfo(
        name=settings.store_name or DEFAULT_STORE_NAME,
        addr=settings.store_address or DEFAULT_STORE_ADDRESS,
        phone=settings.store_phone or DEFAULT_STORE_PHONE,
    )


def _invoice(tx_id: str, date: str) -> InvoiceInfo:
    return InvoiceInfo(id=tx_id[:INVOICE_ID_LENGTH], datetime=format_display_datetime(date))


def _unit_price(item: SaleTransactionItem) -> float:
    if item.price_per_item:
        return item.price_per_item
    return item.total / item.quantity if item.quantity else 0.0


def map_sale_to_receipt(tx: SaleTransaction, settings: Optional[StoreSettings] = None) -> SaleReceipt:
    """Build a sales receipt from a sale transaction"""
    discount = tx.discount_amount or 0
    return SaleReceipt(
        store=store_info(settings),
        invoice=_invoice(tx.id, tx.date),
        customer=CustomerInfo(name=tx.customer_name or DEFAULT_CUSTOMER),
        items=tuple(
            SaleItem(name=item.name, qty=item.quantity, price=_unit_price(item))
            for item in tx.items
        ),
        totals=Totals(
            subtotal=tx.grand_total + discount,
            total=tx.grand_total,
            discount=tx.discount_amount,
        ),
        payment=Payment(cash=tx.cash_tendered, change=tx.change),
        footer=SALE_FOOTER,
    )


def tracking_url(base_url: str, tx_id: str) -> str:
    return f"{base_url.rstrip('/')}/service-status/{tx_id}"


def map_service_to_receipt(
    tx: ServiceTransaction,
    settings: Optional[StoreSettings] = None,
    base_url: Optional[str] = None,
) -> ServiceReceipt:
    """Build a service receipt; the QR code links to the public status page.

    Without ``base_url`` there is nowhere to link, so no tracking is attached.
    """
    name = f"{tx.service_name}  ( {tx.device} )" if tx.device else tx.service_name
    return ServiceReceipt(
        store=store_info(settings),
        invoice=_invoice(tx.id, tx.date),
        customer=CustomerInfo(name=tx.customer_name or DEFAULT_CUSTOMER),
        service=ServiceInfo(name=name, cost=tx.service_fee, description=tx.issue_description),
        tracking=Tracking(url=tracking_url(base_url, tx.id)) if base_url else None,
        qr=SERVICE_QR,
        footer=SERVICE_FOOTER,
    )


__all__ = [
    "format_display_datetime",
    "store_info",
    "map_sale_to_receipt",
    "map_service_to_receipt",
    "tracking_url",
]
