"""Receipt model - the printable description of a sale or service transaction"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .base import ReceiptKind


@dataclass(frozen=True)
class StoreInfo:
    """Store header, printed verbatim"""
    name: str
    addr: str
    phone: Optional[str] = None


@dataclass(frozen=True)
class InvoiceInfo:
    """Invoice reference"""
    id: str  # short display id, not necessarily the full transaction id
    datetime: str  # pre-formatted, never parsed


@dataclass(frozen=True)
class CustomerInfo:
    name: str


@dataclass(frozen=True)
class SaleItem:
    """One sold article; the line amount is qty * price"""
    name: str
    qty: int
    price: float

    @property
    def amount(self) -> float:
        return self.qty * self.price


@dataclass(frozen=True)
class ServiceInfo:
    """Repair/service job"""
    name: str
    cost: float
    description: Optional[str] = None


@dataclass(frozen=True)
class Totals:
    subtotal: float
    total: float
    discount: Optional[float] = None
    tax: Optional[float] = None


@dataclass(frozen=True)
class Payment:
    """Cash payment details"""
    cash: Optional[float] = None
    change: Optional[float] = None


@dataclass(frozen=True)
class Tracking:
    url: str


@dataclass(frozen=True)
class QRConfig:
    """QR symbol options; clamping and defaulting happen at encode time"""
    size: Optional[int] = None
    ec: Optional[str] = None


@dataclass(frozen=True)
class SaleReceipt:
    """Sales receipt (struk penjualan)"""

    store: StoreInfo
    invoice: InvoiceInfo
    customer: CustomerInfo
    items: Tuple[SaleItem, ...]
    totals: Totals
    payment: Optional[Payment] = None
    footer: Optional[str] = None

    @property
    def kind(self) -> ReceiptKind:
        return ReceiptKind.SALE


@dataclass(frozen=True)
class ServiceReceipt:
    """Service receipt (struk servis) with an optional tracking QR code"""

    store: StoreInfo
    invoice: InvoiceInfo
    customer: CustomerInfo
    service: ServiceInfo
    tracking: Optional[Tracking] = None
    qr: Optional[QRConfig] = None
    footer: Optional[str] = None

    @property
    def kind(self) -> ReceiptKind:
        return ReceiptKind.SERVICE


ReceiptData = Union[SaleReceipt, ServiceReceipt]


__all__ = [
    "StoreInfo",
    "InvoiceInfo",
    "CustomerInfo",
    "SaleItem",
    "ServiceInfo",
    "Totals",
    "Payment",
    "Tracking",
    "QRConfig",
    "SaleReceipt",
    "ServiceReceipt",
    "ReceiptData",
]
