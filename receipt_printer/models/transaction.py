"""Transaction model - persisted sale/service records fed to the receipt mappers"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class StoreSettings:
    """Store identity configured by the shop owner"""
    store_name: Optional[str] = None
    store_address: Optional[str] = None
    store_phone: Optional[str] = None


@dataclass
class SaleTransactionItem:
    """Line of a sale transaction"""
    name: str = ""
    quantity: int = 1
    price_per_item: Optional[float] = None
    total: float = 0.0  # quantity * price at the time of sale


@dataclass
class SaleTransaction:
    """Sale transaction record"""

    id: str = ""
    date: str = ""  # ISO string
    items: List[SaleTransactionItem] = field(default_factory=list)
    customer_name: Optional[str] = None
    grand_total: float = 0.0
    discount_amount: Optional[float] = None
    payment_method: Optional[str] = None  # cash|transfer|qris
    cash_tendered: Optional[float] = None
    change: Optional[float] = None


@dataclass
class ServiceTransaction:
    """Service (repair) transaction record"""

    id: str = ""
    date: str = ""  # ISO string
    service_name: str = ""
    device: Optional[str] = None
    issue_description: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    service_fee: float = 0.0
    status: str = "PENDING_CONFIRMATION"


__all__ = [
    "StoreSettings",
    "SaleTransactionItem",
    "SaleTransaction",
    "ServiceTransaction",
]
