"""Data models for the receipt encoder

Layout:
- base.py: enums (receipt kind, alignment, QR error correction)
- receipt.py: printable receipt variants and their parts
- transaction.py: persisted transactions consumed by the mappers
- serialization.py: wire JSON <-> receipt, validation
"""

from .base import Alignment, ErrorCorrection, ReceiptKind
from .receipt import (
    CustomerInfo,
    InvoiceInfo,
    Payment,
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
from .serialization import ReceiptDataError, from_dict, from_json, to_dict, to_json
from .transaction import SaleTransaction, SaleTransactionItem, ServiceTransaction, StoreSettings

__all__ = [
    # enums
    "Alignment",
    "ErrorCorrection",
    "ReceiptKind",
    # receipt
    "CustomerInfo",
    "InvoiceInfo",
    "Payment",
    "QRConfig",
    "ReceiptData",
    "SaleItem",
    "SaleReceipt",
    "ServiceInfo",
    "ServiceReceipt",
    "StoreInfo",
    "Totals",
    "Tracking",
    # transactions
    "SaleTransaction",
    "SaleTransactionItem",
    "ServiceTransaction",
    "StoreSettings",
    # serialization
    "ReceiptDataError",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
