"""
ESC/POS receipt encoder for 58mm thermal printers driven through RawBT.

Quickstart::

    from receipt_printer import encode_receipt, from_dict

    receipt = from_dict({
        "store": {"name": "Toko Anda", "addr": "Jl. Merdeka 1"},
        "invoice": {"id": "ef5226cd", "datetime": "19 Oktober 2026 pukul 14.05"},
        "customer": {"name": "Yanto"},
        "items": [{"name": "Kaca tanpa kaca", "qty": 1, "price": 25000}],
        "totals": {"subtotal": 25000, "total": 25000},
    })
    job = encode_receipt(receipt)
    print(job.rawbt_url)
"""

from .config import Settings, get_settings, load_env
from .dispatch import PrintDispatcher, PrintInProgressError
from .escpos import (
    PrintJob,
    ReceiptEncodingError,
    build,
    encode_receipt,
    format_currency,
    intent_url,
    rawbt_url,
    to_base64,
)
from .models import (
    ReceiptData,
    ReceiptDataError,
    SaleReceipt,
    ServiceReceipt,
    from_dict,
    from_json,
    to_dict,
)

load_env()

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "PrintDispatcher",
    "PrintInProgressError",
    "PrintJob",
    "ReceiptData",
    "ReceiptDataError",
    "ReceiptEncodingError",
    "SaleReceipt",
    "ServiceReceipt",
    "build",
    "encode_receipt",
    "format_currency",
    "from_dict",
    "from_json",
    "get_settings",
    "intent_url",
    "load_env",
    "rawbt_url",
    "to_base64",
    "to_dict",
    "__version__",
]
