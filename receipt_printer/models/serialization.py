"""Serialization - wire JSON to receipt model, with validation"""

from __future__ import annotations

import json
import math
import re
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Mapping, Optional, Union

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


class ReceiptDataError(ValueError):
    """Raised when a receipt document is malformed.

    ``field`` is the dotted path of the offending value (``items[0].qty``),
    or ``None`` when the document as a whole is unusable.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}" if field else message)


# ==================== field helpers ====================

def _path(parent: str, key: Union[str, int]) -> str:
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}" if parent else key


def _mapping(value: Any, path: str) -> Mapping[str, Any]:
    if value is None:
        raise ReceiptDataError("is required", path)
    if not isinstance(value, Mapping):
        raise ReceiptDataError(f"expected an object, got {type(value).__name__}", path)
    return value


def _optional_mapping(data: Mapping[str, Any], key: str, parent: str = "") -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    if value is None:
        return None
    return _mapping(value, _path(parent, key))


def _string(data: Mapping[str, Any], key: str, parent: str) -> str:
    path = _path(parent, key)
    value = data.get(key)
    if value is None:
        raise ReceiptDataError("is required", path)
    if not isinstance(value, str):
        raise ReceiptDataError(f"expected a string, got {type(value).__name__}", path)
    return value


def _optional_string(data: Mapping[str, Any], key: str, parent: str = "") -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ReceiptDataError(f"expected a string, got {type(value).__name__}", _path(parent, key))
    return value


# id-ID amounts: "." groups thousands, "," is the decimal mark
_ID_GROUPED = re.compile(r"-?\d{1,3}(?:\.\d{3})+(?:,\d+)?")
_ID_DECIMAL = re.compile(r"-?\d+,\d+")


def _finite(value: float, raw: Any, path: str) -> float:
    if not math.isfinite(value):
        raise ReceiptDataError(f"must be a finite number, got {raw!r}", path)
    return value


def _parse_amount(value: str, path: str) -> float:
    """Numeric string, optionally written as rupiah (``"Rp 25.000"``).

    ``"25.000"`` is twenty-five thousand, matching how amounts are printed.
    A rupiah string whose dots are not thousands groups is ambiguous and
    rejected.
    """
    cleaned = value.replace("Rp", "").replace(" ", "").strip()
    if _ID_GROUPED.fullmatch(cleaned) or _ID_DECIMAL.fullmatch(cleaned):
        cleaned = cleaned.replace(".", "").replace(",", ".")
    elif "Rp" in value and "." in cleaned:
        raise ReceiptDataError(f"ambiguous rupiah amount: {value!r}", path)
    try:
        parsed = float(cleaned)
    except ValueError:
        raise ReceiptDataError(f"not a number: {value!r}", path) from None
    _finite(parsed, value, path)
    return int(parsed) if parsed.is_integer() else parsed


def _to_number(value: Any, path: str) -> float:
    if isinstance(value, bool):
        raise ReceiptDataError("expected a number, got bool", path)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _finite(value, value, path)
    if isinstance(value, str):
        return _parse_amount(value, path)
    raise ReceiptDataError(f"expected a number, got {type(value).__name__}", path)


def _number(data: Mapping[str, Any], key: str, parent: str) -> float:
    path = _path(parent, key)
    value = data.get(key)
    if value is None:
        raise ReceiptDataError("is required", path)
    return _to_number(value, path)


def _optional_number(data: Mapping[str, Any], key: str, parent: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    return _to_number(value, _path(parent, key))


def _quantity(data: Mapping[str, Any], parent: str) -> int:
    path = _path(parent, "qty")
    value = _number(data, "qty", parent)
    if isinstance(value, float):
        if not value.is_integer():
            raise ReceiptDataError(f"must be a whole number: {value}", path)
        value = int(value)
    if value <= 0:
        raise ReceiptDataError(f"must be positive: {value}", path)
    return value


# ==================== wire -> model ====================

def from_dict_store(data: Mapping[str, Any]) -> StoreInfo:
    return StoreInfo(
        name=_string(data, "name", "store"),
        addr=_string(data, "addr", "store"),
        phone=_optional_string(data, "phone", "store"),
    )


def from_dict_invoice(data: Mapping[str, Any]) -> InvoiceInfo:
    return InvoiceInfo(
        id=_string(data, "id", "invoice"),
        datetime=_string(data, "datetime", "invoice"),
    )


def from_dict_sale_item(data: Mapping[str, Any], parent: str) -> SaleItem:
    """Create a SaleItem, rejecting non-positive quantities and negative prices"""
    price = _number(data, "price", parent)
    if price < 0:
        raise ReceiptDataError(f"cannot be negative: {price}", _path(parent, "price"))
    return SaleItem(
        name=_string(data, "name", parent),
        qty=_quantity(data, parent),
        price=price,
    )


def from_dict_totals(data: Mapping[str, Any]) -> Totals:
    return Totals(
        subtotal=_number(data, "subtotal", "totals"),
        total=_number(data, "total", "totals"),
        discount=_optional_number(data, "discount", "totals"),
        tax=_optional_number(data, "tax", "totals"),
    )


def from_dict_payment(data: Mapping[str, Any]) -> Payment:
    return Payment(
        cash=_optional_number(data, "cash", "payment"),
        change=_optional_number(data, "change", "payment"),
    )


def from_dict_service(data: Mapping[str, Any]) -> ServiceInfo:
    return ServiceInfo(
        name=_string(data, "name", "service"),
        cost=_number(data, "cost", "service"),
        description=_optional_string(data, "description", "service"),
    )


def from_dict_qr(data: Mapping[str, Any]) -> QRConfig:
    size = _optional_number(data, "size", "qr")
    return QRConfig(
        size=int(size) if size is not None else None,
        ec=_optional_string(data, "ec", "qr"),
    )


def _common(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "store": from_dict_store(_mapping(data.get("store"), "store")),
        "invoice": from_dict_invoice(_mapping(data.get("invoice"), "invoice")),
        "customer": CustomerInfo(
            name=_string(_mapping(data.get("customer"), "customer"), "name", "customer"),
        ),
        "footer": _optional_string(data, "footer"),
    }


def from_dict_sale(data: Mapping[str, Any]) -> SaleReceipt:
    """Create a SaleReceipt from its wire shape"""
    common = _common(data)
    raw_items = data.get("items")
    if not isinstance(raw_items, (list, tuple)):
        raise ReceiptDataError("expected an array", "items")
    items = tuple(
        from_dict_sale_item(_mapping(item, _path("items", i)), _path("items", i))
        for i, item in enumerate(raw_items)
    )
    payment = _optional_mapping(data, "payment")
    return SaleReceipt(
        items=items,
        totals=from_dict_totals(_mapping(data.get("totals"), "totals")),
        payment=from_dict_payment(payment) if payment is not None else None,
        **common,
    )


def from_dict_service_receipt(data: Mapping[str, Any]) -> ServiceReceipt:
    """Create a ServiceReceipt from its wire shape"""
    common = _common(data)
    tracking = _optional_mapping(data, "tracking")
    url = _optional_string(tracking, "url", "tracking") if tracking is not None else None
    qr = _optional_mapping(data, "qr")
    return ServiceReceipt(
        service=from_dict_service(_mapping(data.get("service"), "service")),
        tracking=Tracking(url=url) if url is not None else None,
        qr=from_dict_qr(qr) if qr is not None else None,
        **common,
    )


def from_dict(data: Any) -> ReceiptData:
    """Map a wire document to its receipt variant.

    A document carrying ``service`` is a service receipt even if it also
    carries ``items``; otherwise ``items`` makes it a sale receipt.

    Raises:
        ReceiptDataError: the document matches neither shape or a required
            field is missing or invalid
    """
    if not isinstance(data, Mapping):
        raise ReceiptDataError(f"receipt must be an object, got {type(data).__name__}")
    if "service" in data:
        return from_dict_service_receipt(data)
    if "items" in data:
        return from_dict_sale(data)
    raise ReceiptDataError("receipt has neither 'service' nor 'items'")


def from_json(json_str: str) -> ReceiptData:
    """Parse a receipt from JSON text"""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ReceiptDataError(f"invalid JSON: {exc}") from exc
    return from_dict(data)


# ==================== model -> wire ====================

def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_prune(v) for v in value]
    return value


def to_dict(receipt: ReceiptData) -> Dict[str, Any]:
    """Convert a receipt back to its wire shape, omitting unset optionals"""
    if not is_dataclass(receipt) or not isinstance(receipt, (SaleReceipt, ServiceReceipt)):
        raise TypeError(f"Expected a receipt, got {type(receipt)}")
    return _prune(asdict(receipt))


def to_json(receipt: ReceiptData, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(receipt), ensure_ascii=False, indent=indent)


def validate_width(width: int) -> int:
    """Check a printable column count"""
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError(f"width must be a positive integer, got {width!r}")
    return width


__all__ = [
    "ReceiptDataError",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "validate_width",
]
