"""Column layout for fixed-width receipt lines."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..models.receipt import SaleItem

CURRENCY_PREFIX = "Rp "

Number = Union[int, float, Decimal]


def format_currency(amount: Number) -> str:
    """Format ``amount`` in rupiah: ``'.'`` groups thousands, no decimals.

    >>> format_currency(1000000)
    'Rp 1.000.000'
    """
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    grouped = f"{int(rounded):,}".replace(",", ".")
    return CURRENCY_PREFIX + grouped


def padding(label: str, value: str, width: int) -> int:
    """Spaces between a label and its right-aligned value, never below 1."""
    return max(1, width - len(label) - len(value))


def pad_line(label: str, value: str, width: int) -> str:
    """Two-column line; text longer than ``width - 1`` overflows, it is not wrapped."""
    return label + " " * padding(label, value, width) + value


def item_label(item: SaleItem) -> str:
    return f"{item.name} (x{item.qty})"


def item_line(item: SaleItem, width: int) -> str:
    return pad_line(item_label(item), format_currency(item.amount), width)


def amount_line(label: str, amount: Number, width: int) -> str:
    return pad_line(label, format_currency(amount), width)


__all__ = [
    "CURRENCY_PREFIX",
    "format_currency",
    "padding",
    "pad_line",
    "item_label",
    "item_line",
    "amount_line",
]
