"""Transport encoding - hand the raw ESC/POS buffer to RawBT via URL schemes."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from ..config import DEFAULT_RAWBT_PACKAGE, get_settings
from ..models.receipt import ReceiptData
from .builder import build

# Characters JavaScript's encodeURI leaves untouched, besides alphanumerics
_URI_RESERVED = ";,/?:@&=+$-_.!~*'()#"


def to_base64(data: bytes) -> str:
    """Standard alphabet, no line wrapping"""
    return base64.b64encode(data).decode("ascii")


def from_base64(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 payload: {exc}") from exc


def encode_uri(value: str) -> str:
    """Percent-encode ``value`` the way a browser's ``encodeURI`` does"""
    return quote(value, safe=_URI_RESERVED)


def rawbt_url(b64: str) -> str:
    """Primary scheme, handled directly by the RawBT app"""
    return f"rawbt:base64,{b64}"


def intent_url(b64: str, package: str = DEFAULT_RAWBT_PACKAGE) -> str:
    """Android intent fallback carrying the payload as a data: URI"""
    data_uri = encode_uri(f"data:application/octet-stream;base64,{b64}")
    return f"intent:{data_uri}#Intent;scheme=rawbt;package={package};end;"


@dataclass(frozen=True)
class PrintJob:
    """Encoded receipt ready for dispatch"""

    payload: bytes
    base64: str
    rawbt_url: str
    intent_url: str

    @property
    def size(self) -> int:
        return len(self.payload)

    @classmethod
    def from_bytes(cls, payload: bytes, package: str = DEFAULT_RAWBT_PACKAGE) -> "PrintJob":
        b64 = to_base64(payload)
        return cls(
            payload=payload,
            base64=b64,
            rawbt_url=rawbt_url(b64),
            intent_url=intent_url(b64, package),
        )


def encode_receipt(
    receipt: Union[ReceiptData, Mapping[str, Any]],
    width: Optional[int] = None,
    *,
    package: Optional[str] = None,
    **build_options: Any,
) -> PrintJob:
    """Build ``receipt`` and wrap the bytes in a :class:`PrintJob`.

    ``width``, ``package`` and any build option left unset come from
    :func:`get_settings`.
    """
    settings = get_settings()
    build_options.setdefault("codepage", settings.codepage)
    build_options.setdefault("encoding", settings.text_encoding)
    build_options.setdefault("errors", settings.encoding_errors)
    payload = build(receipt, width if width is not None else settings.width, **build_options)
    return PrintJob.from_bytes(payload, package or settings.rawbt_package)


__all__ = [
    "PrintJob",
    "to_base64",
    "from_base64",
    "encode_uri",
    "rawbt_url",
    "intent_url",
    "encode_receipt",
]
