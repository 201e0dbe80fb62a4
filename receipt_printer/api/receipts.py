"""Receipt encoding endpoints - ESC/POS bytes, base64 and RawBT URLs"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, Query, status
from fastapi.responses import Response
from pydantic import BaseModel

from ..demo import encode_fragment, decode_fragment, sale_demo, service_demo
from ..escpos import ReceiptEncodingError, encode_receipt
from ..escpos.transport import PrintJob
from ..models import ReceiptData, ReceiptDataError, ReceiptKind, from_dict, to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts")


class EncodeResponse(BaseModel):
    """Encoded receipt"""
    kind: str
    size: int
    base64: str
    rawbt_url: str
    intent_url: str


class DemoResponse(BaseModel):
    """Demo receipt with its preview fragment"""
    kind: str
    receipt: Dict[str, Any]
    fragment: str


class PreviewRequest(BaseModel):
    fragment: str


class PreviewResponse(BaseModel):
    """Receipt decoded from a preview fragment, plus its print job"""
    receipt: Dict[str, Any]
    job: EncodeResponse


def _job_response(receipt: ReceiptData, job: PrintJob) -> EncodeResponse:
    return EncodeResponse(
        kind=receipt.kind.value,
        size=job.size,
        base64=job.base64,
        rawbt_url=job.rawbt_url,
        intent_url=job.intent_url,
    )


def _encode(payload: Dict[str, Any], width: Optional[int]) -> tuple:
    """Validate and encode, mapping domain errors to HTTP errors"""
    try:
        receipt = from_dict(payload)
        return receipt, encode_receipt(receipt, width)
    except (ReceiptDataError, ReceiptEncodingError, ValueError) as e:
        # ValueError: input the printer format cannot carry (oversized QR payload)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except Exception as e:
        logger.error(f"Encoding receipt failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encoding receipt failed: {str(e)}",
        )


@router.post("/encode", response_model=EncodeResponse)
def encode(
    payload: Dict[str, Any] = Body(..., description="Sale or service receipt document"),
    width: Optional[int] = Query(None, ge=1, le=255, description="Printable columns"),
) -> EncodeResponse:
    """Encode a receipt into base64 ESC/POS and the RawBT hand-off URLs.

    A document with ``service`` is printed as a service receipt, otherwise
    ``items`` makes it a sales receipt.
    """
    receipt, job = _encode(payload, width)
    logger.info(f"Encoded {receipt.kind.value} receipt {receipt.invoice.id}: {job.size} bytes")
    return _job_response(receipt, job)


@router.post("/raw", response_class=Response)
def encode_raw(
    payload: Dict[str, Any] = Body(..., description="Sale or service receipt document"),
    width: Optional[int] = Query(None, ge=1, le=255, description="Printable columns"),
) -> Response:
    """Encode a receipt and return the raw ESC/POS bytes"""
    receipt, job = _encode(payload, width)
    return Response(
        content=job.payload,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f'attachment; filename="receipt-{receipt.invoice.id}.bin"'},
    )


@router.get("/demo/{kind}", response_model=DemoResponse)
def demo(kind: ReceiptKind) -> DemoResponse:
    """Sample receipt of the requested kind"""
    receipt = service_demo() if kind is ReceiptKind.SERVICE else sale_demo()
    return DemoResponse(kind=kind.value, receipt=to_dict(receipt), fragment=encode_fragment(receipt))


@router.post("/preview", response_model=PreviewResponse)
def preview(payload: PreviewRequest) -> PreviewResponse:
    """Decode a ``#data=`` fragment and encode the receipt it carries"""
    try:
        receipt = decode_fragment(payload.fragment)
    except ReceiptDataError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    receipt, job = _encode(to_dict(receipt), None)
    return PreviewResponse(receipt=to_dict(receipt), job=_job_response(receipt, job))


__all__ = ["router"]
