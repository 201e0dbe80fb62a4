"""API router aggregator."""

from fastapi import APIRouter

from .receipts import router as receipts_router

api_router = APIRouter()
api_router.include_router(receipts_router, prefix="/api", tags=["receipts"])

__all__ = ["api_router"]
