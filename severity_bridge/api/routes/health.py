"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from severity_bridge.config import settings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "product_prefix": settings.product_prefix,
    }
