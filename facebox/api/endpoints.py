"""
API Router Aggregator
Combines all API route modules into a single router
"""

from fastapi import APIRouter

from .routes import detection

router = APIRouter()

router.include_router(detection.router, prefix="/api/v1", tags=["detection"])

__all__ = ["router"]
