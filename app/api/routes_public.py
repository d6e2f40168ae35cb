"""
Public API routes - service health
"""

import time

from fastapi import APIRouter

from app.utils.dates import to_iso_utc, utc_now

router = APIRouter()

STARTED_AT = time.monotonic()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": to_iso_utc(utc_now()),
        "uptime": round(time.monotonic() - STARTED_AT, 3)
    }
