# moodtracker/app/routes_health.py

from __future__ import annotations
from fastapi import APIRouter

router = APIRouter()

@router.get("/health")
async def health():
    """
    Liveness check.

    Only tells whether the server is up; the theme catalog is loaded lazily on
    the first analysis request.
    """
    return {
        "status": "ok",
        "service": "mood-thematic-analysis",
    }
