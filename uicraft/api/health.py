# uicraft/api/health.py
"""
Health check endpoints.
"""
from datetime import datetime, timezone
from fastapi import APIRouter

from uicraft.db import is_connected

router = APIRouter(tags=["Health"])


@router.get("/healthz")
async def healthz():
    """Simple health check."""
    return {"ok": True, "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api/health")
async def api_health():
    """API health check, including whether version history is available."""
    return {
        "status": "healthy",
        "database": is_connected(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
