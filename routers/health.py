from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health():
    """Liveness probe, exempt from rate limiting"""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api/health")
async def api_health():
    return {"status": "OK", "message": "Server is running"}
