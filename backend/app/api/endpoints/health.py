from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings
from app.repositories.memory import store
from app.services.enhancement_service import enhancement_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {
        "store": "ok" if store.profiles.list() else "error",
        "ai_enhancement": "ok" if enhancement_service.initialized else "not_configured",
    }

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
