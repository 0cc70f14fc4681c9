from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from timetabler.core.config import get_settings

router = APIRouter()

settings = get_settings()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/live")
def health_live() -> dict:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "grid": {
            "start_hour": settings.grid_start_hour,
            "end_hour": settings.grid_end_hour,
            "session_minutes": settings.grid_session_minutes,
        },
    }
