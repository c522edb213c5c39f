"""System-level endpoints."""
from fastapi import APIRouter, Depends

from dutcheck.api.deps import get_runner, get_scheduler
from dutcheck.config import settings

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
async def system_health(runner=Depends(get_runner), scheduler=Depends(get_scheduler)):
    return {
        "status": "healthy",
        "state": runner.current_state().value,
        "packets": runner.stats().total,
        "autorun": scheduler.is_running(),
    }


@router.get("/config")
async def get_config():
    return {
        "valid_checksum_probability": settings.valid_checksum_probability,
        "bad_checksum": settings.bad_checksum,
        "autorun_interval_ms": settings.autorun_interval_ms,
        "recent_packets_window": settings.recent_packets_window,
    }
