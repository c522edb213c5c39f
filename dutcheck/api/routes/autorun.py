"""Auto-run control endpoints."""
from typing import Optional

import structlog
from fastapi import APIRouter, Depends

from dutcheck.api.deps import get_scheduler
from dutcheck.models import AutoRunRequest, AutoRunStatus

logger = structlog.get_logger()
router = APIRouter(prefix="/api/autorun", tags=["autorun"])


@router.post("/start", response_model=AutoRunStatus)
async def start_autorun(request: Optional[AutoRunRequest] = None, scheduler=Depends(get_scheduler)):
    request = request or AutoRunRequest()
    scheduler.start(interval_ms=request.interval_ms, max_ticks=request.max_ticks)
    logger.info("autorun_started_via_api", interval_ms=scheduler.interval_ms)
    return scheduler.get_status()


@router.post("/stop", response_model=AutoRunStatus)
async def stop_autorun(scheduler=Depends(get_scheduler)):
    scheduler.stop()
    return scheduler.get_status()


@router.get("/status", response_model=AutoRunStatus)
async def autorun_status(scheduler=Depends(get_scheduler)):
    return scheduler.get_status()
