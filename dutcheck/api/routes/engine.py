"""Engine endpoints: test events, queries and reset."""
import random
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends

from dutcheck.api.deps import get_runner
from dutcheck.engine import checksum
from dutcheck.models import (
    CoverageReport,
    EngineState,
    Packet,
    RandomRequest,
    SubmitRequest,
    SubmitResponse,
    TestStats,
    TraceSummary,
)

logger = structlog.get_logger()
router = APIRouter(prefix="/api/engine", tags=["engine"])


@router.post("/submit", response_model=SubmitResponse)
async def submit_event(request: SubmitRequest, runner=Depends(get_runner)):
    packet = runner.submit(
        request.data_in,
        request.checksum_in,
        request.valid_in,
        data_out=request.data_out,
    )
    return SubmitResponse(accepted=packet is not None, packet=packet)


@router.post("/random", response_model=Packet)
async def random_event(request: Optional[RandomRequest] = None, runner=Depends(get_runner)):
    rng = None
    if request is not None and request.seed is not None:
        rng = random.Random(request.seed)
    return runner.run_random(rng)


@router.post("/reset")
async def reset_engine(runner=Depends(get_runner)):
    runner.reset()
    logger.info("engine_reset_via_api")
    return {"status": "reset"}


@router.get("/state", response_model=EngineState)
async def get_state(runner=Depends(get_runner)):
    data_out, valid_out = runner.last_output()
    return EngineState(state=runner.current_state(), data_out=data_out, valid_out=valid_out)


@router.get("/history", response_model=List[Packet])
async def get_history(limit: Optional[int] = None, runner=Depends(get_runner)):
    if limit is None:
        return list(runner.history())
    return list(runner.recent(limit))


@router.get("/stats", response_model=TestStats)
async def get_stats(runner=Depends(get_runner)):
    return runner.stats()


@router.get("/summary", response_model=TraceSummary)
async def get_summary(runner=Depends(get_runner)):
    return runner.trace_summary()


@router.get("/coverage", response_model=CoverageReport)
async def get_coverage(runner=Depends(get_runner)):
    return runner.coverage()


@router.get("/checksum/{symbol}")
async def get_checksum(symbol: str):
    return {"symbol": symbol, "checksum": checksum.compute(symbol)}
