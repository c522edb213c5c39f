"""
FastAPI server for the conformance engine

Provides a REST driver for:
- Directed and randomized test events
- Engine state, packet history and statistics
- Coverage reporting
- Auto-run control
"""
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dutcheck.api.routes import ROUTERS
from dutcheck.exceptions import ConformanceError
from dutcheck.logging import setup_logging

setup_logging("dutcheck-api")
logger = structlog.get_logger()

app = FastAPI(
    title="Handshake Conformance Tester",
    description="Drives handshake protocol events through a DUT model and tracks coverage",
    version="0.1.0",
)

# CORS middleware for web UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in ROUTERS:
    app.include_router(router)


@app.exception_handler(ConformanceError)
async def conformance_error_handler(request: Request, exc: ConformanceError):
    logger.warning("request_rejected", path=request.url.path, error=exc.message, details=exc.details)
    return JSONResponse(status_code=400, content={"detail": exc.message, "details": exc.details})


@app.get("/")
async def root():
    return {
        "service": "Handshake Conformance Tester",
        "version": "0.1.0",
        "status": "operational",
    }


def main() -> None:
    import uvicorn
    from dutcheck.config import settings

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
