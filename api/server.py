"""
ZenJourney API server.

Run:
    uvicorn api.server:app --reload
    python -m api.server
"""

import logging
from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.planning_router import router as planning_router
from api.response_models import HealthResponse
from zenjourney import __version__, config
from zenjourney.observability import CorrelationIdMiddleware, configure_logging

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ZenJourney Planning API",
    description="Priority scoring and daily time-blocking",
    version=__version__,
)

# CORS middleware - configurable via CORS_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if config.CORS_ORIGINS in ([], ["*"]) else config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

app.include_router(planning_router, prefix="/api")


@app.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


if __name__ == "__main__":
    configure_logging()
    logger.info(f"Starting ZenJourney API on port {config.API_PORT}")
    uvicorn.run(app, host="0.0.0.0", port=config.API_PORT)
