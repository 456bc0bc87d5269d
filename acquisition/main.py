"""
Target Acquisition - Main FastAPI Application

Timed nearest-target challenges: fetch coordinates, answer within the deadline.
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .api import missions_router, status_router
from .api.schemas import ErrorResponse
from .challenges import ChallengeGenerator, Grader, TargetAcquisitionChallenge
from .store import ChallengeStore, ExpirySweeper
from .config import (
    ANSWER_DEADLINE_SECONDS,
    LOG_LEVEL,
    SWEEP_INTERVAL_SECONDS,
    SWEEP_MAX_AGE_SECONDS,
)
from . import __version__

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create app
app = FastAPI(
    title="Target Acquisition",
    description="Identify the closest target to your position before the clock runs out.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS - allow all for API access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_timing_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.3f}s"
    return response


# Exception handlers
@app.exception_handler(RequestValidationError)
async def invalid_submission_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error_code="INVALID_SUBMISSION",
            message="Invalid JSON",
            details={"fields": fields},
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred",
        ).model_dump(),
    )


# Include routers
app.include_router(missions_router)
app.include_router(status_router)


# Root endpoint
@app.get("/", response_class=PlainTextResponse)
async def root(request: Request):
    """Mission briefing."""
    return request.app.state.challenge.description


# Health check
@app.get("/health")
async def health(request: Request):
    """Health check endpoint for monitoring."""
    from datetime import datetime, timezone

    sweeper = request.app.state.sweeper
    challenge = request.app.state.challenge
    health_status = {
        "status": "healthy",
        "version": __version__,
        "challenge": {"id": challenge.id, "title": challenge.title},
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "sweeper": "running" if sweeper.running else "stopped",
    }
    if not sweeper.running:
        health_status["status"] = "degraded"

    return health_status


# Startup event
@app.on_event("startup")
async def startup():
    """Build the challenge store and start sweeping it."""
    store = ChallengeStore()
    app.state.store = store
    app.state.challenge = TargetAcquisitionChallenge(
        store=store,
        generator=ChallengeGenerator(),
        grader=Grader(deadline_seconds=ANSWER_DEADLINE_SECONDS),
    )
    app.state.sweeper = ExpirySweeper(
        store,
        interval=SWEEP_INTERVAL_SECONDS,
        max_age=SWEEP_MAX_AGE_SECONDS,
    )
    await app.state.sweeper.start()

    logger.info("Target Acquisition v%s started", __version__)
    logger.info("Time limit: %gs per challenge", ANSWER_DEADLINE_SECONDS)
    logger.info("Player position: (0, 0, 0)")


@app.on_event("shutdown")
async def shutdown():
    """Stop the sweeper task."""
    await app.state.sweeper.stop()


# For direct running
if __name__ == "__main__":
    import uvicorn
    from .config import API_HOST, API_PORT

    logger.info("Challenge endpoint: http://%s:%d/mission/coordinates", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
