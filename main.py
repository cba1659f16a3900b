"""
Name Score Platform API Server

FastAPI server for triggering the name score pipeline via HTTP requests.
Includes token-based authentication for security.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8001

Environment Variables:
    PIPELINE_API_TOKEN - Required secret token for the trigger endpoints
    SOURCE_URL / SOURCE_AUTH - Name source endpoint and Authorization value
    TARGET_URL / TARGET_AUTH - Score sink endpoint and Authorization value
    SUBJECT_NAME / TEST_MODE - Submission identity and test flag
"""

from contextlib import asynccontextmanager
from datetime import datetime

import pytz
from fastapi import FastAPI

from api.v1 import pipelines
from core.correlation_middleware import CorrelationMiddleware
from core.logging import get_logger, setup_logging
from core.middleware import setup_middleware
from core.settings import get_settings
from schemas.pipeline import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    log = get_logger()
    log.info("api_starting", service=settings.service_name)

    yield

    log.info("api_stopped")


app = FastAPI(
    title="Name Score Platform",
    description="API for triggering the name score pipeline",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(CorrelationMiddleware)
setup_middleware(app)

app.include_router(pipelines.router, prefix="/v1")


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint (no auth required)."""
    now = datetime.now(pytz.timezone(get_settings().timezone))
    return HealthResponse(status="healthy", timestamp=now.isoformat())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8001)
