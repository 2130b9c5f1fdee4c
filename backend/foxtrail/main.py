"""FastAPI application - itinerary store service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.foxtrail.api.routes.health import router as health_router
from backend.foxtrail.api.routes.itineraries import router as itineraries_router
from backend.foxtrail.api.routes.metrics import router as metrics_router
from backend.foxtrail.config import get_settings
from backend.foxtrail.db.engine import create_repository_from_settings
from backend.foxtrail.db.errors import PersistenceWriteError
from backend.foxtrail.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load (or seed) the itinerary document before serving.

    A malformed document raises here and aborts startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    repository = create_repository_from_settings(settings)
    repository.initialize()
    app.state.repository = repository
    logger.info(f"Itinerary store ready at {settings.data_path}")

    yield


app = FastAPI(title="FoxTrail Itinerary API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().ui_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(itineraries_router, tags=["itineraries"])


@app.exception_handler(PersistenceWriteError)
async def persistence_write_error_handler(
    request: Request, exc: PersistenceWriteError
) -> JSONResponse:
    """Map failed document writes to a generic server error."""
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Unexpected server error"})


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "FoxTrail Itinerary API", "version": "0.1.0"}
