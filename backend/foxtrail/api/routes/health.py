"""Health check endpoints.

- /health: liveness, always ok while the process runs
- /healthz: checks the itinerary document can be written
"""

import json
import os
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response

from backend.foxtrail.db.engine import get_repository
from backend.foxtrail.db.json_store import JsonFileItineraryRepository
from backend.foxtrail.db.repositories import ItineraryRepository

router = APIRouter()


async def check_storage(repository: ItineraryRepository) -> tuple[bool, str]:
    """Check the document behind the live repository is writable.

    Returns:
        (is_ok, status_message)
    """
    if not isinstance(repository, JsonFileItineraryRepository):
        return (True, "ok")

    path = repository.path
    directory = path.parent

    if not directory.is_dir():
        return (False, "error: data directory missing")

    target = path if path.exists() else directory
    if not os.access(target, os.W_OK):
        return (False, "error: not writable")

    return (True, "ok")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(
    repository: Annotated[ItineraryRepository, Depends(get_repository)],
) -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if storage is usable
        503 otherwise
    """
    storage_ok, storage_status = await check_storage(repository)

    response_body = {
        "status": "ok" if storage_ok else "degraded",
        "components": {
            "storage": storage_status,
        },
    }

    if not storage_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
