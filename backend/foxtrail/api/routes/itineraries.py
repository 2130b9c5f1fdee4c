"""Itinerary endpoints - CRUD, item management, optimize, sync and generate.

Handlers are ``async`` and call the synchronous repository directly, so every
store call runs to completion on the event loop before the next one starts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from backend.foxtrail.db.engine import get_repository
from backend.foxtrail.db.repositories import ItineraryRepository
from backend.foxtrail.models.itinerary import (
    Activity,
    ActivityCreate,
    ActivityPatch,
    Itinerary,
    ItineraryCreate,
    ItineraryPatch,
)
from backend.foxtrail.models.operations import OptimizationResult, SyncResult, SynthesisRequest
from backend.foxtrail.orchestration.operations import (
    optimize_itinerary,
    sync_itinerary,
    synthesize_itinerary,
)

router = APIRouter(prefix="/api/itineraries", tags=["itineraries"])

Repository = Annotated[ItineraryRepository, Depends(get_repository)]

ITINERARY_NOT_FOUND = "Itinerary not found"
ITEM_NOT_FOUND = "Item not found"


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.get("", response_model=list[Itinerary])
async def list_itineraries(repository: Repository) -> list[Itinerary]:
    """List all itineraries in insertion order."""
    return repository.list_all()


@router.post("", response_model=Itinerary, status_code=status.HTTP_201_CREATED)
async def create_itinerary(request: ItineraryCreate, repository: Repository) -> Itinerary:
    """Create an itinerary; missing fields take their defaults."""
    return repository.create(request)


@router.post("/generate", response_model=Itinerary, status_code=status.HTTP_201_CREATED)
async def generate_itinerary(request: SynthesisRequest, repository: Repository) -> Itinerary:
    """Synthesize an itinerary from templates and commit it.

    Args:
        request: Destination, start date, days, focus tags and options
        repository: Itinerary repository

    Returns:
        The committed itinerary with its generated items
    """
    return synthesize_itinerary(repository, request)


@router.get("/{itinerary_id}", response_model=Itinerary)
async def get_itinerary(itinerary_id: str, repository: Repository) -> Itinerary:
    """Get itinerary by ID."""
    itinerary = repository.get_by_id(itinerary_id)
    if itinerary is None:
        raise _not_found(ITINERARY_NOT_FOUND)
    return itinerary


@router.put("/{itinerary_id}", response_model=Itinerary)
async def update_itinerary(
    itinerary_id: str, request: ItineraryPatch, repository: Repository
) -> Itinerary:
    """Overwrite the provided top-level fields of an itinerary."""
    itinerary = repository.update(itinerary_id, request)
    if itinerary is None:
        raise _not_found(ITINERARY_NOT_FOUND)
    return itinerary


@router.delete("/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_itinerary(itinerary_id: str, repository: Repository) -> Response:
    """Delete an itinerary and its items."""
    if not repository.remove(itinerary_id):
        raise _not_found(ITINERARY_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{itinerary_id}/items", response_model=Activity, status_code=status.HTTP_201_CREATED
)
async def add_item(itinerary_id: str, request: ActivityCreate, repository: Repository) -> Activity:
    """Append an activity to an itinerary."""
    item = repository.add_item(itinerary_id, request)
    if item is None:
        raise _not_found(ITINERARY_NOT_FOUND)
    return item


@router.put("/{itinerary_id}/items/{item_id}", response_model=Activity)
async def update_item(
    itinerary_id: str, item_id: str, request: ActivityPatch, repository: Repository
) -> Activity:
    """Overwrite the provided fields of an activity."""
    item = repository.update_item(itinerary_id, item_id, request)
    if item is None:
        raise _not_found(ITEM_NOT_FOUND)
    return item


@router.delete("/{itinerary_id}/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(itinerary_id: str, item_id: str, repository: Repository) -> Response:
    """Delete an activity."""
    if not repository.remove_item(itinerary_id, item_id):
        raise _not_found(ITEM_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{itinerary_id}/optimize", response_model=OptimizationResult)
async def optimize(itinerary_id: str, repository: Repository) -> OptimizationResult:
    """Reorder items chronologically and assign sequence numbers."""
    result = optimize_itinerary(repository, itinerary_id)
    if result is None:
        raise _not_found(ITINERARY_NOT_FOUND)
    return result


@router.post("/{itinerary_id}/sync", response_model=SyncResult)
async def sync(itinerary_id: str, repository: Repository) -> SyncResult:
    """Simulate a calendar sync."""
    result = sync_itinerary(repository, itinerary_id)
    if result is None:
        raise _not_found(ITINERARY_NOT_FOUND)
    return result
