"""Repository construction and request-scoped access."""

from fastapi import Request

from backend.foxtrail.config import Settings
from backend.foxtrail.db.json_store import JsonFileItineraryRepository
from backend.foxtrail.db.repositories import ItineraryRepository


def create_repository_from_settings(settings: Settings) -> JsonFileItineraryRepository:
    """Create the file-backed repository from settings.

    The repository is not loaded yet; call ``initialize()`` at startup.
    """
    return JsonFileItineraryRepository(
        settings.data_path,
        seed_on_first_run=settings.seed_on_first_run,
    )


def get_repository(request: Request) -> ItineraryRepository:
    """FastAPI dependency returning the repository bound at startup."""
    repository: ItineraryRepository = request.app.state.repository
    return repository
