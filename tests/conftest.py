"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.foxtrail.db.engine import get_repository
from backend.foxtrail.db.inmemory import InMemoryItineraryRepository
from backend.foxtrail.db.json_store import JsonFileItineraryRepository
from backend.foxtrail.main import app


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Location of a not-yet-created itinerary document."""
    return tmp_path / "data" / "itineraries.json"


@pytest.fixture
def store(data_path: Path) -> JsonFileItineraryRepository:
    """Empty, initialized file-backed repository."""
    repository = JsonFileItineraryRepository(data_path, seed_on_first_run=False)
    repository.initialize()
    return repository


@pytest.fixture
def memory_store() -> InMemoryItineraryRepository:
    """Empty, initialized in-memory repository."""
    repository = InMemoryItineraryRepository()
    repository.initialize()
    return repository


@pytest.fixture
def client(store: JsonFileItineraryRepository) -> Generator[TestClient, None, None]:
    """Test client bound to the temporary file-backed repository.

    The client is not used as a context manager, so the app lifespan (which
    loads the configured document) does not run.
    """
    app.dependency_overrides[get_repository] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
