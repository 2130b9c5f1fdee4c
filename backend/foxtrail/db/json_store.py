"""JSON-file implementation of the itinerary repository.

The whole collection lives in one JSON document (an array of itineraries with
embedded activities). Every mutation rewrites the full document:
- serialize the complete snapshot
- write it to a temporary file beside the document and fsync
- atomically move it over the document with os.replace

A crash therefore leaves either the previous or the new snapshot on disk.
"""

import contextlib
import logging
import os
import tempfile
import time
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from backend.foxtrail.db.errors import MalformedPersistedStateError, PersistenceWriteError
from backend.foxtrail.db.inmemory import InMemoryItineraryRepository
from backend.foxtrail.models.itinerary import Itinerary

logger = logging.getLogger(__name__)

_document_adapter = TypeAdapter(list[Itinerary])


class JsonFileItineraryRepository(InMemoryItineraryRepository):
    """Itinerary repository mirrored to a single JSON document."""

    def __init__(self, path: Path, seed_on_first_run: bool = True) -> None:
        """Initialize repository.

        Args:
            path: Location of the backing document
            seed_on_first_run: Populate sample data when no document exists
        """
        super().__init__(seed_on_first_run=seed_on_first_run)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Backing document location."""
        return self._path

    def initialize(self) -> None:
        """Load the backing document, or seed and write it on first run.

        Raises:
            MalformedPersistedStateError: If the document cannot be parsed
            PersistenceWriteError: If the first-run document cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceWriteError(f"Cannot create data directory {self._path.parent}") from e

        if not self._path.exists():
            logger.info(f"No itinerary document at {self._path}; creating it")
            super().initialize()
            return

        try:
            raw = self._path.read_bytes()
            self._itineraries = _document_adapter.validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise MalformedPersistedStateError(
                f"Itinerary document {self._path} is not parseable: {e}"
            ) from e

        logger.info(f"Loaded {len(self._itineraries)} itineraries from {self._path}")

    def _persist(self) -> None:
        """Rewrite the full document atomically.

        Raises:
            PersistenceWriteError: If any step of the write fails
        """
        started = time.perf_counter()
        payload = _document_adapter.dump_json(self._itineraries, by_alias=True, indent=2)

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise PersistenceWriteError(f"Failed to write {self._path}: {e}") from e

        self._metrics.record_write_latency((time.perf_counter() - started) * 1000)
