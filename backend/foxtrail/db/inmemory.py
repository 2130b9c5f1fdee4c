"""In-memory implementation of the itinerary repository interface."""

import copy
from collections.abc import Sequence

from backend.foxtrail.db.errors import StoreError
from backend.foxtrail.db.seed import build_seed_itineraries
from backend.foxtrail.models.itinerary import (
    Activity,
    ActivityCreate,
    ActivityFields,
    ActivityPatch,
    Itinerary,
    ItineraryCreate,
    ItineraryPatch,
)
from backend.foxtrail.utils.dates import new_id, next_timestamp, utcnow
from backend.foxtrail.utils.logging import StructuredStoreLogger
from backend.foxtrail.utils.metrics import PrometheusStoreMetrics


class InMemoryItineraryRepository:
    """In-memory implementation of ItineraryRepository.

    Holds the whole collection as a list. Subclasses make it durable by
    overriding ``_persist``, which every mutation calls before returning.
    """

    def __init__(self, seed_on_first_run: bool = False) -> None:
        self._itineraries: list[Itinerary] = []
        self._seed_on_first_run = seed_on_first_run
        self._log = StructuredStoreLogger()
        self._metrics = PrometheusStoreMetrics()

    def initialize(self) -> None:
        """Seed the empty collection if configured to."""
        self._itineraries = build_seed_itineraries(utcnow()) if self._seed_on_first_run else []
        self._commit("initialize")

    def _persist(self) -> None:
        """Write the full collection. No-op in memory."""
        return

    def _commit(
        self, operation: str, itinerary_id: str | None = None, item_id: str | None = None
    ) -> None:
        try:
            self._persist()
        except StoreError as e:
            self._metrics.record_operation(operation, "error")
            self._log.log_operation(operation, "error", itinerary_id, item_id, error_reason=str(e))
            raise

        self._metrics.record_operation(operation, "ok")
        self._log.log_operation(operation, "ok", itinerary_id, item_id)

    def _not_found(self, operation: str, itinerary_id: str, item_id: str | None = None) -> None:
        self._metrics.record_operation(operation, "not_found")
        self._log.log_operation(operation, "not_found", itinerary_id, item_id)

    def _find(self, itinerary_id: str) -> Itinerary | None:
        for itinerary in self._itineraries:
            if itinerary.id == itinerary_id:
                return itinerary
        return None

    @staticmethod
    def _find_item(itinerary: Itinerary, item_id: str) -> Activity | None:
        for item in itinerary.items:
            if item.id == item_id:
                return item
        return None

    @staticmethod
    def _touch(itinerary: Itinerary) -> None:
        itinerary.updated_at = next_timestamp(itinerary.updated_at)

    @staticmethod
    def _materialize(item: ActivityFields) -> Activity:
        if isinstance(item, Activity):
            return item.model_copy(deep=True)
        return Activity.model_validate({**item.model_dump(), "id": new_id()})

    def list_all(self) -> list[Itinerary]:
        """List all itineraries in insertion order."""
        return [itinerary.model_copy(deep=True) for itinerary in self._itineraries]

    def get_by_id(self, itinerary_id: str) -> Itinerary | None:
        """Get itinerary by ID."""
        itinerary = self._find(itinerary_id)
        return itinerary.model_copy(deep=True) if itinerary else None

    def create(self, fields: ItineraryCreate, *, ai_generated: bool = False) -> Itinerary:
        """Create a new itinerary."""
        now = utcnow()

        itinerary = Itinerary(
            id=new_id(),
            title=fields.title,
            type=fields.type,
            destination=fields.destination,
            start_location=fields.start_location,
            start_date=fields.start_date or now,
            end_date=fields.end_date or now,
            collaborators=list(fields.collaborators),
            preferences=copy.deepcopy(fields.preferences),
            ai_generated=ai_generated,
            created_at=now,
            updated_at=now,
            items=[],
        )

        self._itineraries.append(itinerary)
        self._commit("create", itinerary.id)
        return itinerary.model_copy(deep=True)

    def update(self, itinerary_id: str, fields: ItineraryPatch) -> Itinerary | None:
        """Shallow-merge provided fields into an itinerary."""
        itinerary = self._find(itinerary_id)

        if itinerary is None:
            self._not_found("update", itinerary_id)
            return None

        for name, value in fields.changes().items():
            setattr(itinerary, name, copy.deepcopy(value))
        self._touch(itinerary)

        self._commit("update", itinerary_id)
        return itinerary.model_copy(deep=True)

    def remove(self, itinerary_id: str) -> bool:
        """Delete an itinerary and, with it, its items."""
        itinerary = self._find(itinerary_id)

        if itinerary is None:
            self._not_found("remove", itinerary_id)
            return False

        self._itineraries.remove(itinerary)
        self._commit("remove", itinerary_id)
        return True

    def add_item(self, itinerary_id: str, fields: ActivityCreate) -> Activity | None:
        """Append a new activity to an itinerary."""
        itinerary = self._find(itinerary_id)

        if itinerary is None:
            self._not_found("add_item", itinerary_id)
            return None

        item = Activity.model_validate({**fields.model_dump(), "id": new_id()})
        itinerary.items.append(item)
        self._touch(itinerary)

        self._commit("add_item", itinerary_id, item.id)
        return item.model_copy(deep=True)

    def update_item(
        self, itinerary_id: str, item_id: str, fields: ActivityPatch
    ) -> Activity | None:
        """Shallow-merge provided fields into an activity."""
        itinerary = self._find(itinerary_id)
        item = self._find_item(itinerary, item_id) if itinerary else None

        if itinerary is None or item is None:
            self._not_found("update_item", itinerary_id, item_id)
            return None

        for name, value in fields.changes().items():
            setattr(item, name, copy.deepcopy(value))
        self._touch(itinerary)

        self._commit("update_item", itinerary_id, item_id)
        return item.model_copy(deep=True)

    def remove_item(self, itinerary_id: str, item_id: str) -> bool:
        """Delete an activity."""
        itinerary = self._find(itinerary_id)
        item = self._find_item(itinerary, item_id) if itinerary else None

        if itinerary is None or item is None:
            self._not_found("remove_item", itinerary_id, item_id)
            return False

        itinerary.items.remove(item)
        self._touch(itinerary)

        self._commit("remove_item", itinerary_id, item_id)
        return True

    def replace_items(
        self, itinerary_id: str, items: Sequence[ActivityFields]
    ) -> list[Activity] | None:
        """Substitute the whole item sequence."""
        itinerary = self._find(itinerary_id)

        if itinerary is None:
            self._not_found("replace_items", itinerary_id)
            return None

        itinerary.items = [self._materialize(item) for item in items]
        self._touch(itinerary)

        self._commit("replace_items", itinerary_id)
        return [item.model_copy(deep=True) for item in itinerary.items]
