"""Repository protocol interface for itinerary data access."""

from collections.abc import Sequence
from typing import Protocol

from backend.foxtrail.models.itinerary import (
    Activity,
    ActivityCreate,
    ActivityFields,
    ActivityPatch,
    Itinerary,
    ItineraryCreate,
    ItineraryPatch,
)


class ItineraryRepository(Protocol):
    """Repository for itineraries and their nested activities.

    Lookups that miss return None (or False for removals) rather than raising.
    Every mutating call has completed its write when it returns.
    """

    def initialize(self) -> None:
        """Load existing state, or seed and persist it on first run.

        Raises:
            MalformedPersistedStateError: If persisted state cannot be parsed
        """
        ...

    def list_all(self) -> list[Itinerary]:
        """List all itineraries in insertion order."""
        ...

    def get_by_id(self, itinerary_id: str) -> Itinerary | None:
        """Get itinerary by ID.

        Args:
            itinerary_id: Itinerary ID

        Returns:
            Itinerary or None if not found
        """
        ...

    def create(self, fields: ItineraryCreate, *, ai_generated: bool = False) -> Itinerary:
        """Create a new itinerary with defaults applied.

        Args:
            fields: Creation payload
            ai_generated: Marks records produced by the synthesizer

        Returns:
            Created itinerary (no items)
        """
        ...

    def update(self, itinerary_id: str, fields: ItineraryPatch) -> Itinerary | None:
        """Shallow-merge provided fields into an itinerary.

        Args:
            itinerary_id: Itinerary ID
            fields: Partial update

        Returns:
            Updated itinerary or None if not found
        """
        ...

    def remove(self, itinerary_id: str) -> bool:
        """Delete an itinerary and its items.

        Returns:
            True if removed, False if not found
        """
        ...

    def add_item(self, itinerary_id: str, fields: ActivityCreate) -> Activity | None:
        """Append a new activity to an itinerary.

        Returns:
            Created activity or None if the itinerary is missing
        """
        ...

    def update_item(
        self, itinerary_id: str, item_id: str, fields: ActivityPatch
    ) -> Activity | None:
        """Shallow-merge provided fields into an activity.

        Returns:
            Updated activity or None if itinerary or item is missing
        """
        ...

    def remove_item(self, itinerary_id: str, item_id: str) -> bool:
        """Delete an activity.

        Returns:
            True if removed, False if itinerary or item is missing
        """
        ...

    def replace_items(
        self, itinerary_id: str, items: Sequence[ActivityFields]
    ) -> list[Activity] | None:
        """Substitute the whole item sequence.

        Activities keep their IDs; drafts without an ID are issued one.

        Returns:
            New item sequence or None if the itinerary is missing
        """
        ...
