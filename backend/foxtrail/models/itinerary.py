"""Itinerary and activity models - persisted records and their payloads."""

from typing import Annotated, Any, ClassVar

from pydantic import Field

from backend.foxtrail.models.common import (
    ActivityCategory,
    CamelModel,
    Collaborators,
    DayIndex,
    ItineraryType,
    OptionalTimestamp,
    Preferences,
    Timestamp,
    TravelMode,
    default_on_invalid,
)

DEFAULT_ITINERARY_TITLE = "Untitled Itinerary"
DEFAULT_ITEM_NAME = "Untitled item"

ItineraryTitle = Annotated[str, default_on_invalid(DEFAULT_ITINERARY_TITLE)]
ItemName = Annotated[str, default_on_invalid(DEFAULT_ITEM_NAME)]
Text = Annotated[str, default_on_invalid("")]
TypeField = Annotated[ItineraryType, default_on_invalid(ItineraryType.custom)]
CategoryField = Annotated[ActivityCategory, default_on_invalid(ActivityCategory.general)]
TravelModeField = Annotated[TravelMode, default_on_invalid(TravelMode.walk)]
PreferencesField = Annotated[Preferences, default_on_invalid(dict)]
CollaboratorsField = Annotated[Collaborators, default_on_invalid(list)]


class ActivityFields(CamelModel):
    """Activity content without identity - used for creation and as item drafts."""

    name: ItemName = DEFAULT_ITEM_NAME
    category: CategoryField = ActivityCategory.general
    location: Text = ""
    day: DayIndex = None
    start_time: OptionalTimestamp = None
    end_time: OptionalTimestamp = None
    travel_mode: TravelModeField = TravelMode.walk
    notes: Text = ""


ActivityCreate = ActivityFields


class Activity(ActivityFields):
    """Single scheduled item owned by an itinerary."""

    id: str
    sequence: int | None = None


class PatchModel(CamelModel):
    """Partial update payload applied with shallow-merge semantics."""

    _nullable: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Return the explicitly provided fields to overwrite.

        Fields whose provided value resolved to None are dropped unless the
        target field accepts None.
        """
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in self._nullable or getattr(self, name) is not None
        }


class ActivityPatch(PatchModel):
    """Fields of an activity that may be overwritten."""

    _nullable: ClassVar[frozenset[str]] = frozenset({"day", "start_time", "end_time"})

    name: ItemName | None = None
    category: CategoryField | None = None
    location: Text | None = None
    day: DayIndex = None
    start_time: OptionalTimestamp = None
    end_time: OptionalTimestamp = None
    travel_mode: TravelModeField | None = None
    notes: Text | None = None


class ItineraryCreate(CamelModel):
    """Payload for creating an itinerary. Missing dates resolve to now."""

    title: ItineraryTitle = DEFAULT_ITINERARY_TITLE
    type: TypeField = ItineraryType.custom
    destination: Text = ""
    start_location: Text = ""
    start_date: OptionalTimestamp = None
    end_date: OptionalTimestamp = None
    collaborators: CollaboratorsField = Field(default_factory=list)
    preferences: PreferencesField = Field(default_factory=dict)


class ItineraryPatch(PatchModel):
    """Top-level itinerary fields that may be overwritten.

    Nested values such as ``preferences`` are replaced whole, not merged.
    """

    title: ItineraryTitle | None = None
    type: TypeField | None = None
    destination: Text | None = None
    start_location: Text | None = None
    start_date: OptionalTimestamp = None
    end_date: OptionalTimestamp = None
    collaborators: CollaboratorsField | None = None
    preferences: PreferencesField | None = None


class Itinerary(CamelModel):
    """Persisted itinerary with its embedded activities."""

    id: str
    title: str = DEFAULT_ITINERARY_TITLE
    type: ItineraryType = ItineraryType.custom
    destination: str = ""
    start_location: str = ""
    start_date: Timestamp
    end_date: Timestamp
    collaborators: Collaborators = Field(default_factory=list)
    preferences: Preferences = Field(default_factory=dict)
    ai_generated: bool = False
    created_at: Timestamp
    updated_at: Timestamp
    items: list[Activity] = Field(default_factory=list)
