"""Payloads and results of the derived operations (synthesize, optimize, sync)."""

from typing import Annotated

from pydantic import AfterValidator, Field

from backend.foxtrail.models.common import (
    CamelModel,
    ItineraryType,
    OptionalTimestamp,
    Timestamp,
    default_on_invalid,
)
from backend.foxtrail.models.itinerary import (
    Activity,
    ActivityFields,
    ItineraryCreate,
    PreferencesField,
    Text,
)

DEFAULT_SYNTHESIS_DAYS = 3
MAX_SYNTHESIS_DAYS = 14


def _clamp_days(value: int) -> int:
    if value < 1:
        raise ValueError("days must be a positive integer")
    return min(value, MAX_SYNTHESIS_DAYS)


DayCount = Annotated[
    int, AfterValidator(_clamp_days), default_on_invalid(DEFAULT_SYNTHESIS_DAYS)
]


class SynthesisRequest(CamelModel):
    """Compact request for a generated itinerary.

    ``focus`` tags select suggestion tables; unknown tags fall back to culture
    suggestions. A ``focus`` list inside ``preferences`` takes precedence.
    """

    destination: Text = ""
    start_date: OptionalTimestamp = None
    days: DayCount = DEFAULT_SYNTHESIS_DAYS
    focus: Annotated[list[str] | None, default_on_invalid(None)] = None
    type: Annotated[ItineraryType, default_on_invalid(ItineraryType.trip)] = ItineraryType.trip
    start_location: Text = ""
    title: Text = ""
    preferences: PreferencesField = Field(default_factory=dict)


class SynthesisDraft(CamelModel):
    """Unpersisted itinerary payload plus its generated item drafts."""

    itinerary: ItineraryCreate
    items: list[ActivityFields]


class OptimizationResult(CamelModel):
    """Outcome of chronological reordering."""

    message: str
    items: list[Activity]


class SyncResult(CamelModel):
    """Outcome of the (simulated) calendar sync."""

    message: str
    synced_at: Timestamp
