"""Models package - re-exports for convenience."""

from backend.foxtrail.models.common import (
    ActivityCategory,
    CamelModel,
    ItineraryType,
    PreferenceValue,
    TravelMode,
)
from backend.foxtrail.models.itinerary import (
    Activity,
    ActivityCreate,
    ActivityFields,
    ActivityPatch,
    Itinerary,
    ItineraryCreate,
    ItineraryPatch,
)
from backend.foxtrail.models.operations import (
    OptimizationResult,
    SyncResult,
    SynthesisDraft,
    SynthesisRequest,
)

__all__ = [
    # Common
    "CamelModel",
    "ItineraryType",
    "ActivityCategory",
    "TravelMode",
    "PreferenceValue",
    # Itinerary
    "Itinerary",
    "ItineraryCreate",
    "ItineraryPatch",
    "Activity",
    "ActivityFields",
    "ActivityCreate",
    "ActivityPatch",
    # Operations
    "SynthesisRequest",
    "SynthesisDraft",
    "OptimizationResult",
    "SyncResult",
]
