"""Static suggestion tables used by the template synthesizer."""

from dataclasses import dataclass

from backend.foxtrail.models.common import ActivityCategory


@dataclass(frozen=True)
class Suggestion:
    """Candidate activity for a focus tag."""

    name: str
    location: str
    notes: str


SUGGESTIONS: dict[ActivityCategory, tuple[Suggestion, ...]] = {
    ActivityCategory.culture: (
        Suggestion(
            name="Museum immersion",
            location="City Heritage Museum",
            notes="Guided tour of local history exhibits.",
        ),
        Suggestion(
            name="Historic district walk",
            location="Old Town Quarter",
            notes="Self-paced exploration with photo stops.",
        ),
        Suggestion(
            name="Craft workshop",
            location="Artisan Studio",
            notes="Create a handmade souvenir with local artists.",
        ),
    ),
    ActivityCategory.food: (
        Suggestion(
            name="Local market tasting",
            location="Central Market",
            notes="Sample seasonal produce and street snacks.",
        ),
        Suggestion(
            name="Chef-led cooking class",
            location="Kitchen Lab",
            notes="Cook regional dishes with a professional chef.",
        ),
        Suggestion(
            name="Night food tour",
            location="Downtown Food Arcade",
            notes="Guided tasting across iconic eateries.",
        ),
    ),
    ActivityCategory.nature: (
        Suggestion(
            name="Sunrise hike",
            location="Skyline Trailhead",
            notes="Easy hike with scenic viewpoints and birdwatching.",
        ),
        Suggestion(
            name="Botanical garden visit",
            location="City Botanic Gardens",
            notes="Relaxed stroll through themed gardens.",
        ),
        Suggestion(
            name="Riverside cycling",
            location="Riverfront Loop",
            notes="Leisure ride with picnic stop.",
        ),
    ),
    ActivityCategory.productivity: (
        Suggestion(
            name="Morning deep work session",
            location="Co-working Loft",
            notes="Focus block with premium Wi-Fi and coffee.",
        ),
        Suggestion(
            name="Team stand-up meeting",
            location="Innovation Hub",
            notes="Sync on goals and blockers.",
        ),
        Suggestion(
            name="Campus library research",
            location="North Library",
            notes="Reserve a quiet room for study time.",
        ),
    ),
    ActivityCategory.commute: (
        Suggestion(
            name="Express metro ride",
            location="Metro Line 2",
            notes="Fastest route with one transfer.",
        ),
        Suggestion(
            name="Bike share transfer",
            location="City Bike Station",
            notes="Use bike share for the last mile to campus.",
        ),
        Suggestion(
            name="Shuttle bus",
            location="Shuttle Stop A",
            notes="Company shuttle departing every 15 minutes.",
        ),
    ),
}

# Tags without a table of their own borrow this one
FALLBACK_CATEGORY = ActivityCategory.culture


def suggestions_for(tag: str) -> tuple[Suggestion, ...]:
    """Return the suggestion table for a focus tag."""
    try:
        return SUGGESTIONS[ActivityCategory(tag)]
    except (ValueError, KeyError):
        return SUGGESTIONS[FALLBACK_CATEGORY]
