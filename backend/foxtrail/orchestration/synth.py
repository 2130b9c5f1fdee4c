"""Template synthesizer - builds itinerary drafts from a compact request.

No network calls and no randomness: the same request (with the same resolved
start date) always yields the same draft. Per day and focus tag:
- suggestion: table[tag][(day_index + tag_index) % len(table)]
- start time: 09:00 / 12:30 / 16:00 by tag_index % 3
- duration: 1 hour for commute itineraries, otherwise 2 hours
- travel mode: public transit for the commute tag, otherwise walk
"""

import logging
from datetime import datetime, time, timedelta

from backend.foxtrail.models.common import ActivityCategory, ItineraryType, TravelMode
from backend.foxtrail.models.itinerary import ActivityFields, ItineraryCreate
from backend.foxtrail.models.operations import SynthesisDraft, SynthesisRequest
from backend.foxtrail.orchestration.suggestions import suggestions_for
from backend.foxtrail.utils.dates import end_of_day, start_of_day, utcnow

logger = logging.getLogger(__name__)

DEFAULT_FOCUS = ["culture", "food"]
SLOT_TEMPLATES = (time(9, 0), time(12, 30), time(16, 0))


def resolve_start_date(request: SynthesisRequest, now: datetime | None = None) -> datetime:
    """Requested start date, or tomorrow at start of day (UTC)."""
    if request.start_date is not None:
        return request.start_date
    return start_of_day((now or utcnow()) + timedelta(days=1))


def resolve_focus(request: SynthesisRequest) -> list[str]:
    """Focus tags from preferences, then the request, then the default pair."""
    preferred = request.preferences.get("focus")
    if isinstance(preferred, list) and preferred:
        return list(preferred)
    if request.focus:
        return list(request.focus)
    return list(DEFAULT_FOCUS)


def _category_for(tag: str) -> ActivityCategory:
    try:
        return ActivityCategory(tag)
    except ValueError:
        return ActivityCategory.general


def build_items(
    start_date: datetime, days: int, focus: list[str], itinerary_type: ItineraryType
) -> list[ActivityFields]:
    """Build the item drafts for every day and focus tag."""
    first_day = start_of_day(start_date)
    duration = timedelta(hours=1 if itinerary_type == ItineraryType.commute else 2)
    items: list[ActivityFields] = []

    for day_index in range(days):
        date = first_day + timedelta(days=day_index)

        for tag_index, tag in enumerate(focus):
            table = suggestions_for(tag)
            suggestion = table[(day_index + tag_index) % len(table)]
            slot = SLOT_TEMPLATES[tag_index % len(SLOT_TEMPLATES)]
            start_time = date.replace(hour=slot.hour, minute=slot.minute)

            items.append(
                ActivityFields(
                    name=suggestion.name,
                    category=_category_for(tag),
                    location=suggestion.location,
                    day=day_index + 1,
                    start_time=start_time,
                    end_time=start_time + duration,
                    travel_mode=(
                        TravelMode.public_transit if tag == "commute" else TravelMode.walk
                    ),
                    notes=suggestion.notes,
                )
            )

    return items


def build_summary(destination: str, focus: list[str], total_items: int) -> str:
    """Narrative sentence stored as ``preferences.aiSummary``."""
    focus_text = ", ".join(focus)
    return (
        f"AI generated {total_items} activities for {destination or 'your itinerary'} "
        f"focusing on {focus_text}."
    )


def build_synthesis_draft(request: SynthesisRequest, now: datetime | None = None) -> SynthesisDraft:
    """Fabricate an unpersisted itinerary payload and its items.

    Args:
        request: Synthesis request (already defaulted by validation)
        now: Clock reading used only when the start date is defaulted

    Returns:
        Draft to commit with ``create`` followed by ``replace_items``
    """
    start_date = resolve_start_date(request, now)
    focus = resolve_focus(request)
    items = build_items(start_date, request.days, focus, request.type)
    end_date = end_of_day(start_date + timedelta(days=request.days - 1))

    logger.info(
        f"[synth] destination={request.destination!r} days={request.days} "
        f"focus={focus} items={len(items)}"
    )

    itinerary = ItineraryCreate(
        title=request.title or f"{request.destination or 'Custom'} plan",
        type=request.type,
        destination=request.destination,
        start_location=request.start_location,
        start_date=start_date,
        end_date=end_date,
        preferences={
            **request.preferences,
            "focus": focus,
            "aiSummary": build_summary(request.destination, focus, len(items)),
        },
    )

    return SynthesisDraft(itinerary=itinerary, items=items)
