"""First-run sample data for an empty store."""

from datetime import datetime, timedelta

from backend.foxtrail.models.common import ActivityCategory, ItineraryType, TravelMode
from backend.foxtrail.models.itinerary import Activity, Itinerary
from backend.foxtrail.utils.dates import end_of_day, new_id, start_of_day


def build_seed_itineraries(now: datetime) -> list[Itinerary]:
    """Build the sample Kyoto itinerary, dated relative to ``now``.

    Args:
        now: Creation timestamp (aware)

    Returns:
        Single-element list with the sample itinerary
    """
    first_day = start_of_day(now + timedelta(days=3))

    def at(hour: int) -> datetime:
        return first_day + timedelta(hours=hour)

    items = [
        Activity(
            id=new_id(),
            name="Kiyomizu-dera Temple visit",
            category=ActivityCategory.culture,
            location="Kiyomizu-dera",
            day=1,
            start_time=at(9),
            end_time=at(11),
            travel_mode=TravelMode.public_transit,
            notes="Arrive before opening crowds; capture skyline views of Kyoto.",
        ),
        Activity(
            id=new_id(),
            name="Tea ceremony workshop",
            category=ActivityCategory.culture,
            location="Camellia Tea House",
            day=1,
            start_time=at(13),
            end_time=at(15),
            travel_mode=TravelMode.walk,
            notes="Hands-on session introducing tea etiquette.",
        ),
        Activity(
            id=new_id(),
            name="Nishiki Market street food crawl",
            category=ActivityCategory.food,
            location="Nishiki Market",
            day=1,
            start_time=at(18),
            end_time=at(20),
            travel_mode=TravelMode.walk,
            notes="Sample seasonal snacks, tofu donuts and matcha sweets.",
        ),
    ]

    return [
        Itinerary(
            id=new_id(),
            title="Kyoto Culture & Study Retreat",
            type=ItineraryType.trip,
            destination="Kyoto, Japan",
            start_location="Kyoto Station",
            start_date=first_day,
            end_date=end_of_day(now + timedelta(days=7)),
            collaborators=[],
            preferences={
                "focus": ["culture", "food"],
                "budget": "moderate",
                "aiSummary": (
                    "A four-day exploration of Kyoto that balances temples, tea ceremonies "
                    "and evening food adventures. Generated sample data."
                ),
            },
            ai_generated=True,
            created_at=now,
            updated_at=now,
            items=items,
        )
    ]
