"""Tests for model defaults, validation defaulting and camelCase wire format."""

from datetime import UTC, datetime

from backend.foxtrail.models import (
    Activity,
    ActivityCategory,
    ActivityCreate,
    ActivityPatch,
    ItineraryCreate,
    ItineraryPatch,
    ItineraryType,
    SynthesisRequest,
    TravelMode,
)


def test_activity_invalid_values_fall_back_to_defaults() -> None:
    """Test invalid optional fields are replaced, not rejected."""
    activity = ActivityCreate.model_validate(
        {
            "name": "",
            "category": "shopping",
            "travelMode": "teleport",
            "day": 0,
            "startTime": "not a timestamp",
            "location": None,
        }
    )

    assert activity.name == "Untitled item"
    assert activity.category == ActivityCategory.general
    assert activity.travel_mode == TravelMode.walk
    assert activity.day is None
    assert activity.start_time is None
    assert activity.location == ""


def test_activity_accepts_camel_case_and_snake_case() -> None:
    """Test both wire and attribute names populate fields."""
    camel = ActivityCreate.model_validate(
        {"travelMode": "public-transit", "startTime": "2025-06-10T09:00:00Z"}
    )
    snake = ActivityCreate(travel_mode=TravelMode.public_transit)

    assert camel.travel_mode == TravelMode.public_transit
    assert snake.travel_mode == TravelMode.public_transit
    assert camel.start_time == datetime(2025, 6, 10, 9, 0, tzinfo=UTC)


def test_naive_timestamps_are_read_as_utc() -> None:
    """Test naive input gets the UTC timezone."""
    activity = ActivityCreate.model_validate({"startTime": "2025-06-10T09:00:00"})

    assert activity.start_time is not None
    assert activity.start_time.tzinfo is not None
    assert activity.start_time.utcoffset().total_seconds() == 0  # type: ignore[union-attr]


def test_activity_serializes_with_camel_case_keys() -> None:
    """Test the persisted/wire format uses camelCase keys."""
    activity = Activity(id="a1", name="Hike", travel_mode=TravelMode.bike, sequence=2)

    data = activity.model_dump(mode="json", by_alias=True)

    assert data["travelMode"] == "bike"
    assert data["startTime"] is None
    assert data["sequence"] == 2
    assert "travel_mode" not in data


def test_itinerary_create_defaults_and_invalid_type() -> None:
    """Test itinerary creation defaults."""
    payload = ItineraryCreate.model_validate(
        {"title": "", "type": "vacation", "collaborators": ["a", "b", "a"]}
    )

    assert payload.title == "Untitled Itinerary"
    assert payload.type == ItineraryType.custom
    assert payload.collaborators == ["a", "b"]
    assert payload.start_date is None


def test_patch_changes_only_include_provided_fields() -> None:
    """Test shallow-merge payloads report exactly the provided keys."""
    patch = ItineraryPatch.model_validate({"destination": "Porto"})

    assert patch.changes() == {"destination": "Porto"}


def test_activity_patch_keeps_explicit_null_for_nullable_fields() -> None:
    """Test nullable activity fields can be cleared while others cannot."""
    patch = ActivityPatch.model_validate({"day": None, "endTime": None, "name": None})

    assert patch.changes() == {"day": None, "end_time": None}


def test_synthesis_request_defaults() -> None:
    """Test synthesis request defaults and invalid day counts."""
    assert SynthesisRequest().days == 3
    assert SynthesisRequest().type == ItineraryType.trip
    assert SynthesisRequest.model_validate({"days": 0}).days == 3
    assert SynthesisRequest.model_validate({"days": "many"}).days == 3
    assert SynthesisRequest.model_validate({"days": 5}).days == 5


def test_synthesis_request_caps_day_count() -> None:
    """Test oversized day counts are clamped to two weeks."""
    assert SynthesisRequest.model_validate({"days": 14}).days == 14
    assert SynthesisRequest.model_validate({"days": 10_000_000}).days == 14


def test_invalid_preference_entries_are_dropped_individually() -> None:
    """Test one bad preference value does not discard the valid ones."""
    payload = {"focus": ["nature"], "note": None, "nested": {"a": 1}, "pace": 2}

    created = ItineraryCreate.model_validate({"preferences": payload})
    patch = ItineraryPatch.model_validate({"preferences": payload})
    request = SynthesisRequest.model_validate({"preferences": payload})

    expected = {"focus": ["nature"], "pace": 2}
    assert created.preferences == expected
    assert patch.changes() == {"preferences": expected}
    assert request.preferences == expected


def test_non_mapping_preferences_fall_back_to_empty() -> None:
    """Test a preferences value that is not an object becomes empty."""
    assert ItineraryCreate.model_validate({"preferences": ["focus"]}).preferences == {}
