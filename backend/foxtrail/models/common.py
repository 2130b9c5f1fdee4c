"""Common types and enums shared across all models."""

from collections.abc import Callable
from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    WrapValidator,
)
from pydantic.alias_generators import to_camel


class ItineraryType(str, Enum):
    """Kind of itinerary."""

    trip = "trip"
    daily = "daily"
    commute = "commute"
    custom = "custom"


class ActivityCategory(str, Enum):
    """Activity category, also used as synthesis focus tag."""

    general = "general"
    culture = "culture"
    food = "food"
    nature = "nature"
    productivity = "productivity"
    commute = "commute"


class TravelMode(str, Enum):
    """How the traveller reaches an activity."""

    walk = "walk"
    public_transit = "public-transit"
    drive = "drive"
    bike = "bike"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def default_on_invalid(default: Any) -> WrapValidator:
    """Build a wrap validator that swaps missing or invalid input for a default.

    Args:
        default: Value (or zero-arg factory) used when validation fails

    Returns:
        WrapValidator usable inside ``Annotated``
    """

    def _validate(value: Any, handler: Callable[[Any], Any]) -> Any:
        if value is None or value == "":
            return default() if callable(default) else default
        try:
            return handler(value)
        except ValidationError:
            return default() if callable(default) else default

    return WrapValidator(_validate)


def _ensure_utc(value: datetime | None) -> datetime | None:
    """Treat naive timestamps as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _positive_or_none(value: int | None) -> int | None:
    if value is not None and value < 1:
        return None
    return value


def _dedupe(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


# Aware timestamps; naive input is read as UTC
Timestamp = Annotated[datetime, AfterValidator(_ensure_utc)]

# Optional timestamp that falls back to None on unparseable input
OptionalTimestamp = Annotated[
    datetime | None, AfterValidator(_ensure_utc), default_on_invalid(None)
]

DayIndex = Annotated[int | None, AfterValidator(_positive_or_none), default_on_invalid(None)]

# Open preference bag values
PreferenceValue = bool | int | float | str | list[str]

_preference_value = TypeAdapter(PreferenceValue)


def _keep_valid_preferences(value: Any) -> Any:
    """Drop individual entries whose value is not a PreferenceValue."""
    if not isinstance(value, dict):
        return value
    kept: dict[str, PreferenceValue] = {}
    for key, entry in value.items():
        try:
            kept[str(key)] = _preference_value.validate_python(entry)
        except ValidationError:
            continue
    return kept


Preferences = Annotated[dict[str, PreferenceValue], BeforeValidator(_keep_valid_preferences)]

Collaborators = Annotated[list[str], AfterValidator(_dedupe)]
