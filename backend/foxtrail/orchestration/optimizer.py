"""Chronological optimizer - reorders activities by start time."""

from collections.abc import Sequence
from datetime import datetime

from backend.foxtrail.models.itinerary import Activity

OPTIMIZED_MESSAGE = "Itinerary order optimised by chronological sequence."


def chronological_key(item: Activity) -> tuple[int, datetime] | tuple[int, str, str]:
    """Sort key: timed items first by start time, then untimed items by name.

    Names compare case-insensitively first, with the raw name as tie-break,
    so "apple" sorts before "Banana" as a locale-aware comparison would.
    """
    if item.start_time is not None:
        return (0, item.start_time)
    return (1, item.name.casefold(), item.name)


def optimize_items(items: Sequence[Activity]) -> list[Activity]:
    """Return copies of the items in chronological order with dense sequences.

    The sort is stable, so items with equal keys keep their relative order and
    re-running on the output yields the same list.

    Args:
        items: Activities in their current order

    Returns:
        New list with ``sequence`` set to 1..n
    """
    ordered = sorted(items, key=chronological_key)
    return [
        item.model_copy(update={"sequence": index}, deep=True)
        for index, item in enumerate(ordered, start=1)
    ]
