"""Tests for the chronological optimizer."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from backend.foxtrail.db.inmemory import InMemoryItineraryRepository
from backend.foxtrail.models import Activity, ActivityCreate, ItineraryCreate
from backend.foxtrail.orchestration.operations import optimize_itinerary
from backend.foxtrail.orchestration.optimizer import (
    OPTIMIZED_MESSAGE,
    chronological_key,
    optimize_items,
)

BASE = datetime(2025, 6, 10, tzinfo=UTC)


def _activity(name: str, hour: float | None = None, item_id: str | None = None) -> Activity:
    start = BASE + timedelta(hours=hour) if hour is not None else None
    return Activity(id=item_id or name, name=name, start_time=start)


def _is_sorted(items: list[Activity]) -> bool:
    keys = [chronological_key(item) for item in items]
    return all(a <= b for a, b in zip(keys, keys[1:]))  # type: ignore[operator]


def test_timed_items_sort_ascending() -> None:
    """Test items with start times are ordered by timestamp."""
    items = [_activity("Late", 18), _activity("Early", 7), _activity("Noon", 12)]

    result = optimize_items(items)

    assert [item.name for item in result] == ["Early", "Noon", "Late"]


def test_timed_items_come_before_untimed() -> None:
    """Test that an item with a start time sorts before one without."""
    items = [_activity("Anytime"), _activity("Scheduled", 23)]

    result = optimize_items(items)

    assert [item.name for item in result] == ["Scheduled", "Anytime"]


def test_untimed_items_sort_by_name_case_insensitively() -> None:
    """Test untimed items use locale-like name ordering."""
    items = [_activity("banana"), _activity("Cherry"), _activity("apple")]

    result = optimize_items(items)

    assert [item.name for item in result] == ["apple", "banana", "Cherry"]


def test_sort_is_stable_for_equal_times() -> None:
    """Test items with identical start times keep their relative order."""
    items = [
        _activity("Second listed", 9, item_id="b"),
        _activity("First listed", 9, item_id="a"),
    ]

    result = optimize_items(items)

    assert [item.id for item in result] == ["b", "a"]


def test_sequences_are_dense_and_one_based() -> None:
    """Test sequence numbers are 1..n with no gaps or duplicates."""
    items = [_activity(f"Item {i}", hour=(i * 7) % 5) for i in range(6)] + [_activity("Zed")]

    result = optimize_items(items)

    assert [item.sequence for item in result] == list(range(1, len(items) + 1))
    assert _is_sorted(result)


def test_optimize_is_idempotent() -> None:
    """Test applying the optimizer twice yields the identical list."""
    items = [_activity("b"), _activity("Late", 20), _activity("a"), _activity("Early", 6)]

    once = optimize_items(items)
    twice = optimize_items(once)

    assert twice == once


def test_optimize_does_not_mutate_input() -> None:
    """Test the input activities are left unchanged."""
    items = [_activity("Later", 10), _activity("Sooner", 8)]

    optimize_items(items)

    assert [item.name for item in items] == ["Later", "Sooner"]
    assert all(item.sequence is None for item in items)


def test_mixed_timezones_compare_by_instant() -> None:
    """Test start times with different offsets sort by absolute time."""
    jst = timezone(timedelta(hours=9))
    items = [
        Activity(id="utc", name="UTC 08:00", start_time=datetime(2025, 6, 10, 8, 0, tzinfo=UTC)),
        Activity(id="jst", name="JST 16:00", start_time=datetime(2025, 6, 10, 16, 0, tzinfo=jst)),
    ]

    result = optimize_items(items)

    assert [item.id for item in result] == ["jst", "utc"]


class TestOptimizeItinerary:
    """Test the optimize operation over a repository."""

    @pytest.fixture
    def repository(self) -> InMemoryItineraryRepository:
        repository = InMemoryItineraryRepository()
        repository.initialize()
        return repository

    def test_scenario_two_timed_one_untimed(self, repository: InMemoryItineraryRepository) -> None:
        """Test 10:00, 08:00 and untimed items end up 08:00, 10:00, untimed."""
        itinerary = repository.create(ItineraryCreate(title="Scenario"))
        repository.add_item(
            itinerary.id, ActivityCreate(name="Ten", start_time=BASE.replace(hour=10))
        )
        repository.add_item(
            itinerary.id, ActivityCreate(name="Eight", start_time=BASE.replace(hour=8))
        )
        repository.add_item(itinerary.id, ActivityCreate(name="Whenever"))

        result = optimize_itinerary(repository, itinerary.id)

        assert result is not None
        assert result.message == OPTIMIZED_MESSAGE
        assert [item.name for item in result.items] == ["Eight", "Ten", "Whenever"]
        assert [item.sequence for item in result.items] == [1, 2, 3]

        stored = repository.get_by_id(itinerary.id)
        assert stored is not None
        assert stored.items == result.items

    def test_running_twice_keeps_order_and_ids(
        self, repository: InMemoryItineraryRepository
    ) -> None:
        """Test the persisted result is stable across repeated runs."""
        itinerary = repository.create(ItineraryCreate())
        for name in ["b", "c", "a"]:
            repository.add_item(itinerary.id, ActivityCreate(name=name))

        first = optimize_itinerary(repository, itinerary.id)
        second = optimize_itinerary(repository, itinerary.id)

        assert first is not None and second is not None
        assert second.items == first.items

    def test_missing_itinerary_returns_none(self, repository: InMemoryItineraryRepository) -> None:
        """Test optimizing an unknown itinerary is NotFound."""
        assert optimize_itinerary(repository, "missing") is None
