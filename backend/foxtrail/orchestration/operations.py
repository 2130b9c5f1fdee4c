"""Derived operations composed over the itinerary repository."""

import logging
from datetime import datetime

from backend.foxtrail.db.repositories import ItineraryRepository
from backend.foxtrail.models.itinerary import Itinerary
from backend.foxtrail.models.operations import OptimizationResult, SyncResult, SynthesisRequest
from backend.foxtrail.orchestration.optimizer import OPTIMIZED_MESSAGE, optimize_items
from backend.foxtrail.orchestration.synth import build_synthesis_draft
from backend.foxtrail.utils.dates import utcnow
from backend.foxtrail.utils.metrics import PrometheusStoreMetrics

logger = logging.getLogger(__name__)

SYNC_MESSAGE = "Calendar sync simulated successfully."

_metrics = PrometheusStoreMetrics()


def optimize_itinerary(
    repository: ItineraryRepository, itinerary_id: str
) -> OptimizationResult | None:
    """Reorder an itinerary's items chronologically and persist the order.

    Returns:
        Message and reordered items, or None if the itinerary is missing
    """
    itinerary = repository.get_by_id(itinerary_id)
    if itinerary is None:
        return None

    items = repository.replace_items(itinerary_id, optimize_items(itinerary.items))
    if items is None:
        return None

    _metrics.inc_optimized()
    logger.info(f"[optimize] itinerary_id={itinerary_id} items={len(items)}")
    return OptimizationResult(message=OPTIMIZED_MESSAGE, items=items)


def synthesize_itinerary(
    repository: ItineraryRepository,
    request: SynthesisRequest,
    now: datetime | None = None,
) -> Itinerary:
    """Build a draft, commit it and return the stored record.

    Args:
        repository: Target repository
        request: Synthesis request
        now: Clock reading used only when the start date is defaulted

    Returns:
        Committed itinerary including its generated items
    """
    draft = build_synthesis_draft(request, now)
    itinerary = repository.create(draft.itinerary, ai_generated=True)
    items = repository.replace_items(itinerary.id, draft.items)

    _metrics.inc_synthesized()
    logger.info(f"[synthesize] itinerary_id={itinerary.id} items={len(items or [])}")

    committed = repository.get_by_id(itinerary.id)
    return committed if committed is not None else itinerary


def sync_itinerary(repository: ItineraryRepository, itinerary_id: str) -> SyncResult | None:
    """Simulate a calendar sync; no external call is made.

    Returns:
        Confirmation with the sync time, or None if the itinerary is missing
    """
    if repository.get_by_id(itinerary_id) is None:
        return None
    return SyncResult(message=SYNC_MESSAGE, synced_at=utcnow())
