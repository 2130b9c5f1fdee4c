"""Prometheus metrics for the itinerary store and derived operations."""

from prometheus_client import Counter, Histogram

store_operations_total = Counter(
    "store_operations_total",
    "Total itinerary store operations",
    ["operation", "outcome"],
)

store_write_latency_ms = Histogram(
    "store_write_latency_ms",
    "Full-document write latency in milliseconds",
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

itineraries_synthesized_total = Counter(
    "itineraries_synthesized_total",
    "Total itineraries created by the template synthesizer",
)

itineraries_optimized_total = Counter(
    "itineraries_optimized_total",
    "Total chronological reorderings applied",
)


class PrometheusStoreMetrics:
    """Prometheus-based store metrics implementation."""

    def record_operation(self, operation: str, outcome: str) -> None:
        """Count a store operation by outcome."""
        store_operations_total.labels(operation=operation, outcome=outcome).inc()

    def record_write_latency(self, latency_ms: float) -> None:
        """Record document write latency."""
        store_write_latency_ms.observe(latency_ms)

    def inc_synthesized(self) -> None:
        """Increment synthesized itinerary counter."""
        itineraries_synthesized_total.inc()

    def inc_optimized(self) -> None:
        """Increment optimized itinerary counter."""
        itineraries_optimized_total.inc()
