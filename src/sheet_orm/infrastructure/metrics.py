"""Prometheus metrics for the sheet query engine."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all query engine metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Query metrics
        self.queries_total = Counter(
            "sheet_orm_queries_total",
            "Total number of queries executed",
            ["operation", "status"],  # status: success, error
            registry=self._registry,
        )

        self.query_latency_seconds = Histogram(
            "sheet_orm_query_latency_seconds",
            "Query latency in seconds",
            ["operation"],  # find_many, find_unique, find_first, find_last, count
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
            registry=self._registry,
        )

        self.rows_returned_total = Counter(
            "sheet_orm_rows_returned_total",
            "Total rows returned by find_many pipelines",
            registry=self._registry,
        )

        # Source metrics
        self.source_fetches_total = Counter(
            "sheet_orm_source_fetches_total",
            "Total spreadsheet fetches",
            ["status"],  # success, fetch_error, parse_error, empty
            registry=self._registry,
        )

        self.source_fetch_latency_seconds = Histogram(
            "sheet_orm_source_fetch_latency_seconds",
            "Spreadsheet fetch latency in seconds",
            buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
            registry=self._registry,
        )

        # Cache metrics
        self.cache_hits_total = Counter(
            "sheet_orm_cache_hits_total",
            "Total row cache hits",
            registry=self._registry,
        )

        self.cache_misses_total = Counter(
            "sheet_orm_cache_misses_total",
            "Total row cache misses",
            registry=self._registry,
        )

        # Server info
        self.info = Info(
            "sheet_orm",
            "Sheet query engine information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from sheet_orm import __version__
    _metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
