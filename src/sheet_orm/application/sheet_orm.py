"""SheetORM - unified entry point for querying a row-set.

This module provides the SheetORM class that runs the query pipeline
over the rows of an injected row source:

    rows -> where -> orderBy -> offset -> limit -> select -> result

Usage:
    from sheet_orm.application import SheetORM
    from sheet_orm.adapters.outbound import GoogleSheetRowSource

    orm = SheetORM(GoogleSheetRowSource("1AbC...xyz"))

    adults = orm.find_many({"where": {"age": {"gte": 18}}})
    oldest = orm.find_first(orderBy={"key": "age", "order": "desc"})
    bob = orm.find_unique(where={"name": "Bob"})
    total = orm.count()
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Generator

from sheet_orm.domain.errors import MultipleResultsError, SheetORMError
from sheet_orm.domain.services import OrderingEngine, apply_where, project
from sheet_orm.domain.value_objects import QueryOptions, Row, infer_schema
from sheet_orm.infrastructure.logging import get_logger
from sheet_orm.infrastructure.metrics import MetricsRegistry, get_metrics
from sheet_orm.infrastructure.tracing import trace_span
from sheet_orm.ports.inbound import Options
from sheet_orm.ports.outbound import RowSource

logger = get_logger(__name__)


class SheetORM:
    """Query orchestrator over a row source.

    Every operation reads the source's current snapshot, then filters,
    orders and paginates it. Nothing is kept between calls; caching, if
    any, belongs to the source.

    Options can be given as a QueryOptions, a raw mapping in the JSON
    shape ({"where": ..., "orderBy": ..., "select": ..., "limit": ...,
    "offset": ...}), or keyword arguments of the same names.

    Thread Safety:
        Operations never mutate the source rows or the options, so one
        instance can serve concurrent callers if its source can.
    """

    def __init__(
        self,
        source: RowSource,
        ordering: OrderingEngine | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            source: Supplies the row-set for every query.
            ordering: Ordering engine. Defaults to one that drops rows with
                null fields whenever an ordering is requested.
            metrics: Metrics registry. Defaults to the global one.
        """
        self._source = source
        self._ordering = ordering or OrderingEngine()
        self._metrics = metrics or get_metrics()

    @property
    def source(self) -> RowSource:
        return self._source

    @contextmanager
    def _observe(self, operation: str) -> Generator[None, None, None]:
        """Record latency, outcome and a trace span for one operation."""
        start = time.perf_counter()
        with trace_span(f"sheet_orm.{operation}", {"query.operation": operation}):
            try:
                yield
            except SheetORMError as e:
                self._metrics.queries_total.labels(operation=operation, status="error").inc()
                logger.warning("query_failed", operation=operation, error=str(e))
                raise
            finally:
                self._metrics.query_latency_seconds.labels(operation=operation).observe(
                    time.perf_counter() - start
                )
        self._metrics.queries_total.labels(operation=operation, status="success").inc()

    def _execute(self, query: QueryOptions) -> list[Row]:
        """Run the full pipeline for validated options."""
        rows = self._source.get_rows()
        if not rows:
            return []

        schema = infer_schema(rows)
        result = apply_where(rows, query.where)
        result = self._ordering.order(result, query.order_by)
        result = project(result, query, schema)

        self._metrics.rows_returned_total.inc(len(result))
        logger.debug(
            "query_executed",
            source_rows=len(rows),
            result_rows=len(result),
            where=sorted(query.where),
            order_by=[str(key) for key in query.order_by],
        )
        return result

    def find_many(self, options: Options = None, **kwargs: Any) -> list[Row]:
        """Return every row selected by the options.

        Returns:
            The rows in result order; empty if the source has no rows.

        Raises:
            ValidationError: If the options are invalid.
            SourceError: If the row source fails.
        """
        with self._observe("find_many"):
            return self._execute(QueryOptions.coerce(options, **kwargs))

    def find_unique(self, options: Options = None, **kwargs: Any) -> Row | None:
        """Return the single selected row, or None if no row matched.

        Raises:
            MultipleResultsError: If more than one row is selected.
        """
        with self._observe("find_unique"):
            results = self._execute(QueryOptions.coerce(options, **kwargs))
            if len(results) > 1:
                raise MultipleResultsError(len(results))
            return results[0] if results else None

    def find_first(self, options: Options = None, **kwargs: Any) -> Row | None:
        """Return the first selected row, or None."""
        with self._observe("find_first"):
            results = self._execute(QueryOptions.coerce(options, **kwargs))
            return results[0] if results else None

    def find_last(self, options: Options = None, **kwargs: Any) -> Row | None:
        """Return the last selected row, or None."""
        with self._observe("find_last"):
            results = self._execute(QueryOptions.coerce(options, **kwargs))
            return results[-1] if results else None

    def count(self, options: Options = None, **kwargs: Any) -> int:
        """Return the number of rows find_many would return.

        Pagination options apply here too: count(limit=2) is at most 2.
        """
        with self._observe("count"):
            return len(self._execute(QueryOptions.coerce(options, **kwargs)))

    def reset(self) -> None:
        """Discard the source's cached rows so the next query fetches again."""
        self._source.invalidate()
        logger.info("source_reset")
