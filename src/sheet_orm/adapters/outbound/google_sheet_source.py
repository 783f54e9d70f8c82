"""Google Sheets row source adapter.

Fetches the CSV export of a publicly shared Google Sheet, decodes it
into rows, and caches the result for a configurable time.

Usage:
    source = GoogleSheetRowSource("1AbC...xyz", cache=CacheOptions(duration=60))
    rows = source.get_rows()        # fetches
    rows = source.get_rows()        # served from cache
    source.invalidate()             # next get_rows() fetches again

References:
    - Visualization API CSV export: /gviz/tq?tqx=out:csv
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

import requests

from sheet_orm.adapters.outbound.csv_decoder import CSVDecoder, ParseOptions
from sheet_orm.domain.errors import FetchError, ParseError, ValidationError
from sheet_orm.domain.value_objects import Row
from sheet_orm.infrastructure.logging import get_logger
from sheet_orm.infrastructure.metrics import MetricsRegistry, get_metrics
from sheet_orm.infrastructure.tracing import trace_span

logger = get_logger(__name__)

EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv"
DEFAULT_CACHE_SECONDS = 5 * 60


@dataclass(frozen=True)
class CacheOptions:
    """Cache settings for a spreadsheet source.

    Attributes:
        enabled: Serve cached rows while they are fresh.
        duration: Seconds cached rows stay fresh.
    """

    enabled: bool = True
    duration: float = DEFAULT_CACHE_SECONDS

    def __post_init__(self) -> None:
        _validate_duration(self.duration)


@dataclass(frozen=True)
class CacheStatus:
    """Snapshot of the cache state."""

    enabled: bool
    valid: bool
    last_fetch_time: float | None


def _validate_duration(duration: float) -> None:
    if isinstance(duration, bool) or not isinstance(duration, (int, float)) or duration <= 0:
        raise ValidationError("Cache duration must be a positive number")


class GoogleSheetRowSource:
    """RowSource backed by a Google Sheet CSV export.

    Thread Safety:
        A lock guards the cache; concurrent get_rows() calls on a cold
        cache fetch once.
    """

    def __init__(
        self,
        sheet_id: str,
        cache: CacheOptions | None = None,
        parse_options: ParseOptions | None = None,
        session: requests.Session | None = None,
        timeout: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            sheet_id: ID of the Google Sheet (from its URL).
            cache: Cache settings. Defaults to enabled, 5 minutes.
            parse_options: CSV decoding options.
            session: HTTP session to use. A new one is created if None.
            timeout: HTTP timeout in seconds.
            clock: Monotonic time source, injectable for tests.
            metrics: Metrics registry. Defaults to the global one.

        Raises:
            ValidationError: If sheet_id is missing or not a string.
        """
        if not isinstance(sheet_id, str):
            raise ValidationError("Sheet ID must be a string")
        if not sheet_id:
            raise ValidationError("Sheet ID is required")

        cache = cache or CacheOptions()
        self._sheet_id = sheet_id
        self._cache_enabled = cache.enabled
        self._cache_duration = float(cache.duration)
        self._decoder = CSVDecoder(parse_options)
        self._session = session or requests.Session()
        self._timeout = timeout
        self._clock = clock
        self._metrics = metrics or get_metrics()

        self._rows: list[Row] | None = None
        self._last_fetch_time: float | None = None
        self._lock = threading.Lock()

    @property
    def sheet_id(self) -> str:
        return self._sheet_id

    @property
    def url(self) -> str:
        """URL of the CSV export."""
        return EXPORT_URL.format(sheet_id=self._sheet_id)

    def _is_cache_valid(self) -> bool:
        if not self._cache_enabled or self._rows is None or self._last_fetch_time is None:
            return False
        return self._clock() - self._last_fetch_time < self._cache_duration

    def get_rows(self) -> list[Row]:
        """Return rows, from cache while fresh, otherwise freshly fetched.

        Raises:
            FetchError: If the export cannot be downloaded.
            ParseError: If the export cannot be decoded.
        """
        with self._lock:
            if self._is_cache_valid():
                self._metrics.cache_hits_total.inc()
                return self._rows  # type: ignore[return-value]

            self._metrics.cache_misses_total.inc()
            try:
                rows = self._fetch()
            except (FetchError, ParseError):
                self._rows = None
                raise

            if not rows:
                logger.warning("sheet_empty", sheet_id=self._sheet_id)
                self._rows = None
                return []

            self._rows = rows
            self._last_fetch_time = self._clock()
            return rows

    def _fetch(self) -> list[Row]:
        """Download and decode the export."""
        start = time.perf_counter()
        with trace_span("sheet_source.fetch", {"sheet.id": self._sheet_id}):
            try:
                response = self._session.get(self.url, timeout=self._timeout)
            except requests.RequestException as e:
                self._metrics.source_fetches_total.labels(status="fetch_error").inc()
                logger.error("sheet_fetch_failed", sheet_id=self._sheet_id, error=str(e))
                raise FetchError(str(e) or type(e).__name__) from e

            if not response.ok:
                self._metrics.source_fetches_total.labels(status="fetch_error").inc()
                logger.error(
                    "sheet_fetch_failed",
                    sheet_id=self._sheet_id,
                    status_code=response.status_code,
                )
                raise FetchError(response.reason or "Unknown error", response.status_code)

            try:
                rows = self._decoder.decode(response.text)
            except ParseError as e:
                self._metrics.source_fetches_total.labels(status="parse_error").inc()
                logger.error("sheet_parse_failed", sheet_id=self._sheet_id, errors=e.errors)
                raise

        elapsed = time.perf_counter() - start
        self._metrics.source_fetch_latency_seconds.observe(elapsed)
        self._metrics.source_fetches_total.labels(status="success" if rows else "empty").inc()
        logger.info("sheet_fetched", sheet_id=self._sheet_id, rows=len(rows), seconds=elapsed)
        return rows

    def invalidate(self) -> None:
        """Drop cached rows; the next get_rows() fetches again."""
        with self._lock:
            self._rows = None
            self._last_fetch_time = None

    def cache_status(self) -> CacheStatus:
        """Report whether caching is on and whether the cache is fresh."""
        with self._lock:
            return CacheStatus(
                enabled=self._cache_enabled,
                valid=self._is_cache_valid(),
                last_fetch_time=self._last_fetch_time,
            )

    def configure_caching(
        self,
        enabled: bool | None = None,
        duration: float | None = None,
    ) -> None:
        """Update cache settings.

        Raises:
            ValidationError: If duration is not a positive number.
        """
        if duration is not None:
            _validate_duration(duration)
        with self._lock:
            if enabled is not None:
                self._cache_enabled = enabled
            if duration is not None:
                self._cache_duration = float(duration)
