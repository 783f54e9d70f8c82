"""Unit tests for the Google Sheets row source."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import requests

from sheet_orm.adapters.outbound import CacheOptions, GoogleSheetRowSource, ParseOptions
from sheet_orm.domain.errors import FetchError, ParseError, ValidationError
from sheet_orm.infrastructure.metrics import MetricsRegistry

CSV = '"id","name","age"\n"1","Alice","25"\n"2","Bob","30"\n'


@dataclass
class FakeResponse:
    status_code: int = 200
    text: str = CSV
    reason: str = "OK"

    @property
    def ok(self) -> bool:
        return self.status_code < 400


@dataclass
class FakeSession:
    """Stands in for requests.Session, replaying queued responses."""

    responses: list = field(default_factory=list)
    calls: list = field(default_factory=list)

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.calls.append(url)
        item = self.responses.pop(0) if self.responses else FakeResponse()
        if isinstance(item, Exception):
            raise item
        return item


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_source(session: FakeSession, clock: FakeClock, metrics_registry: MetricsRegistry):
    def _make(**kwargs) -> GoogleSheetRowSource:
        return GoogleSheetRowSource(
            "sheet-123",
            session=session,  # type: ignore[arg-type]
            clock=clock,
            metrics=metrics_registry,
            **kwargs,
        )

    return _make


@pytest.mark.unit
class TestConstruction:
    """Tests for constructor validation."""

    def test_sheet_id_required(self, metrics_registry: MetricsRegistry) -> None:
        """An empty sheet ID is rejected."""
        with pytest.raises(ValidationError, match="required"):
            GoogleSheetRowSource("", metrics=metrics_registry)

    def test_sheet_id_must_be_string(self, metrics_registry: MetricsRegistry) -> None:
        """A non-string sheet ID is rejected."""
        with pytest.raises(ValidationError, match="string"):
            GoogleSheetRowSource(123, metrics=metrics_registry)  # type: ignore[arg-type]

    def test_cache_duration_must_be_positive(self) -> None:
        """Zero or negative durations are rejected."""
        with pytest.raises(ValidationError):
            CacheOptions(duration=0)
        with pytest.raises(ValidationError):
            CacheOptions(duration=-5)

    def test_export_url(self, make_source) -> None:
        """The CSV export URL embeds the sheet ID."""
        source = make_source()
        assert source.url == "https://docs.google.com/spreadsheets/d/sheet-123/gviz/tq?tqx=out:csv"


@pytest.mark.unit
class TestFetching:
    """Tests for fetching and caching rows."""

    def test_fetch_decodes_rows(self, make_source, session: FakeSession) -> None:
        """Rows come back typed."""
        rows = make_source().get_rows()
        assert [dict(r) for r in rows] == [
            {"id": 1, "name": "Alice", "age": 25},
            {"id": 2, "name": "Bob", "age": 30},
        ]
        assert len(session.calls) == 1

    def test_cache_serves_second_call(
        self, make_source, session: FakeSession, metrics_registry: MetricsRegistry
    ) -> None:
        """A fresh cache avoids another request."""
        source = make_source()
        source.get_rows()
        source.get_rows()
        assert len(session.calls) == 1
        assert metrics_registry.cache_hits_total._value.get() == 1
        assert metrics_registry.cache_misses_total._value.get() == 1

    def test_cache_expires(self, make_source, session: FakeSession, clock: FakeClock) -> None:
        """After the duration passes the rows are fetched again."""
        source = make_source(cache=CacheOptions(duration=60))
        source.get_rows()
        clock.now += 59
        source.get_rows()
        assert len(session.calls) == 1

        clock.now += 2
        source.get_rows()
        assert len(session.calls) == 2

    def test_cache_disabled(self, make_source, session: FakeSession) -> None:
        """With caching off every call fetches."""
        source = make_source(cache=CacheOptions(enabled=False))
        source.get_rows()
        source.get_rows()
        assert len(session.calls) == 2

    def test_invalidate_forces_fetch(self, make_source, session: FakeSession) -> None:
        """invalidate() drops the cache."""
        source = make_source()
        source.get_rows()
        source.invalidate()
        source.get_rows()
        assert len(session.calls) == 2

    def test_http_error(self, make_source, session: FakeSession) -> None:
        """Non-2xx responses raise FetchError with the status code."""
        session.responses.append(FakeResponse(status_code=404, text="", reason="Not Found"))
        with pytest.raises(FetchError) as exc_info:
            make_source().get_rows()
        assert exc_info.value.status_code == 404
        assert "Not Found" in str(exc_info.value)

    def test_transport_error(self, make_source, session: FakeSession) -> None:
        """Connection failures raise FetchError without a status code."""
        session.responses.append(requests.ConnectionError("connection refused"))
        with pytest.raises(FetchError, match="connection refused") as exc_info:
            make_source().get_rows()
        assert exc_info.value.status_code is None

    def test_parse_error(self, make_source, session: FakeSession) -> None:
        """Malformed CSV raises ParseError."""
        session.responses.append(FakeResponse(text="id,name\n1\n"))
        with pytest.raises(ParseError):
            make_source().get_rows()

    def test_failure_clears_cache(self, make_source, session: FakeSession, clock: FakeClock) -> None:
        """A failed refresh leaves no stale rows behind."""
        source = make_source(cache=CacheOptions(duration=10))
        source.get_rows()
        clock.now += 11
        session.responses.append(FakeResponse(status_code=500, reason="Server Error"))
        with pytest.raises(FetchError):
            source.get_rows()
        assert source.cache_status().valid is False

    def test_empty_sheet(self, make_source, session: FakeSession) -> None:
        """An empty sheet yields no rows and is not cached."""
        session.responses.append(FakeResponse(text='"id","name"\n'))
        source = make_source()
        assert source.get_rows() == []
        assert source.cache_status().valid is False
        source.get_rows()
        assert len(session.calls) == 2

    def test_parse_options_applied(self, make_source, session: FakeSession) -> None:
        """Parse options reach the decoder."""
        session.responses.append(FakeResponse(text="id;name\n1;Alice\n"))
        source = make_source(parse_options=ParseOptions(delimiter=";"))
        assert dict(source.get_rows()[0]) == {"id": 1, "name": "Alice"}


@pytest.mark.unit
class TestCacheControl:
    """Tests for cache status and configuration."""

    def test_status_lifecycle(self, make_source, clock: FakeClock) -> None:
        """Status reflects fetches and invalidation."""
        source = make_source()
        status = source.cache_status()
        assert status.enabled is True
        assert status.valid is False
        assert status.last_fetch_time is None

        source.get_rows()
        status = source.cache_status()
        assert status.valid is True
        assert status.last_fetch_time == clock.now

        source.invalidate()
        assert source.cache_status().valid is False

    def test_configure_caching(self, make_source, session: FakeSession, clock: FakeClock) -> None:
        """Settings can change after construction."""
        source = make_source()
        source.get_rows()
        source.configure_caching(duration=1)
        clock.now += 2
        source.get_rows()
        assert len(session.calls) == 2

        source.configure_caching(enabled=False)
        assert source.cache_status().enabled is False
        assert source.cache_status().valid is False

    def test_configure_rejects_bad_duration(self, make_source) -> None:
        """Durations must stay positive."""
        with pytest.raises(ValidationError):
            make_source().configure_caching(duration=0)
