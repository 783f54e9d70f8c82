"""Pytest configuration and fixtures for sheet_orm tests."""

from __future__ import annotations

from typing import Any, Generator

import pytest
from prometheus_client import CollectorRegistry

from sheet_orm.adapters.outbound import InMemoryRowSource
from sheet_orm.application import SheetORM
from sheet_orm.infrastructure.config import Config, CacheConfig, SourceConfig
from sheet_orm.infrastructure.container import Container
from sheet_orm.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def people() -> list[dict[str, Any]]:
    """The four-person row-set used across query tests."""
    return [
        {"id": 1, "name": "Alice", "age": 25},
        {"id": 2, "name": "Bob", "age": 30},
        {"id": 3, "name": "Charlie", "age": 35},
        {"id": 4, "name": "David", "age": 28},
    ]


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def source(people: list[dict[str, Any]]) -> InMemoryRowSource:
    """Provide an in-memory source over the sample people."""
    return InMemoryRowSource(people)


@pytest.fixture
def orm(source: InMemoryRowSource, metrics_registry: MetricsRegistry) -> SheetORM:
    """Provide a SheetORM over the sample people."""
    return SheetORM(source, metrics=metrics_registry)


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration pointing at a dummy sheet."""
    return Config(
        source=SourceConfig(sheet_id="test-sheet", request_timeout_seconds=1.0),
        cache=CacheConfig(enabled=True, duration_seconds=60.0),
    )


@pytest.fixture
def container() -> Generator[Container, None, None]:
    """Provide a fresh DI container for each test."""
    c = Container()
    yield c
    c.clear()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
