"""Dependency wiring from configuration."""

from __future__ import annotations

from sheet_orm.adapters.outbound.csv_decoder import ParseOptions
from sheet_orm.adapters.outbound.google_sheet_source import CacheOptions, GoogleSheetRowSource
from sheet_orm.application.sheet_orm import SheetORM
from sheet_orm.domain.errors import ValidationError
from sheet_orm.domain.services import OrderingEngine
from sheet_orm.infrastructure.config import Config, get_config
from sheet_orm.infrastructure.container import Container
from sheet_orm.infrastructure.metrics import MetricsRegistry, get_metrics
from sheet_orm.ports.outbound import RowSource


def _google_sheet_source(container: Container) -> RowSource:
    config = container.resolve(Config)
    if not config.source.sheet_id:
        raise ValidationError("Sheet ID is required (set SHEET_ORM_SOURCE__SHEET_ID)")
    return GoogleSheetRowSource(
        config.source.sheet_id,
        cache=CacheOptions(
            enabled=config.cache.enabled,
            duration=config.cache.duration_seconds,
        ),
        parse_options=ParseOptions(
            skip_empty_lines=config.parse.skip_empty_lines,
            delimiter=config.parse.delimiter,
        ),
        timeout=config.source.request_timeout_seconds,
        metrics=container.resolve(MetricsRegistry),
    )


def _sheet_orm(container: Container) -> SheetORM:
    config = container.resolve(Config)
    return SheetORM(
        container.resolve(RowSource),
        ordering=OrderingEngine(drop_incomplete_rows=config.query.drop_incomplete_rows),
        metrics=container.resolve(MetricsRegistry),
    )


def build_container(
    config: Config | None = None,
    container: Container | None = None,
) -> Container:
    """Register the config, metrics, row source and SheetORM.

    A RowSource already registered on the given container is kept, so
    callers can swap the spreadsheet for any other source.

    Args:
        config: Configuration to use. Defaults to get_config().
        container: Container to fill. A new one is created if None.

    Returns:
        The populated container.
    """
    container = container or Container()
    container.register_singleton(Config, config or get_config())
    if not container.has(MetricsRegistry):
        container.register_singleton(MetricsRegistry, get_metrics())
    if not container.has(RowSource):
        container.register_factory(RowSource, _google_sheet_source)
    container.register_factory(SheetORM, _sheet_orm)
    return container
