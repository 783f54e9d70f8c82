"""Infrastructure layer - cross-cutting concerns."""

from sheet_orm.infrastructure.config import Config, get_config
from sheet_orm.infrastructure.logging import setup_logging, get_logger
from sheet_orm.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from sheet_orm.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
