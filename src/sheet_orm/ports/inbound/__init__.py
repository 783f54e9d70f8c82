"""Inbound ports - APIs offered to clients."""

from sheet_orm.ports.inbound.query_engine import Options, QueryEngine

__all__ = [
    "Options",
    "QueryEngine",
]
