"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the systems the query engine reads
from, namely the source of the row-set.
"""

from sheet_orm.ports.outbound.row_source import RowSource

__all__ = [
    "RowSource",
]
