"""Outbound adapters - row source implementations."""

from sheet_orm.adapters.outbound.csv_decoder import CSVDecoder, ParseOptions, convert_cell
from sheet_orm.adapters.outbound.google_sheet_source import (
    CacheOptions,
    CacheStatus,
    GoogleSheetRowSource,
)
from sheet_orm.adapters.outbound.memory_row_source import InMemoryRowSource

__all__ = [
    "CSVDecoder",
    "ParseOptions",
    "convert_cell",
    "CacheOptions",
    "CacheStatus",
    "GoogleSheetRowSource",
    "InMemoryRowSource",
]
