"""In-memory row source adapter.

A simple implementation of RowSource over a list held in memory. Useful
for tests, for embedding the engine over rows obtained elsewhere, and as
a deterministic stand-in for the spreadsheet source.

Usage:
    source = InMemoryRowSource([{"id": 1, "name": "Alice"}])
    orm = SheetORM(source)
"""

from __future__ import annotations

from typing import Iterable, Mapping

from sheet_orm.domain.value_objects import Row, Scalar, freeze_rows


class InMemoryRowSource:
    """In-memory implementation of RowSource.

    Rows are copied into read-only mappings on construction, so later
    changes to the caller's dictionaries never leak into queries.
    """

    def __init__(self, rows: Iterable[Mapping[str, Scalar]] = ()) -> None:
        """Snapshot the given rows."""
        self._rows: tuple[Row, ...] = tuple(freeze_rows(rows))

    def get_rows(self) -> tuple[Row, ...]:
        """Return the current snapshot."""
        return self._rows

    def invalidate(self) -> None:
        """Nothing is cached, so there is nothing to discard."""

    def replace(self, rows: Iterable[Mapping[str, Scalar]]) -> None:
        """Swap in a new snapshot of rows."""
        self._rows = tuple(freeze_rows(rows))

    def __len__(self) -> int:
        return len(self._rows)
