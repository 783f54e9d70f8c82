"""Row Source port for supplying the current row-set.

This outbound port defines the contract for whatever owns the rows the
query engine reads: an in-memory list, a spreadsheet export, or anything
else that can produce a materialized sequence of rows.

The row source is responsible for:
- Fetching or building rows on demand
- Caching them between calls, if it chooses to
- Reporting fetch and decode failures as SourceError subclasses
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, Sequence, runtime_checkable

from sheet_orm.domain.value_objects import Row


@runtime_checkable
class RowSource(Protocol):
    """Protocol for row-set providers.

    Lifecycle: construct, then get_rows() fetches or serves cached rows,
    and invalidate() forces the next get_rows() to fetch again.

    Thread Safety:
        Implementations must allow concurrent get_rows() calls. The
        returned rows must not be mutated by callers.
    """

    @abstractmethod
    def get_rows(self) -> Sequence[Row]:
        """Return the current row-set.

        Returns:
            The rows, fully materialized. May be empty.

        Raises:
            FetchError: If the rows could not be retrieved.
            ParseError: If the retrieved data could not be decoded.
        """
        ...

    @abstractmethod
    def invalidate(self) -> None:
        """Discard any cached rows so the next read fetches again."""
        ...
