"""Query Engine port offered to callers.

This inbound port defines the operations a caller can run against a
row-set. Every operation takes the same query options and runs the same
pipeline: where, then orderBy, then offset/limit/select.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Mapping, Protocol

from sheet_orm.domain.value_objects import QueryOptions, Row

Options = QueryOptions | Mapping[str, Any] | None


class QueryEngine(Protocol):
    """Protocol for querying a row-set.

    Example:
        engine.find_many({"where": {"age": {"gt": 30}}, "orderBy": {"key": "age", "order": "asc"}})
        engine.find_unique({"where": {"id": 3}})
        engine.count({"where": {"name": {"startsWith": "A"}}})
    """

    @abstractmethod
    def find_many(self, options: Options = None, **kwargs: Any) -> list[Row]:
        """Return every row the query selects.

        Raises:
            ValidationError: If the options are invalid.
            SourceError: If the row source fails.
        """
        ...

    @abstractmethod
    def find_unique(self, options: Options = None, **kwargs: Any) -> Row | None:
        """Return the only selected row, or None if nothing matched.

        Raises:
            MultipleResultsError: If more than one row is selected.
        """
        ...

    @abstractmethod
    def find_first(self, options: Options = None, **kwargs: Any) -> Row | None:
        """Return the first selected row, or None."""
        ...

    @abstractmethod
    def find_last(self, options: Options = None, **kwargs: Any) -> Row | None:
        """Return the last selected row, or None."""
        ...

    @abstractmethod
    def count(self, options: Options = None, **kwargs: Any) -> int:
        """Return how many rows find_many would return for these options."""
        ...
