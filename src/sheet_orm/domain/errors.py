"""Error hierarchy for the sheet query engine.

Errors fall into three kinds:
    - ValidationError: invalid query options or configuration. Raised
      before any row is read.
    - MultipleResultsError: find_unique matched more than one row.
    - SourceError: the row source failed to fetch or decode data. The
      query core surfaces these unchanged and never retries them.
"""

from __future__ import annotations

from typing import Sequence


class SheetORMError(Exception):
    """Base class for all sheet query engine errors."""


class ValidationError(SheetORMError, ValueError):
    """Raised when query options or settings are invalid."""


class MultipleResultsError(ValidationError):
    """Raised when a unique lookup matches more than one row."""

    def __init__(self, count: int) -> None:
        super().__init__(f"find_unique found multiple results ({count} rows)")
        self.count = count


class SourceError(SheetORMError):
    """Raised when the row source cannot supply rows."""


class FetchError(SourceError):
    """Raised when the spreadsheet export cannot be downloaded."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch spreadsheet: {message}")
        self.status_code = status_code


class ParseError(SourceError):
    """Raised when the spreadsheet export cannot be decoded into rows."""

    def __init__(self, errors: Sequence[str]) -> None:
        super().__init__(f"CSV parsing errors: {', '.join(errors)}")
        self.errors = list(errors)
