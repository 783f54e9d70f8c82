"""Ordering engine: stable multi-key sort over rows.

Sort keys are applied left to right; a tie on one key falls through to
the next, and rows that tie on every key keep their input order.

When an ordering is requested the engine also drops every row holding
a null in any field, not only in the sort keys. This is the
drop_incomplete_rows policy and can be switched off per engine.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from sheet_orm.domain.services.comparator import compare_values
from sheet_orm.domain.value_objects import OrderKey, Row


def is_complete(row: Row) -> bool:
    """Check whether a row has a value in every field."""
    return all(value is not None for value in row.values())


class OrderingEngine:
    """Sorts rows by an order specification.

    Attributes:
        drop_incomplete_rows: Remove rows with any null field whenever an
            order specification is given.
    """

    def __init__(self, drop_incomplete_rows: bool = True) -> None:
        self.drop_incomplete_rows = drop_incomplete_rows

    def order(self, rows: Sequence[Row], order_by: Sequence[OrderKey] | None) -> list[Row]:
        """Return a new, sorted list of rows.

        Args:
            rows: Input rows; left untouched.
            order_by: Sort keys. None or empty returns the rows as given.
        """
        if not order_by:
            return list(rows)

        candidates = [row for row in rows if is_complete(row)] if self.drop_incomplete_rows else rows
        keys = tuple(order_by)

        def compare_rows(a: Row, b: Row) -> int:
            for key in keys:
                result = compare_values(a.get(key.field), b.get(key.field), key.direction)
                if result != 0:
                    return result
            return 0

        # sorted() is stable, so full ties keep input order
        return sorted(candidates, key=cmp_to_key(compare_rows))
