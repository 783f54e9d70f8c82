"""Row and scalar types for the query engine.

A row is a read-only mapping from field name to a scalar. All rows in
one row-set share the same field set; the schema is never declared, it is
taken from the rows themselves and passed explicitly where it is needed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Union

Scalar = Union[str, int, float, bool, None]
"""A single cell value. Empty cells are represented as None."""

Row = Mapping[str, Scalar]
"""One record of the row-set."""


def freeze_row(values: Mapping[str, Scalar]) -> Row:
    """Return a read-only copy of a row mapping."""
    return MappingProxyType(dict(values))


def freeze_rows(rows: Iterable[Mapping[str, Scalar]]) -> list[Row]:
    """Return read-only copies of every row in order."""
    return [freeze_row(row) for row in rows]


def infer_schema(rows: Sequence[Row]) -> frozenset[str]:
    """Return the field names of a row-set.

    The first row is representative of the whole set. An empty row-set
    has an empty schema.
    """
    if not rows:
        return frozenset()
    return frozenset(rows[0].keys())


def is_numeric(value: object) -> bool:
    """Check whether a value is a number (booleans are not numbers here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strict_equals(left: object, right: object) -> bool:
    """Compare two scalars for equality without cross-type coercion.

    Numbers compare by value (1 == 1.0), but a boolean never equals a
    number and a string never equals anything but a string.
    """
    if is_numeric(left) and is_numeric(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right
