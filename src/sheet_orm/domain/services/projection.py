"""Pagination and projection of result rows.

Stages always run in the same order: offset, then limit, then select.
So rows [A, B, C, D, E] with offset=1 and limit=2 give [B, C].
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

from sheet_orm.domain.errors import ValidationError
from sheet_orm.domain.value_objects import QueryOptions, Row, freeze_row


def apply_offset(rows: Sequence[Row], offset: int | None) -> list[Row]:
    """Drop the first `offset` rows."""
    if offset is None:
        return list(rows)
    if offset < 0:
        raise ValidationError(f"Offset must be a non-negative integer, got {offset}")
    return list(rows[offset:])


def apply_limit(rows: Sequence[Row], limit: int | None) -> list[Row]:
    """Keep at most `limit` rows."""
    if limit is None:
        return list(rows)
    if limit < 0:
        raise ValidationError(f"Limit must be a non-negative integer, got {limit}")
    return list(rows[:limit])


def validate_select(select: Sequence[str], schema: AbstractSet[str]) -> None:
    """Check that every selected field exists in the schema.

    An empty schema (empty row-set) accepts any selection.

    Raises:
        ValidationError: Naming every unknown field at once.
    """
    if not schema:
        return
    invalid = [name for name in select if name not in schema]
    if invalid:
        raise ValidationError(f"Invalid select keys: {', '.join(invalid)}")


def apply_select(rows: Sequence[Row], select: Sequence[str] | None) -> list[Row]:
    """Project every row onto the selected fields, in selection order.

    The names are expected to be validated already (see project()).
    None keeps rows unchanged.
    """
    if select is None:
        return list(rows)
    return [freeze_row({name: row.get(name) for name in select}) for row in rows]


def project(
    rows: Sequence[Row],
    options: QueryOptions,
    schema: AbstractSet[str],
) -> list[Row]:
    """Apply offset, limit and select from the query options.

    The selection is validated against the row-set schema before any
    row is sliced, so an unknown field fails even when nothing matched.
    """
    if options.select is not None:
        validate_select(options.select, schema)
    result = apply_offset(rows, options.offset)
    result = apply_limit(result, options.limit)
    return apply_select(result, options.select)
