"""Where-clause evaluation.

A row matches a where clause when every field condition holds. Within an
operator set every operator must hold too, and evaluation stops at the
first one that fails.

Null handling:
    A null (or missing) cell only matches the literal condition None.
    Operator sets never match a null cell, not even {"ne": ...}.

Type handling:
    eq, ne, in and notIn use strict equality and apply to every type.
    gt, gte, lt and lte only constrain a cell when cell and operand are
    both numbers; contains, startsWith and endsWith only when both are
    strings. Otherwise the operator does not constrain.
    An empty operator set constrains nothing.
"""

from __future__ import annotations

from typing import Any, Iterable

from sheet_orm.domain.value_objects import (
    Condition,
    LiteralCondition,
    Operator,
    Row,
    Scalar,
    WhereClause,
    is_numeric,
    strict_equals,
)


def _orderable(value: Scalar, operand: Any) -> bool:
    return is_numeric(value) and is_numeric(operand)


def operator_holds(op: Operator, operand: Any, value: Scalar) -> bool:
    """Evaluate one operator against a non-null cell value."""
    if op is Operator.EQ:
        return strict_equals(value, operand)
    if op is Operator.NE:
        return not strict_equals(value, operand)

    if op is Operator.IN:
        return any(strict_equals(value, candidate) for candidate in operand)
    if op is Operator.NOT_IN:
        return not any(strict_equals(value, candidate) for candidate in operand)

    if op in (Operator.GT, Operator.GTE, Operator.LT, Operator.LTE):
        if not _orderable(value, operand):
            return True
        if op is Operator.GT:
            return value > operand  # type: ignore[operator]
        if op is Operator.GTE:
            return value >= operand  # type: ignore[operator]
        if op is Operator.LT:
            return value < operand  # type: ignore[operator]
        return value <= operand  # type: ignore[operator]

    if not (isinstance(value, str) and isinstance(operand, str)):
        return True
    if op is Operator.CONTAINS:
        return operand in value
    if op is Operator.STARTS_WITH:
        return value.startswith(operand)
    return value.endswith(operand)


def condition_holds(condition: Condition, value: Scalar) -> bool:
    """Check whether a single cell value satisfies a condition."""
    if value is None:
        return isinstance(condition, LiteralCondition) and condition.value is None
    if isinstance(condition, LiteralCondition):
        return strict_equals(value, condition.value)
    return all(
        operator_holds(op, operand, value) for op, operand in condition.operators
    )


def matches(row: Row, where: WhereClause | None) -> bool:
    """Check whether a row satisfies every condition of a where clause.

    Args:
        row: The row to test. Missing fields read as None.
        where: Field name to condition. None or empty matches every row.
    """
    if not where:
        return True
    return all(
        condition_holds(condition, row.get(field_name))
        for field_name, condition in where.items()
    )


def apply_where(rows: Iterable[Row], where: WhereClause | None) -> list[Row]:
    """Return the rows matching a where clause, in input order."""
    if not where:
        return list(rows)
    return [row for row in rows if matches(row, where)]
